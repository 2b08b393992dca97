from .composition_root import build_logger
from .domain import FATAL, INFO, WARN, FieldSet, LogMessage, Severity, SeverityTable, empty, with_field
from .formatting import FieldFormatter, FormatStyle, render
from .logger import Logger

__all__ = [
    "build_logger",
    "FATAL",
    "INFO",
    "WARN",
    "FieldSet",
    "LogMessage",
    "Severity",
    "SeverityTable",
    "empty",
    "with_field",
    "FieldFormatter",
    "FormatStyle",
    "render",
    "Logger",
]
