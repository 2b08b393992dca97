from .fields import EMPTY_PLACEHOLDER, FieldSet, empty, with_field
from .logging import LogMessage
from .severity import (
    BUILTIN_SEVERITIES,
    DEBUG,
    ERROR,
    FATAL,
    INFO,
    WARN,
    Severity,
    SeverityTable,
    UnknownSeverityError,
)

__all__ = [
    "EMPTY_PLACEHOLDER",
    "FieldSet",
    "empty",
    "with_field",
    "LogMessage",
    "BUILTIN_SEVERITIES",
    "DEBUG",
    "INFO",
    "WARN",
    "ERROR",
    "FATAL",
    "Severity",
    "SeverityTable",
    "UnknownSeverityError",
]
