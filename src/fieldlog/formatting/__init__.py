from .formatter import DEFAULT_LINE_WIDTH, FieldFormatter, FormatStyle, render
from .styled import ANSI_CODES, RESET, StyledText, ansi
from .wrap import normalize_value, wrap_text

__all__ = [
    "DEFAULT_LINE_WIDTH",
    "FieldFormatter",
    "FormatStyle",
    "render",
    "ANSI_CODES",
    "RESET",
    "StyledText",
    "ansi",
    "normalize_value",
    "wrap_text",
]
