from __future__ import annotations

from dataclasses import dataclass

# ANSI SGR sequences by color name; "reset" closes any open style.
ANSI_CODES: dict[str, str] = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "reset": "\033[0m",
}

RESET = ANSI_CODES["reset"]


def ansi(color: str) -> str:
    try:
        return ANSI_CODES[color]
    except KeyError:
        raise ValueError(f"Unknown color: {color}") from None


@dataclass(frozen=True, slots=True)
class StyledText:
    # Text that may carry escape sequences, plus the width it occupies on screen.
    text: str
    visible_length: int

    @classmethod
    def plain(cls, text: str) -> StyledText:
        return cls(text, len(text))

    @classmethod
    def colored(cls, text: str, color: str | None) -> StyledText:
        if color is None:
            return cls.plain(text)
        return cls(ansi(color) + text + RESET, len(text))

    def __add__(self, other: StyledText | str) -> StyledText:
        if isinstance(other, str):
            other = StyledText.plain(other)
        if not isinstance(other, StyledText):
            return NotImplemented
        return StyledText(self.text + other.text, self.visible_length + other.visible_length)

    def __str__(self) -> str:
        return self.text
