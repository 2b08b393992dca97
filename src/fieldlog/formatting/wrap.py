from __future__ import annotations


def normalize_value(value: str) -> str:
    # Tabs would break column alignment, so each one becomes two spaces.
    return value.replace("\t", "  ")


def wrap_text(value: str, width: int) -> list[str]:
    """Greedy word wrap that backtracks to the last space once ``width`` is reached.

    ``\\n`` always starts a new line. A token longer than ``width`` is never split;
    the line keeps growing until a later space gives it somewhere to break.
    Trailing spaces are trimmed from every produced line.
    """
    lines: list[str] = []
    current = ""
    last_space = -1
    for char in value:
        if char == "\n":
            lines.append(current)
            current = ""
            last_space = -1
            continue
        if len(current) >= width and last_space != -1:
            lines.append(current[:last_space])
            current = current[last_space + 1 :]
            last_space = -1
        if char == " ":
            last_space = len(current)
        current += char
    if current:
        lines.append(current)
    if not lines:
        lines.append("")
    return [line.rstrip(" ") for line in lines]
