from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from fieldlog.domain.fields import FieldSet
from fieldlog.domain.severity import Severity
from fieldlog.formatting.styled import StyledText
from fieldlog.formatting.wrap import normalize_value, wrap_text

DEFAULT_LINE_WIDTH = 80
KEY_COLOR = "yellow"


@dataclass(frozen=True, slots=True)
class FormatStyle:
    # Presentation knobs shared by every formatter built from one config.
    color: bool = True
    line_width: int = DEFAULT_LINE_WIDTH
    key_color: str = KEY_COLOR

    def __post_init__(self) -> None:
        if self.line_width <= 0:
            raise ValueError("line_width must be positive")

    def paint(self, text: str, color: str | None) -> StyledText:
        return StyledText.colored(text, color if self.color else None)


def render_severity_line(severity: Severity, message: str, style: FormatStyle) -> str:
    # The reset lands after the tag's trailing space; the message stays unstyled.
    if style.color:
        return style.paint(severity.tag + " ", severity.color).text + message
    return severity.tag + " " + message


def render_fields(fields: FieldSet, style: FormatStyle) -> list[str]:
    max_key_length = fields.max_name_length()
    results: list[str] = []
    for name in fields.names():
        padding = " " * (max_key_length - len(name) + 1)
        prefix = StyledText.plain("  ") + style.paint(name, style.key_color) + padding + "= "
        body = wrap_text(normalize_value(fields[name]), style.line_width - prefix.visible_length)
        results.append(prefix.text + body[0])
        indent = " " * prefix.visible_length
        results.extend(indent + line for line in body[1:])
    return results


def render(
    severity: Severity,
    message: str,
    fields: FieldSet,
    style: FormatStyle | None = None,
) -> str:
    """Render one record: severity line, then one aligned ``key = value`` block per field."""
    style = style or FormatStyle()
    lines = [render_severity_line(severity, message, style)]
    lines.extend(render_fields(fields, style))
    return "\n".join(lines)


@dataclass(frozen=True)
class FieldFormatter:
    """Formatter bound to one FieldSet.

    ``with_field`` returns a new formatter and leaves this one untouched, so
    formatters can be shared freely. The rendered field block is computed once
    per formatter value.
    """

    fields: FieldSet = field(default_factory=FieldSet.empty)
    style: FormatStyle = field(default_factory=FormatStyle)

    def with_field(self, name: str, value: str) -> FieldFormatter:
        return FieldFormatter(self.fields.with_field(name, value), self.style)

    @cached_property
    def field_block(self) -> str:
        return "\n".join(render_fields(self.fields, self.style))

    def render(self, severity: Severity, message: str) -> str:
        head = render_severity_line(severity, message, self.style)
        if not self.fields:
            return head
        return head + "\n" + self.field_block
