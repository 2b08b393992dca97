from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fieldlog.domain.fields import EMPTY_PLACEHOLDER
from fieldlog.formatting.formatter import DEFAULT_LINE_WIDTH
from fieldlog.formatting.styled import ANSI_CODES

# Config models map the YAML "logging" section to typed structures.

_COLORS = sorted(name for name in ANSI_CODES if name != "reset")
MIN_LINE_WIDTH = 20


class SeverityDecl(BaseModel):
    # Extra severity declared in config on top of the built-in levels.
    model_config = ConfigDict(extra="forbid")
    name: str
    tag: str | None = None
    color: str = "green"
    rank: int
    fatal: bool = False

    @field_validator("name")
    @classmethod
    def _upper_name(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("severity name must be non-empty")
        return value

    @field_validator("color")
    @classmethod
    def _known_color(cls, value: str) -> str:
        if value not in _COLORS:
            raise ValueError(f"color must be one of: {_COLORS}")
        return value

    @model_validator(mode="after")
    def _default_tag(self) -> SeverityDecl:
        if not self.tag:
            self.tag = f"[{self.name}]"
        return self


class SinkDecl(BaseModel):
    # Sink selection by registry name plus factory settings.
    model_config = ConfigDict(extra="forbid")
    name: str = "console"
    settings: dict[str, Any] = Field(default_factory=dict)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: str | None = None
    color: bool = True
    line_width: int = Field(default=DEFAULT_LINE_WIDTH, ge=MIN_LINE_WIDTH)
    empty_placeholder: str = Field(default=EMPTY_PLACEHOLDER, min_length=1)
    default_severity: str | None = None
    severities: list[SeverityDecl] = Field(default_factory=list)
    sink: SinkDecl = Field(default_factory=SinkDecl)


class AppConfig(BaseModel):
    # Root document; unknown top-level keys are rejected.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
