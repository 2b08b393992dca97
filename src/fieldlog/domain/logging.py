from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from fieldlog.domain.severity import Severity


@dataclass(frozen=True, slots=True)
class LogMessage:
    # One emitted record as handed to sinks.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, str] = field(default_factory=dict)
    # Already-resolved severity; sinks render with it instead of looking up level.
    severity: Severity | None = None

    def __post_init__(self) -> None:
        if not self.level:
            raise ValueError("LogMessage requires a non-empty level")
        if not isinstance(self.message, str):
            raise ValueError("LogMessage message must be a string")
        if self.severity is not None and self.severity.name != self.level:
            raise ValueError("LogMessage level must match severity name")
