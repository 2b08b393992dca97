from __future__ import annotations

from collections.abc import Mapping

from fieldlog.adapters.contracts import LogSink
from fieldlog.adapters.sinks import StreamLogSink
from fieldlog.domain.fields import FieldSet
from fieldlog.domain.logging import LogMessage
from fieldlog.domain.severity import Severity, SeverityTable

FATAL_EXIT_CODE = 1


class Logger:
    """Leveled logger carrying an immutable set of structured fields.

    ``with_field`` returns a new logger; the receiver keeps its own fields and
    keeps rendering exactly as before. Records below ``min_severity`` are
    dropped, except fatal ones. After a fatal record is emitted the logger
    raises ``SystemExit``.
    """

    def __init__(
        self,
        sink: LogSink | None = None,
        *,
        severities: SeverityTable | None = None,
        min_severity: Severity | str | None = None,
        fields: FieldSet | None = None,
    ) -> None:
        self._severities = severities or SeverityTable.builtin()
        self._sink = sink if sink is not None else StreamLogSink(severities=self._severities)
        self._min_severity = self._severities.resolve(min_severity) if min_severity is not None else None
        self._fields = fields if fields is not None else FieldSet.empty()

    @property
    def fields(self) -> FieldSet:
        return self._fields

    @property
    def sink(self) -> LogSink:
        return self._sink

    @property
    def severities(self) -> SeverityTable:
        return self._severities

    def with_field(self, name: str, value: str) -> Logger:
        return self._derive(self._fields.with_field(name, value))

    def with_fields(self, fields: Mapping[str, str]) -> Logger:
        derived = self._fields
        for name, value in fields.items():
            derived = derived.with_field(name, value)
        return self._derive(derived)

    def _derive(self, fields: FieldSet) -> Logger:
        return Logger(
            self._sink,
            severities=self._severities,
            min_severity=self._min_severity,
            fields=fields,
        )

    def is_enabled_for(self, severity: Severity | str) -> bool:
        resolved = self._severities.resolve(severity)
        if resolved.fatal or self._min_severity is None:
            return True
        return resolved.rank >= self._min_severity.rank

    def log(self, severity: Severity | str, template: str, *args: object) -> None:
        resolved = self._severities.resolve(severity)
        if not self.is_enabled_for(resolved):
            return
        message = template % args if args else template
        self._sink.emit(
            LogMessage(level=resolved.name, message=message, fields=self._fields.as_dict(), severity=resolved)
        )
        if resolved.fatal:
            raise SystemExit(FATAL_EXIT_CODE)

    def debug(self, template: str, *args: object) -> None:
        self.log("DEBUG", template, *args)

    def info(self, template: str, *args: object) -> None:
        self.log("INFO", template, *args)

    def warn(self, template: str, *args: object) -> None:
        self.log("WARN", template, *args)

    def error(self, template: str, *args: object) -> None:
        self.log("ERROR", template, *args)

    def fatal(self, template: str, *args: object) -> None:
        self.log("FATAL", template, *args)
