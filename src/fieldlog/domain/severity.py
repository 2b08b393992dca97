from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


class UnknownSeverityError(ValueError):
    # Raised when a severity name is not in the table and no default is configured.
    pass


@dataclass(frozen=True, slots=True)
class Severity:
    # One log level: display tag, color name, ordering rank and termination policy.
    name: str
    tag: str
    color: str
    rank: int
    fatal: bool = False

    def __post_init__(self) -> None:
        if not self.name or not self.tag:
            raise ValueError("Severity requires non-empty name/tag")
        if self.name != self.name.upper():
            raise ValueError(f"Severity name must be upper-case: {self.name}")


DEBUG = Severity(name="DEBUG", tag="[DEBUG]", color="cyan", rank=10)
INFO = Severity(name="INFO", tag="[INFO]", color="green", rank=20)
WARN = Severity(name="WARN", tag="[WARN]", color="red", rank=30)
ERROR = Severity(name="ERROR", tag="[ERROR]", color="red", rank=40)
FATAL = Severity(name="FATAL", tag="[FATAL]", color="red", rank=50, fatal=True)

BUILTIN_SEVERITIES: tuple[Severity, ...] = (DEBUG, INFO, WARN, ERROR, FATAL)

_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}


@dataclass(frozen=True, slots=True)
class SeverityTable:
    # Closed name -> Severity lookup; extending it returns a new table.
    _by_name: Mapping[str, Severity] = field(default_factory=lambda: MappingProxyType({}))
    default: Severity | None = None

    @classmethod
    def builtin(cls, *, default: Severity | None = None) -> SeverityTable:
        return cls.of(BUILTIN_SEVERITIES, default=default)

    @classmethod
    def of(cls, severities: Iterable[Severity], *, default: Severity | None = None) -> SeverityTable:
        by_name: dict[str, Severity] = {}
        for severity in severities:
            if severity.name in by_name:
                raise ValueError(f"Duplicate severity: {severity.name}")
            by_name[severity.name] = severity
        return cls(MappingProxyType(by_name), default)

    def extend(self, severity: Severity) -> SeverityTable:
        by_name = dict(self._by_name)
        by_name[severity.name] = severity
        return SeverityTable(MappingProxyType(by_name), self.default)

    def with_default(self, name: str | None) -> SeverityTable:
        if name is None:
            return SeverityTable(self._by_name, None)
        return SeverityTable(self._by_name, self._lookup(name))

    def resolve(self, value: Severity | str) -> Severity:
        if isinstance(value, Severity):
            return value
        try:
            return self._lookup(value)
        except UnknownSeverityError:
            if self.default is not None:
                return self.default
            raise

    def _lookup(self, name: str) -> Severity:
        key = _normalize_name(name)
        if key not in self._by_name:
            raise UnknownSeverityError(f"Unknown severity: {name}")
        return self._by_name[key]

    def __iter__(self) -> Iterator[Severity]:
        return iter(sorted(self._by_name.values(), key=lambda severity: severity.rank))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize_name(name) in self._by_name


def _normalize_name(name: str) -> str:
    key = name.strip().upper()
    return _ALIASES.get(key, key)
