from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, TypeVar, runtime_checkable

from fieldlog.domain.logging import LogMessage

T = TypeVar("T")


@runtime_checkable
class LogSink(Protocol):
    # Destination for emitted records.
    def emit(self, message: LogMessage) -> None:
        ...


@dataclass(frozen=True, slots=True)
class SinkMeta:
    # Name under which a sink factory is selected from config.
    name: str
    description: str = ""


def sink(*, name: str | None = None, description: str = "") -> Callable[[T], T]:
    # Decorator attaches sink metadata to factories for registry discovery.

    def _decorate(target: T) -> T:
        resolved_name = name
        if not isinstance(resolved_name, str) or not resolved_name:
            resolved_name = getattr(target, "__name__", "")
        setattr(target, "__sink_meta__", SinkMeta(name=resolved_name, description=description))
        return target

    return _decorate


def get_sink_meta(target: object) -> SinkMeta | None:
    meta = getattr(target, "__sink_meta__", None)
    if isinstance(meta, SinkMeta):
        return meta
    return None
