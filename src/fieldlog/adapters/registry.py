from __future__ import annotations

from collections.abc import Iterable
from typing import Callable

from fieldlog.adapters.contracts import LogSink, SinkMeta, get_sink_meta
from fieldlog.adapters.sinks import console_sink, jsonl_sink, memory_sink
from fieldlog.domain.severity import SeverityTable
from fieldlog.formatting.formatter import FormatStyle

SinkFactory = Callable[..., LogSink]


class SinkRegistryError(ValueError):
    # Raised when sink lookup/build fails.
    pass


class SinkRegistry:
    # Registry of sink factories keyed by name.
    def __init__(self) -> None:
        self._factories: dict[str, SinkFactory] = {}
        self._meta: dict[str, SinkMeta | None] = {}

    @classmethod
    def from_factories(cls, factories: Iterable[SinkFactory]) -> SinkRegistry:
        # Factories must carry @sink metadata to be registered by discovery.
        registry = cls()
        for factory in factories:
            meta = get_sink_meta(factory)
            if meta is None:
                raise SinkRegistryError(f"Sink factory is missing @sink metadata: {factory!r}")
            registry.register(meta.name, factory)
        return registry

    def register(self, name: str, factory: SinkFactory) -> None:
        if not isinstance(name, str) or not name:
            raise SinkRegistryError("Sink name must be a non-empty string")
        if name in self._factories:
            raise SinkRegistryError(f"Duplicate sink registration: {name}")
        self._factories[name] = factory
        self._meta[name] = get_sink_meta(factory)

    def build(
        self,
        name: str,
        settings: dict[str, object] | None = None,
        *,
        style: FormatStyle | None = None,
        severities: SeverityTable | None = None,
    ) -> LogSink:
        settings = {} if settings is None else settings
        if not isinstance(settings, dict):
            raise SinkRegistryError("Sink settings must be a mapping")
        if name not in self._factories:
            raise SinkRegistryError(f"Unknown sink: {name}")
        try:
            return self._factories[name](settings, style=style, severities=severities)
        except ValueError as exc:
            raise SinkRegistryError(str(exc)) from exc

    def names(self) -> list[str]:
        return sorted(self._factories)

    def get_meta(self, name: str) -> SinkMeta | None:
        return self._meta.get(name)


def default_registry() -> SinkRegistry:
    return SinkRegistry.from_factories([console_sink, jsonl_sink, memory_sink])
