from .contracts import LogSink, SinkMeta, get_sink_meta, sink
from .registry import SinkRegistry, SinkRegistryError, default_registry
from .sinks import JsonlLogSink, MemoryLogSink, StreamLogSink, console_sink, jsonl_sink, memory_sink

__all__ = [
    "LogSink",
    "SinkMeta",
    "get_sink_meta",
    "sink",
    "SinkRegistry",
    "SinkRegistryError",
    "default_registry",
    "JsonlLogSink",
    "MemoryLogSink",
    "StreamLogSink",
    "console_sink",
    "jsonl_sink",
    "memory_sink",
]
