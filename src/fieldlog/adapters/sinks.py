from __future__ import annotations

import json
import sys
from datetime import UTC
from pathlib import Path
from typing import TextIO

from fieldlog.adapters.contracts import sink
from fieldlog.domain.fields import FieldSet
from fieldlog.domain.logging import LogMessage
from fieldlog.domain.severity import SeverityTable
from fieldlog.formatting.formatter import FieldFormatter, FormatStyle


class StreamLogSink:
    # Renders records as aligned text blocks onto a text stream.
    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        style: FormatStyle | None = None,
        severities: SeverityTable | None = None,
    ) -> None:
        self._stream = stream
        self._style = style or FormatStyle()
        self._severities = severities or SeverityTable.builtin()

    @property
    def stream(self) -> TextIO:
        # Resolved per call so redirected sys.stderr is honored.
        return self._stream if self._stream is not None else sys.stderr

    def format(self, message: LogMessage) -> str:
        severity = message.severity or self._severities.resolve(message.level)
        formatter = FieldFormatter(FieldSet.of(message.fields), self._style)
        return formatter.render(severity, message.message)

    def emit(self, message: LogMessage) -> None:
        self.write_block(self.format(message))

    def write_block(self, block: str) -> None:
        stream = self.stream
        stream.write(block + "\n")
        stream.flush()


class MemoryLogSink(StreamLogSink):
    # Keeps rendered blocks in memory instead of writing them out.
    def __init__(self, *, style: FormatStyle | None = None, severities: SeverityTable | None = None) -> None:
        super().__init__(None, style=style, severities=severities)
        self.blocks: list[str] = []

    def write_block(self, block: str) -> None:
        self.blocks.append(block)

    def getvalue(self) -> str:
        return "".join(block + "\n" for block in self.blocks)


class JsonlLogSink:
    # Appends one JSON object per record; the file is only held open for a single write.
    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, message: LogMessage) -> None:
        line = json.dumps(record_to_json(message), separators=(",", ":"), ensure_ascii=False)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")


_STREAMS = {"stderr", "stdout"}


@sink(name="console", description="Aligned, colorized text on stderr or stdout")
def console_sink(
    settings: dict[str, object],
    *,
    style: FormatStyle | None = None,
    severities: SeverityTable | None = None,
) -> StreamLogSink:
    stream_name = settings.get("stream", "stderr")
    if stream_name not in _STREAMS:
        raise ValueError(f"console.settings.stream must be one of: {sorted(_STREAMS)}")
    stream = sys.stdout if stream_name == "stdout" else None
    return StreamLogSink(stream, style=style, severities=severities)


@sink(name="memory", description="Rendered blocks kept in a list")
def memory_sink(
    settings: dict[str, object],
    *,
    style: FormatStyle | None = None,
    severities: SeverityTable | None = None,
) -> MemoryLogSink:
    _ = settings
    return MemoryLogSink(style=style, severities=severities)


@sink(name="jsonl", description="One JSON object per record appended to a file")
def jsonl_sink(
    settings: dict[str, object],
    *,
    style: FormatStyle | None = None,
    severities: SeverityTable | None = None,
) -> JsonlLogSink:
    _ = (style, severities)
    path = settings.get("path")
    if not isinstance(path, str) or not path:
        raise ValueError("jsonl.settings.path must be a non-empty string")
    return JsonlLogSink(Path(path))


def record_to_json(message: LogMessage) -> dict[str, object]:
    # Fields are emitted in the same sorted order the console block uses.
    stamp = message.timestamp.astimezone(UTC).isoformat(timespec="microseconds")
    return {
        "ts": stamp.removesuffix("+00:00") + "Z",
        "level": message.level,
        "fatal": bool(message.severity and message.severity.fatal),
        "msg": message.message,
        "fields": dict(sorted(message.fields.items())),
    }
