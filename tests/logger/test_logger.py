from __future__ import annotations

import io

import pytest

from fieldlog.adapters.sinks import MemoryLogSink, StreamLogSink
from fieldlog.domain.severity import Severity, SeverityTable
from fieldlog.logger import Logger

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"


def _logger() -> tuple[Logger, io.StringIO]:
    output = io.StringIO()
    return Logger(StreamLogSink(output)), output


def test_logger_without_fields() -> None:
    log, output = _logger()
    log.info("hello %s", "world")
    log.warn("warn %s", "world")
    assert output.getvalue() == f"{GREEN}[INFO] {RESET}hello world\n{RED}[WARN] {RESET}warn world\n"


def test_with_field_creates_new_instance() -> None:
    # Deriving a logger must not leak fields back into the original.
    log, output = _logger()
    _ = log.with_field("key", "value")
    log.info("hello %s", "world")
    assert output.getvalue() == f"{GREEN}[INFO] {RESET}hello world\n"


def test_logger_with_fields() -> None:
    log, output = _logger()
    log = log.with_field("key1", "value1")
    log = log.with_field("key2", "value2")
    log.info("hello %s", "world")
    assert output.getvalue() == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}key1{RESET} = value1\n"
        f"  {YELLOW}key2{RESET} = value2\n"
    )


def test_logger_with_empty_field() -> None:
    log, output = _logger()
    log.with_field("empty-key", "").with_field("key", "value2").info("hello world")
    assert output.getvalue() == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}empty-key{RESET} = <empty>\n"
        f"  {YELLOW}key{RESET}       = value2\n"
    )


def test_message_without_args_is_not_interpolated() -> None:
    sink = MemoryLogSink()
    Logger(sink).info("100% done")
    assert sink.blocks == [f"{GREEN}[INFO] {RESET}100% done"]


def test_with_fields_adds_all_entries() -> None:
    sink = MemoryLogSink()
    log = Logger(sink).with_fields({"b": "2", "a": "1"})
    assert log.fields.names() == ["a", "b"]


def test_fatal_emits_then_exits() -> None:
    sink = MemoryLogSink()
    with pytest.raises(SystemExit) as exc_info:
        Logger(sink).with_field("reason", "disk full").fatal("cannot continue")
    assert exc_info.value.code == 1
    assert sink.blocks[0].startswith(f"{RED}[FATAL] {RESET}cannot continue")


def test_records_below_min_severity_are_dropped() -> None:
    sink = MemoryLogSink()
    log = Logger(sink, min_severity="WARN")
    log.debug("d")
    log.info("i")
    log.error("e")
    assert len(sink.blocks) == 1
    assert "e" in sink.blocks[0]


def test_fatal_ignores_min_severity() -> None:
    fatal_only = Severity(name="PANIC", tag="[PANIC]", color="magenta", rank=1, fatal=True)
    table = SeverityTable.builtin().extend(fatal_only)
    sink = MemoryLogSink(severities=table)
    log = Logger(sink, severities=table, min_severity="ERROR")
    with pytest.raises(SystemExit):
        log.log("panic", "stop")
    assert sink.blocks == ["\033[35m[PANIC] " + RESET + "stop"]


def test_min_severity_is_kept_by_derived_loggers() -> None:
    sink = MemoryLogSink()
    log = Logger(sink, min_severity="ERROR").with_field("k", "v")
    log.info("skipped")
    assert sink.blocks == []


def test_unknown_severity_uses_table_default() -> None:
    sink = MemoryLogSink()
    table = SeverityTable.builtin().with_default("INFO")
    Logger(sink, severities=table).log("trace", "hi")
    assert sink.blocks == [f"{GREEN}[INFO] {RESET}hi"]


def test_default_sink_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    Logger().info("to stderr")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"{GREEN}[INFO] {RESET}to stderr\n"


def test_log_accepts_severity_missing_from_both_tables() -> None:
    # The resolved severity travels with the record, so the sink never looks it up again.
    notice = Severity(name="NOTICE", tag="[NOTICE]", color="cyan", rank=25)
    sink = MemoryLogSink()
    Logger(sink).log(notice, "hi")
    assert sink.blocks == ["\033[36m[NOTICE] " + RESET + "hi"]
