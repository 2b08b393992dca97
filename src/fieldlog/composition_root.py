from __future__ import annotations

from fieldlog.adapters.contracts import LogSink
from fieldlog.adapters.registry import SinkRegistry, SinkRegistryError, default_registry
from fieldlog.config.loader import ConfigError
from fieldlog.config.models import AppConfig, LoggingConfig
from fieldlog.domain.fields import FieldSet
from fieldlog.domain.severity import Severity, SeverityTable, UnknownSeverityError
from fieldlog.formatting.formatter import FormatStyle
from fieldlog.logger import Logger


def build_severity_table(config: LoggingConfig) -> SeverityTable:
    table = SeverityTable.builtin()
    for decl in config.severities:
        table = table.extend(
            Severity(name=decl.name, tag=decl.tag or f"[{decl.name}]", color=decl.color, rank=decl.rank, fatal=decl.fatal)
        )
    try:
        return table.with_default(config.default_severity)
    except UnknownSeverityError as exc:
        raise ConfigError(f"logging.default_severity: {exc}") from exc


def build_style(config: LoggingConfig) -> FormatStyle:
    return FormatStyle(color=config.color, line_width=config.line_width)


def build_sink(
    config: LoggingConfig,
    *,
    severities: SeverityTable,
    registry: SinkRegistry | None = None,
) -> LogSink:
    registry = registry or default_registry()
    try:
        return registry.build(
            config.sink.name,
            dict(config.sink.settings),
            style=build_style(config),
            severities=severities,
        )
    except SinkRegistryError as exc:
        raise ConfigError(f"logging.sink: {exc}") from exc


def build_logger(
    config: AppConfig | None = None,
    *,
    registry: SinkRegistry | None = None,
    sink: LogSink | None = None,
) -> Logger:
    # Composition root: config -> severity table, style, sink, logger.
    logging_config = (config or AppConfig()).logging
    severities = build_severity_table(logging_config)
    if sink is None:
        sink = build_sink(logging_config, severities=severities, registry=registry)
    try:
        return Logger(
            sink,
            severities=severities,
            min_severity=logging_config.level,
            fields=FieldSet.empty(placeholder=logging_config.empty_placeholder),
        )
    except UnknownSeverityError as exc:
        raise ConfigError(f"logging.level: {exc}") from exc
