from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from fieldlog.composition_root import build_logger
from fieldlog.config.loader import ConfigError, load_config, parse_config
from fieldlog.config.models import AppConfig

EXIT_OK = 0
EXIT_USAGE = 2


def _field_arg(value: str) -> tuple[str, str]:
    name, sep, field_value = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return name, field_value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fieldlog",
        description="Render one log record with aligned, wrapped structured fields",
    )
    parser.add_argument("message", help="Log message text")
    parser.add_argument("--config", type=Path, help="Path to YAML config")
    parser.add_argument("--severity", default="INFO", help="Severity name (default: INFO)")
    parser.add_argument(
        "--field",
        dest="fields",
        action="append",
        type=_field_arg,
        default=[],
        metavar="KEY=VALUE",
        help="Structured field; may be repeated",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--width", type=int, help="Override total line width")
    parser.add_argument("--stream", choices=["stderr", "stdout"], help="Override console sink stream")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    # Overrides go back through validation so CLI values obey config rules.
    if not (args.no_color or args.width is not None or args.stream):
        return config
    data = config.model_dump()
    logging = data["logging"]
    if args.no_color:
        logging["color"] = False
    if args.width is not None:
        logging["line_width"] = args.width
    if args.stream:
        sink = logging["sink"]
        if sink["name"] != "console":
            raise ConfigError("--stream requires the console sink")
        sink["settings"]["stream"] = args.stream
    return parse_config(data)


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = apply_cli_overrides(load_config(args.config), args)
        logger = build_logger(config)
        severity = logger.severities.resolve(args.severity)
    except ValueError as exc:
        print(f"fieldlog: error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    for name, value in args.fields:
        logger = logger.with_field(name, value)
    # Fatal severities raise SystemExit from the logger after emitting.
    logger.log(severity, args.message)
    return EXIT_OK
