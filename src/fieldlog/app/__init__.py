from .cli import apply_cli_overrides, build_parser, parse_args, run

__all__ = ["apply_cli_overrides", "build_parser", "parse_args", "run"]
