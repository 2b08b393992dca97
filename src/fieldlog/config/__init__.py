from .loader import ConfigError, load_config, load_yaml_config, parse_config
from .models import AppConfig, LoggingConfig, SeverityDecl, SinkDecl

__all__ = [
    "ConfigError",
    "load_config",
    "load_yaml_config",
    "parse_config",
    "AppConfig",
    "LoggingConfig",
    "SeverityDecl",
    "SinkDecl",
]
