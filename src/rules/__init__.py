"""Configuration rules for html-import-inliner."""

from rules.config import (
    ConfigError,
    ConfigMessage,
    ConfigResult,
    InlinerConfig,
    load_config,
    validate_config,
)

__all__ = [
    "ConfigError",
    "ConfigMessage",
    "ConfigResult",
    "InlinerConfig",
    "load_config",
    "validate_config",
]
