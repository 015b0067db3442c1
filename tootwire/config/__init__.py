"""
Configuration management for Tootwire.

Handles loading and validation of configuration files.
"""

from tootwire.config.settings import (
    LimitsConfig,
    LoggingConfig,
    ServerConfig,
    TootwireConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "LimitsConfig",
    "LoggingConfig",
    "ServerConfig",
    "TootwireConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
