"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Configuration management for Tootwire.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax, and the
SERVER_URL / ACCESS_TOKEN / ... environment variables override file values.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

from tootwire._version import __version__
from tootwire.exceptions import ConfigurationLoadError, InvalidConfigurationError
from tootwire.languages import is_iso639_1
from tootwire.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = f"tootwire/{__version__}"
DEFAULT_STATUS_MAX_CHARACTERS = 500
DEFAULT_STATUS_MAX_MEDIAS = 4
DEFAULT_POLL_MAX_OPTIONS = 4

ENV_SERVER_URL = "SERVER_URL"
ENV_ACCESS_TOKEN = "ACCESS_TOKEN"
ENV_USER_AGENT = "USER_AGENT"
ENV_DEFAULT_LANGUAGE = "DEFAULT_LANGUAGE"
ENV_STATUS_MAX_CHARACTERS = "STATUS_MAX_CHARACTERS"
ENV_STATUS_MAX_MEDIAS = "STATUS_MAX_MEDIAS"
ENV_POLL_MAX_OPTIONS = "POLL_MAX_OPTIONS"
ENV_WHITELIST_MODE = "WHITELIST_MODE"

_FALSE_VALUES = ("", "0", "false", "no", "off")


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${MASTODON_TOKEN}" -> value of MASTODON_TOKEN env var
        "${MASTODON_URL:https://mastodon.social}" -> value of MASTODON_URL or the default
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class ServerConfig:
    """Mastodon server connection settings."""

    url: str = ""
    access_token: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    default_language: str = ""  # ISO 639-1, empty for none
    whitelist_mode: bool = False
    timeout_seconds: float = 0.0  # 0 inherits the HTTP client default


@dataclass
class LimitsConfig:
    """Server policy limits enforced before sending a request."""

    status_max_characters: int = DEFAULT_STATUS_MAX_CHARACTERS
    status_max_medias: int = DEFAULT_STATUS_MAX_MEDIAS
    poll_max_options: int = DEFAULT_POLL_MAX_OPTIONS


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class TootwireConfig:
    """Main Tootwire configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.tootwire/config.yaml")


def get_default_config() -> TootwireConfig:
    """
    Get default configuration.

    The server URL and access token have no defaults; they must come from the
    configuration file or the environment.

    Returns:
        TootwireConfig: Default configuration object
    """
    return TootwireConfig()


def load_config(config_path: Optional[str] = None, validate: bool = True) -> TootwireConfig:
    """
    Load configuration from YAML file and environment with validation.

    If the config file is not found, configuration comes from the
    environment and defaults only. Environment variables take precedence
    over file values.

    Args:
        config_path: Path to configuration file. If None, uses default path.
        validate: If True, reject incomplete or invalid configuration.

    Returns:
        TootwireConfig: Loaded configuration

    Raises:
        ConfigurationLoadError: If the file cannot be read or parsed
        InvalidConfigurationError: If configuration is invalid or incomplete
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    config_data: Optional[Dict[str, Any]] = None
    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using environment and defaults")
    else:
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
            logger.debug(f"Loaded configuration from {config_path}")
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
            raise ConfigurationLoadError(
                f"Failed to parse YAML configuration file '{config_path}': {e}"
            ) from e
        except OSError as e:
            logger.error(f"Failed to read configuration file '{config_path}': {e}")
            raise ConfigurationLoadError(
                f"Failed to read configuration file '{config_path}': {e}"
            ) from e

    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping at the top level"
        )

    config_data = _expand_env_vars(config_data)

    config = _build_config_from_dict(config_data)
    _apply_env_overrides(config, os.environ)

    if validate:
        _validate_config(config)
        logger.info(f"Loaded and validated configuration for {config.server.url}")

    return config


def _parse_int(value: Any, name: str) -> int:
    """Parse an integer setting, rejecting booleans and non-numeric text."""
    if isinstance(value, bool):
        raise InvalidConfigurationError(f"'{name}' is not a valid number: {value!r}")
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise InvalidConfigurationError(f"'{name}' is not a valid number: {value!r}") from e


def _parse_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"'{name}' is not a valid number: {value!r}") from e


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in _FALSE_VALUES


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(f"'{name}' section must be a mapping")
    return section


def _build_config_from_dict(config_data: Dict[str, Any]) -> TootwireConfig:
    """
    Build TootwireConfig from dictionary loaded from YAML.

    Merges user configuration with defaults.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        TootwireConfig: Configuration object

    Raises:
        InvalidConfigurationError: If a value has the wrong type
    """
    default_config = get_default_config()

    server_data = _section(config_data, 'server')
    server = ServerConfig(
        url=str(server_data.get('url', default_config.server.url) or ""),
        access_token=str(server_data.get('access_token', default_config.server.access_token) or ""),
        user_agent=str(server_data.get('user_agent', default_config.server.user_agent) or DEFAULT_USER_AGENT),
        default_language=str(server_data.get('default_language', default_config.server.default_language) or ""),
        whitelist_mode=_parse_bool(server_data.get('whitelist_mode', default_config.server.whitelist_mode)),
        timeout_seconds=_parse_float(
            server_data.get('timeout_seconds', default_config.server.timeout_seconds),
            'timeout_seconds',
        ),
    )

    limits_data = _section(config_data, 'limits')
    limits = LimitsConfig(
        status_max_characters=_parse_int(
            limits_data.get('status_max_characters', default_config.limits.status_max_characters),
            'status_max_characters',
        ),
        status_max_medias=_parse_int(
            limits_data.get('status_max_medias', default_config.limits.status_max_medias),
            'status_max_medias',
        ),
        poll_max_options=_parse_int(
            limits_data.get('poll_max_options', default_config.limits.poll_max_options),
            'poll_max_options',
        ),
    )

    logging_data = _section(config_data, 'logging')
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=os.path.expanduser(str(logging_data.get('file', default_config.logging.file) or "")),
        json_format=_parse_bool(logging_data.get('json_format', default_config.logging.json_format)),
    )

    return TootwireConfig(server=server, limits=limits, logging=logging)


def _apply_env_overrides(config: TootwireConfig, environ: Dict[str, str]) -> None:
    """
    Overlay the SERVER_URL / ACCESS_TOKEN / ... environment variables.

    Args:
        config: Configuration to update in place
        environ: Environment mapping (usually os.environ)
    """
    if ENV_SERVER_URL in environ:
        config.server.url = environ[ENV_SERVER_URL]
    if ENV_ACCESS_TOKEN in environ:
        config.server.access_token = environ[ENV_ACCESS_TOKEN]
    if ENV_USER_AGENT in environ:
        config.server.user_agent = environ[ENV_USER_AGENT]
    if ENV_DEFAULT_LANGUAGE in environ:
        config.server.default_language = environ[ENV_DEFAULT_LANGUAGE]
    if ENV_WHITELIST_MODE in environ:
        config.server.whitelist_mode = _parse_bool(environ[ENV_WHITELIST_MODE])
    if ENV_STATUS_MAX_CHARACTERS in environ:
        config.limits.status_max_characters = _parse_int(
            environ[ENV_STATUS_MAX_CHARACTERS], ENV_STATUS_MAX_CHARACTERS
        )
    if ENV_STATUS_MAX_MEDIAS in environ:
        config.limits.status_max_medias = _parse_int(
            environ[ENV_STATUS_MAX_MEDIAS], ENV_STATUS_MAX_MEDIAS
        )
    if ENV_POLL_MAX_OPTIONS in environ:
        config.limits.poll_max_options = _parse_int(
            environ[ENV_POLL_MAX_OPTIONS], ENV_POLL_MAX_OPTIONS
        )


def validate_server_url(url: str) -> None:
    """
    Check that ``url`` is an absolute http(s) URL.

    Raises:
        InvalidConfigurationError: If the URL is empty or malformed
    """
    if not url:
        raise InvalidConfigurationError("server url is required")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidConfigurationError(f"'{url}' is not a valid server URL")


def _validate_config(config: TootwireConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    validate_server_url(config.server.url)

    if not config.server.access_token:
        logger.error("Configuration validation failed: access_token cannot be empty")
        raise InvalidConfigurationError("access_token is required")

    if config.server.default_language and not is_iso639_1(config.server.default_language):
        raise InvalidConfigurationError(
            f"default_language '{config.server.default_language}' is not ISO639-1 compliant"
        )

    if config.server.timeout_seconds < 0:
        raise InvalidConfigurationError(
            f"timeout_seconds cannot be negative, got {config.server.timeout_seconds}"
        )

    for name in ("status_max_characters", "status_max_medias", "poll_max_options"):
        value = getattr(config.limits, name)
        if value < 1:
            raise InvalidConfigurationError(f"{name} must be at least 1, got {value}")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )
