"""Application configuration helpers."""

from __future__ import annotations

from .env import get_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .lastfm import LASTFM_BASE_URL, LastFmConfig, get_lastfm_config
from .logging import configure_logging

__all__ = [
    "LASTFM_BASE_URL",
    "ConfigurationError",
    "LastFmConfig",
    "MissingConfigurationError",
    "configure_logging",
    "get_env_var",
    "get_lastfm_config",
    "require_env_var",
    "require_env_vars",
]
