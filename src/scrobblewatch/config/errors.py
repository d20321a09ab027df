"""Errors raised while loading scrobblewatch settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A setting is present but cannot be used."""


class MissingConfigurationError(ConfigurationError):
    """A setting the CLI needs is unset or blank in the environment."""
