"""Configuration module for loading and accessing transport and parser settings."""

from httphelper.exceptions import ConfigurationError

from .loader import Config, config

__all__ = ["Config", "ConfigurationError", "config"]
