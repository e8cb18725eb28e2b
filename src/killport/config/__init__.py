"""Configuration helpers and settings."""

from .errors import ConfigurationError
from .runtime import env_bool, env_str
from .settings import KillportSettings, load_settings

__all__ = [
    "ConfigurationError",
    "KillportSettings",
    "env_bool",
    "env_str",
    "load_settings",
]
