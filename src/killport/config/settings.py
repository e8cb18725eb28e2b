"""Settings read from the environment before arguments are parsed."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ConfigurationError
from .runtime import env_bool, env_str

AUTO_CONFIRM_ENV = "KILLPORT_AUTO_CONFIRM"
LOG_LEVEL_ENV = "KILLPORT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class KillportSettings:
    auto_confirm: bool
    log_level: int


def load_settings() -> KillportSettings:
    """
    Read killport settings from the environment.

    Raises:
        ConfigurationError: If a variable is set to a value that cannot be used
    """
    auto_confirm = bool(env_bool(AUTO_CONFIRM_ENV, or_value=False))
    level_name = (env_str(LOG_LEVEL_ENV, or_value=DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    if level_name not in _VALID_LOG_LEVELS:
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, level_name, f"Expected one of {', '.join(_VALID_LOG_LEVELS)}")
    return KillportSettings(auto_confirm=auto_confirm, log_level=getattr(logging, level_name))


__all__ = ["AUTO_CONFIRM_ENV", "DEFAULT_LOG_LEVEL", "KillportSettings", "LOG_LEVEL_ENV", "load_settings"]
