"""Static configuration of the composition engine."""
from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", "f"}
_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


def _get_env_flag(name: str, default: bool = False) -> bool:
    """Return a boolean read from an environment variable."""

    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed >= 1 else default


def _get_env_choice(name: str, choices: set[str], default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized if normalized in choices else default


@dataclass(frozen=True)
class Settings:
    """Engine settings read from the environment."""

    STRICT_KIND_CHECKS: bool = True
    MAX_CHAIN_DEPTH: int = 32
    RESOLUTION_CACHE: bool = True
    RESOLUTION_CACHE_SIZE: int = 128
    LOG_LEVEL: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        STRICT_KIND_CHECKS=_get_env_flag("STYLECOMPOSER_STRICT_KINDS", default=True),
        MAX_CHAIN_DEPTH=_get_env_int("STYLECOMPOSER_MAX_CHAIN_DEPTH", 32),
        RESOLUTION_CACHE=_get_env_flag("STYLECOMPOSER_CACHE", default=True),
        RESOLUTION_CACHE_SIZE=_get_env_int("STYLECOMPOSER_CACHE_SIZE", 128),
        LOG_LEVEL=_get_env_choice("STYLECOMPOSER_LOG_LEVEL", _LOG_LEVELS, "info").upper(),
    )


settings = load_settings()


__all__ = ["Settings", "load_settings", "settings"]
