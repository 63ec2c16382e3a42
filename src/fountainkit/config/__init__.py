"""Settings and logging for FountainKit.

Logging is configured from the global settings the first time a module asks
for a logger, so importing the parser never touches handlers. The CLI installs
settings loaded from ``--config`` through :func:`apply_settings`, which
reconfigures logging once and keeps the lazy path from running again.
"""

from __future__ import annotations

from typing import Any

from fountainkit.config.logging import configure_logging
from fountainkit.config.logging import get_logger as _get_logger
from fountainkit.config.settings import (
    FountainKitSettings,
    clear_settings_cache,
    get_settings,
    set_settings,
)
from fountainkit.config.settings import (
    reset_settings as _reset_settings,
)

__all__ = [
    "FountainKitSettings",
    "apply_settings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
    "reset_settings",
    "set_settings",
]

_logging_configured = False
_loggers: dict[str, Any] = {}


def apply_settings(settings: FountainKitSettings | None = None) -> FountainKitSettings:
    """Install settings globally and configure logging from them.

    Args:
        settings: Settings to install. When omitted, the cached settings are
            dropped and re-read from the environment and config files.

    Returns:
        The settings now in effect.
    """
    global _logging_configured
    if settings is None:
        clear_settings_cache()
        settings = get_settings()
    else:
        set_settings(settings)
    configure_logging(settings)
    _logging_configured = True
    return settings


def get_logger(name: str) -> Any:
    """Return the logger for ``name``, configuring logging on first use.

    Args:
        name: Logger name (usually __name__).

    Returns:
        Structlog logger, shared by later calls with the same name.
    """
    global _logging_configured
    logger = _loggers.get(name)
    if logger is None:
        if not _logging_configured:
            configure_logging(get_settings())
            _logging_configured = True
        logger = _loggers[name] = _get_logger(name)
    return logger


def reset_settings() -> None:
    """Drop the global settings and forget that logging was configured."""
    global _logging_configured
    _reset_settings()
    _logging_configured = False
    _loggers.clear()
