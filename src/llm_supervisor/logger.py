#!/usr/bin/env python3
"""
File logging for LLM Supervisor.

Hooks report to the host through ``ctx.log``; this module keeps the
supervisor's own diagnostic trail (mode switches, adapter failures) in
~/.llm-supervisor/llm-supervisor.log.

Log levels:
  0 = OFF
  1 = ERROR
  2 = WARNING (default)
  3 = INFO
  4 = DEBUG
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_LOG_PATH,
    LOG_LEVEL_OFF,
    LOG_LEVEL_ERROR,
    LOG_LEVEL_WARNING,
    LOG_LEVEL_INFO,
    LOG_LEVEL_DEBUG,
)

LEVEL_NAMES = {
    LOG_LEVEL_ERROR: "ERROR",
    LOG_LEVEL_WARNING: "WARNING",
    LOG_LEVEL_INFO: "INFO",
    LOG_LEVEL_DEBUG: "DEBUG",
}


def _get_log_level() -> int:
    """Read ``log_level`` from the config file, WARNING when unset."""
    try:
        if os.path.exists(DEFAULT_CONFIG_PATH):
            with open(DEFAULT_CONFIG_PATH) as f:
                config = json.load(f)
            level = config.get("log_level", LOG_LEVEL_WARNING)
            if isinstance(level, int):
                return level
    except (OSError, ValueError, AttributeError):
        pass
    return LOG_LEVEL_WARNING


def format_line(level: int, component: str, message: str, exc=None) -> str:
    timestamp = datetime.now().isoformat(sep=" ", timespec="seconds")
    line = f"[{timestamp}] [{LEVEL_NAMES.get(level, 'UNKNOWN')}] [{component}] {message}"
    if exc is not None:
        line += f" | Exception: {type(exc).__name__}: {exc}"
    return line


def log(level: int, component: str, message: str, exc: Optional[Exception] = None):
    """
    Append an entry to the supervisor log file.

    Args:
        level: Log level (1=ERROR, 2=WARNING, 3=INFO, 4=DEBUG)
        component: Component name (e.g., "state", "on_llm_error")
        message: Log message
        exc: Optional exception to include
    """
    current_level = _get_log_level()

    if current_level == LOG_LEVEL_OFF or level > current_level:
        return

    try:
        Path(DEFAULT_LOG_PATH).parent.mkdir(parents=True, exist_ok=True)
        with open(DEFAULT_LOG_PATH, "a") as f:
            f.write(format_line(level, component, message, exc) + "\n")
    except OSError:
        pass  # Logging must never break a hook


def log_error(component: str, message: str, exc: Optional[Exception] = None):
    log(LOG_LEVEL_ERROR, component, message, exc)


def log_warning(component: str, message: str, exc: Optional[Exception] = None):
    log(LOG_LEVEL_WARNING, component, message, exc)


def log_info(component: str, message: str):
    log(LOG_LEVEL_INFO, component, message)


def log_debug(component: str, message: str):
    log(LOG_LEVEL_DEBUG, component, message)
