#!/usr/bin/env python3
"""
Configuration resolution for LLM Supervisor.

Hooks receive their configuration from the host (``ctx.config``); the CLI
reads it from ~/.llm-supervisor/config.json. Both go through
``resolve_config`` so missing keys fall back to DEFAULT_CONFIG.
"""

import json
import os
from collections.abc import Mapping
from typing import Any, Dict, List

from .constants import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from .logger import log_warning


def _as_dict(config: Any) -> Dict[str, Any]:
    if config is None:
        return {}
    if isinstance(config, Mapping):
        return dict(config)
    # Attribute-style config objects from the host
    return {
        key: getattr(config, key) for key in DEFAULT_CONFIG if hasattr(config, key)
    }


def _code_intents(value: Any) -> List[str]:
    """Copy of the intent list; non-list values fall back to the defaults."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(intent) for intent in value]
    log_warning(
        "config", f"codeIntents must be a list, got {value!r}; using defaults"
    )
    return list(DEFAULT_CONFIG["codeIntents"])


def resolve_config(overrides: Any = None) -> Dict[str, Any]:
    """
    Merge host-provided config over the defaults.

    Keys explicitly set to None are treated as unset.

    Args:
        overrides: Mapping (or attribute object) supplied by the host

    Returns:
        New dict containing every key of DEFAULT_CONFIG
    """
    resolved = dict(DEFAULT_CONFIG)
    for key, value in _as_dict(overrides).items():
        if value is not None:
            resolved[key] = value
    resolved["codeIntents"] = _code_intents(resolved["codeIntents"])
    return resolved


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from file, falling back to defaults."""
    try:
        if os.path.exists(config_path):
            with open(config_path) as f:
                data = json.load(f)
            if isinstance(data, dict):
                return resolve_config(data)
            log_warning("config", f"Ignoring non-object config in {config_path}")
    except (OSError, ValueError) as e:
        log_warning("config", "Failed to load config, using defaults", e)

    return resolve_config()
