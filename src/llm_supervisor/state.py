#!/usr/bin/env python3
"""
Supervisor state accessor.

A single record is kept in host key/value storage under STATE_KEY:
- mode: "cloud" or "local"
- since: epoch milliseconds when the current mode was entered
- lastError: message of the error that caused the last switch to local

Hooks read the record, decide, and optionally write it back without any
locking. The host must serialize hook invocations for a given context.
"""

import json
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    MODE_CLOUD,
    STATE_KEY,
    VALID_MODES,
)
from .logger import log_debug, log_warning

MS_PER_MINUTE = 60_000


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def default_state() -> Dict[str, Any]:
    """State assumed when nothing has been stored yet."""
    return {"mode": MODE_CLOUD, "since": 0, "lastError": None}


def get_state(ctx) -> Dict[str, Any]:
    """
    Read the supervisor record from ``ctx.state``.

    Returns:
        State dict; the default state if the record is absent or unusable
    """
    stored = ctx.state.get(STATE_KEY)

    if stored is None:
        return default_state()

    if not isinstance(stored, dict) or stored.get("mode") not in VALID_MODES:
        log_warning("state", f"Ignoring malformed state record: {stored!r}")
        return default_state()

    return {**default_state(), **stored}


def set_state(ctx, fields: Dict[str, Any], merge: bool = True) -> Dict[str, Any]:
    """
    Persist state fields.

    Args:
        ctx: Host context exposing ``state.get/set``
        fields: Fields to write
        merge: Merge into the current record (True) or replace it (False)

    Returns:
        The record as written
    """
    if merge:
        record = {**get_state(ctx), **fields}
    else:
        record = dict(fields)

    ctx.state.set(STATE_KEY, record)
    log_debug("state", f"Saved state: mode={record.get('mode')}")
    return record


def is_cooldown_over(
    state: Dict[str, Any], cooldown_minutes: float, now: Optional[int] = None
) -> bool:
    """True once ``cooldown_minutes`` have passed since ``state['since']``."""
    if now is None:
        now = now_ms()
    since = state.get("since") or 0
    return now - since >= cooldown_minutes * MS_PER_MINUTE


class FileStateStore:
    """
    JSON file implementation of the host ``get/set`` storage contract.

    All keys live in one JSON object. Writes go through a PID-unique temp
    file followed by a rename so a crashed hook never leaves a torn file.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (OSError, ValueError) as e:
            log_warning("state", f"Failed to read {self.path}", e)
            return {}

    def get(self, key: str) -> Any:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value

        target = Path(self.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        temp_file = target.with_name(f"{target.name}.tmp.{os.getpid()}")

        try:
            with open(temp_file, "w") as f:
                json.dump(data, f, indent=2)
            temp_file.replace(target)
        except OSError:
            if temp_file.exists():
                temp_file.unlink()
            raise
