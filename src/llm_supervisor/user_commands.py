#!/usr/bin/env python3
"""
User control commands for LLM Supervisor.

Handles 'llm-supervisor status|cloud|local|help' typed as a prompt.
Provides command parsing, execution, and status reporting.
"""

import re
from datetime import datetime
from typing import Any, Dict, Optional

from .config import resolve_config
from .constants import MODE_CLOUD, MODE_LOCAL
from .logger import log_info
from .ollama_client import is_model_available
from .state import MS_PER_MINUTE, get_state, set_state, now_ms

COMMANDS = ("status", "cloud", "local", "help")

HELP_TEXT = """LLM Supervisor commands:
  llm-supervisor status  - Show current mode, last error and cooldown
  llm-supervisor cloud   - Force the cloud LLM
  llm-supervisor local   - Force the local LLM (code actions need confirmation)
  llm-supervisor help    - Show this help"""


def parse_command(user_input: str) -> Dict[str, Any]:
    """
    Parse user input to detect llm-supervisor commands.

    Returns:
        Dictionary with:
        - is_supervisor_command: bool
        - command: one of COMMANDS, or None
    """
    normalized = re.sub(r"\s+", " ", (user_input or "").strip().lower())

    match = re.match(r"^llm-supervisor\s+(status|cloud|local|help)$", normalized)
    if match:
        return {"is_supervisor_command": True, "command": match.group(1)}

    return {"is_supervisor_command": False, "command": None}


def _format_since(since: int) -> str:
    if not since:
        return "never switched"
    try:
        moment = datetime.fromtimestamp(since / 1000)
    except (ValueError, OverflowError, OSError, TypeError):
        return f"{since!r} (invalid timestamp)"
    return moment.isoformat(sep=" ", timespec="seconds")


def _local_model_line(config: Dict[str, Any]) -> str:
    model = config["localModel"]
    available = is_model_available(model, config["ollamaBaseUrl"])
    if available is None:
        return f"Local model: {model} (Ollama unreachable at {config['ollamaBaseUrl']})"
    if available:
        return f"Local model: {model} (installed)"
    return f"Local model: {model} (not installed - run 'ollama pull {model}')"


def _status(ctx, now: int) -> Dict[str, Any]:
    config = resolve_config(ctx.config)
    state = get_state(ctx)

    lines = [
        f"LLM Supervisor: {state['mode'].upper()} mode",
        f"Since: {_format_since(state['since'])}",
    ]
    if state.get("lastError"):
        lines.append(f"Last error: {state['lastError']}")
    if state["mode"] == MODE_LOCAL:
        cooldown_ms = config["cooldownMinutes"] * MS_PER_MINUTE
        remaining = max(0, cooldown_ms - (now - (state["since"] or 0)))
        minutes = int(remaining // MS_PER_MINUTE)
        lines.append(f"Cloud recovery in: {minutes} min (on next agent start)")
        if config["requireConfirmationForCode"]:
            lines.append(
                f"Code actions require: \"{config['confirmationPhrase']}\""
            )
    lines.append(_local_model_line(config))

    return {"success": True, "message": "\n".join(lines)}


def _force_mode(ctx, mode: str, now: int) -> Dict[str, Any]:
    state = get_state(ctx)
    if state["mode"] == mode:
        return {"success": True, "message": f"LLM Supervisor already in {mode} mode"}

    set_state(ctx, {"mode": mode, "since": now, "lastError": None})
    log_info("user_commands", f"Mode forced to {mode}")
    return {
        "success": True,
        "message": f"LLM Supervisor switched to {mode} mode (takes effect on next agent start)",
    }


def execute_command(
    command: str, ctx, now: Optional[int] = None
) -> Dict[str, Any]:
    """
    Execute a parsed command against the supervisor state.

    Args:
        command: One of COMMANDS
        ctx: Skill context (config and state)
        now: Current time in epoch ms (defaults to wall clock)

    Returns:
        {"success": bool, "message": str}
    """
    if now is None:
        now = now_ms()

    if command == "status":
        return _status(ctx, now)
    if command == "cloud":
        return _force_mode(ctx, MODE_CLOUD, now)
    if command == "local":
        return _force_mode(ctx, MODE_LOCAL, now)
    if command == "help":
        return {"success": True, "message": HELP_TEXT}

    return {"success": False, "message": f"Unknown command: {command}\n\n{HELP_TEXT}"}
