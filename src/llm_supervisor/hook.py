#!/usr/bin/env python3
"""
Command-line hook entry point for LLM Supervisor.

Hosts that run hooks as subprocesses call ``llm-supervisor <hook>`` with the
event JSON on stdin. The hook runs against the file-backed context and
prints a JSON result on stdout.
"""

import asyncio
import json
import sys
from typing import Any, Dict

from .constants import DEFAULT_CONFIG_PATH, DEFAULT_STATE_PATH
from .context import (
    AgentStartEvent,
    BeforeTaskExecuteEvent,
    FileContext,
    LLMErrorEvent,
)
from .hooks import before_task_execute, on_agent_start, on_llm_error
from .logger import log_warning
from .state import get_state
from . import user_commands

ALLOW = {"continue": True}


def parse_hook_input(raw_input: str) -> Dict[str, Any]:
    """Parse stdin JSON, returning {} for empty or invalid input."""
    if not raw_input or not raw_input.strip():
        return {}
    try:
        data = json.loads(raw_input)
    except json.JSONDecodeError as e:
        log_warning("hook", "Failed to parse hook data from stdin", e)
        return {}
    return data if isinstance(data, dict) else {}


def build_context() -> FileContext:
    return FileContext(DEFAULT_CONFIG_PATH, DEFAULT_STATE_PATH)


def _with_notifications(result: Dict[str, Any], ctx: FileContext) -> Dict[str, Any]:
    if ctx.notify.messages:
        result["systemMessage"] = "\n\n".join(ctx.notify.messages)
    return result


def run_agent_start(
    ctx: FileContext, hook_data: Dict[str, Any]
) -> Dict[str, Any]:
    event = AgentStartEvent()
    asyncio.run(on_agent_start(ctx, event))
    return _with_notifications({"profile": event.agent.profile}, ctx)


def run_llm_error(ctx: FileContext, hook_data: Dict[str, Any]) -> Dict[str, Any]:
    event = LLMErrorEvent.from_dict(hook_data)
    switched = asyncio.run(on_llm_error(ctx, event))
    result = {"mode": get_state(ctx)["mode"], "switched": switched}
    return _with_notifications(result, ctx)


def run_before_task_execute(
    ctx: FileContext, hook_data: Dict[str, Any]
) -> Dict[str, Any]:
    event = BeforeTaskExecuteEvent.from_dict(hook_data)
    asyncio.run(before_task_execute(ctx, event))
    if event.blocked_reason is not None:
        return {"decision": "block", "reason": event.blocked_reason}
    return dict(ALLOW)


def run_user_prompt_submit(
    ctx: FileContext, hook_data: Dict[str, Any]
) -> Dict[str, Any]:
    parsed = user_commands.parse_command(hook_data.get("prompt", ""))
    if not parsed["is_supervisor_command"]:
        return dict(ALLOW)

    result = user_commands.execute_command(parsed["command"], ctx)
    # Block so the command text is not forwarded to the model
    return {"decision": "block", "reason": result["message"]}


HOOKS = {
    "agent_start": run_agent_start,
    "llm_error": run_llm_error,
    "before_task_execute": run_before_task_execute,
    "user_prompt_submit": run_user_prompt_submit,
}


def run(hook_name: str, raw_input: str) -> Dict[str, Any]:
    """Dispatch one hook invocation and return its JSON result."""
    handler = HOOKS.get(hook_name)
    if handler is None:
        raise ValueError(f"Unknown hook: {hook_name}")

    ctx = build_context()
    if not ctx.config.get("enabled", True):
        return dict(ALLOW)

    return handler(ctx, parse_hook_input(raw_input))


def main():
    """Entry point for hook script."""
    if len(sys.argv) < 2 or sys.argv[1] not in HOOKS:
        print(
            f"usage: llm-supervisor {{{'|'.join(HOOKS)}}} < event.json",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        result = run(sys.argv[1], sys.stdin.read())
    except Exception as e:
        # Graceful degradation - never break the host over a supervisor fault
        print(f"[LLM-SUPERVISOR ERROR] {sys.argv[1]}: {e}", file=sys.stderr)
        result = dict(ALLOW)

    print(json.dumps(result), file=sys.stdout, flush=True)

    # Exit code 2 tells the host to block and surface the reason
    if result.get("decision") == "block":
        sys.exit(2)
    sys.exit(0)


if __name__ == "__main__":
    main()
