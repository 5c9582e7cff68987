#!/usr/bin/env python3
"""
Before-task hook: confirmation guard for code actions in local mode.

A task whose intent is a code action is blocked unless the user's last
message contains the confirmation phrase (case-sensitive substring).
"""

from typing import Optional

from ..config import resolve_config
from ..constants import MODE_LOCAL
from ..logger import log_debug
from ..state import get_state


def block_reason(phrase: str) -> str:
    return (
        "Running on the local LLM fallback. Code actions require explicit "
        f'confirmation: include "{phrase}" in your message to proceed.'
    )


def is_code_intent(intent: Optional[str], code_intents) -> bool:
    return bool(intent) and intent in code_intents


async def before_task_execute(ctx, event) -> bool:
    """
    Handle a task about to execute.

    Args:
        ctx: Host skill context
        event: Event exposing ``task.intent``, ``context.last_user_message``
            and ``block(reason)``

    Returns:
        True if the task was blocked
    """
    config = resolve_config(ctx.config)
    state = get_state(ctx)

    if state["mode"] != MODE_LOCAL or not config["requireConfirmationForCode"]:
        return False

    intent = getattr(event.task, "intent", None)
    if not is_code_intent(intent, config["codeIntents"]):
        return False

    phrase = config["confirmationPhrase"]
    last_message = getattr(event.context, "last_user_message", None) or ""

    if phrase in last_message:
        log_debug("before_task_execute", f"Confirmed code action: {intent}")
        return False

    event.block(block_reason(phrase))
    log_debug("before_task_execute", f"Blocked unconfirmed code action: {intent}")
    return True
