#!/usr/bin/env python3
"""
LLM-error hook: falls back to the local model on cloud rate limits.

Only reacts while in cloud mode, so repeated errors in local mode never
re-trigger the switch or touch the stored state.
"""

from ..config import resolve_config
from ..constants import LOG_PREFIX, MODE_CLOUD, MODE_LOCAL
from ..error_patterns import error_fields, find_rate_limit_pattern
from ..logger import log_info
from ..state import get_state, set_state, now_ms


def switch_message(local_model: str) -> str:
    return (
        "⚠️ Cloud LLM rate limit detected.\n"
        f"Switched main agent to **local model ({local_model})**.\n"
        "Chat is unaffected. Code actions will require confirmation."
    )


async def on_llm_error(ctx, event) -> bool:
    """
    Handle a failed LLM call.

    Args:
        ctx: Host skill context
        event: LLM error event exposing ``error`` (message/code)

    Returns:
        True if the supervisor switched to local mode
    """
    config = resolve_config(ctx.config)
    state = get_state(ctx)

    if state["mode"] != MODE_CLOUD:
        return False

    error = getattr(event, "error", None)
    pattern = find_rate_limit_pattern(error)
    if pattern is None:
        return False

    ctx.log.warn(f"{LOG_PREFIX} Cloud LLM rate limit detected")

    message, _ = error_fields(error)
    set_state(
        ctx,
        {"mode": MODE_LOCAL, "since": now_ms(), "lastError": message},
        merge=False,
    )

    await ctx.notify.all(switch_message(config["localModel"]))

    ctx.log.info(f"{LOG_PREFIX} Switched to local LLM")
    log_info("on_llm_error", f"Switched to local (matched {pattern!r}): {message}")
    return True
