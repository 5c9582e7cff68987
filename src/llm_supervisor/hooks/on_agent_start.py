#!/usr/bin/env python3
"""
Agent-start hook: selects the LLM profile for a new agent session.

Local mode reverts to cloud once ``cooldownMinutes`` have elapsed since
the switch; otherwise the agent is pointed at the local Ollama model.
"""

from typing import Any, Dict, Union

from ..config import resolve_config
from ..constants import (
    CLOUD_PROFILE,
    LOCAL_PROVIDER,
    LOG_PREFIX,
    MODE_CLOUD,
    MODE_LOCAL,
    OLLAMA_BASE_URL,
)
from ..logger import log_info
from ..state import get_state, set_state, is_cooldown_over, now_ms

RECOVERY_MESSAGE = (
    "✅ Cooldown elapsed, automatically switching back to **cloud LLM**."
)


def local_profile(
    local_model: str, base_url: str = OLLAMA_BASE_URL
) -> Dict[str, str]:
    """Profile descriptor for the local Ollama provider."""
    return {
        "provider": LOCAL_PROVIDER,
        "model": local_model,
        "baseUrl": base_url,
    }


async def on_agent_start(ctx, event) -> Union[str, Dict[str, Any]]:
    """
    Handle agent start.

    Args:
        ctx: Host skill context
        event: Agent start event exposing ``agent.set_llm_profile``

    Returns:
        The profile passed to ``set_llm_profile``
    """
    config = resolve_config(ctx.config)
    state = get_state(ctx)

    if state["mode"] == MODE_LOCAL and is_cooldown_over(
        state, config["cooldownMinutes"]
    ):
        set_state(ctx, {"mode": MODE_CLOUD, "since": now_ms()})
        await ctx.notify.all(RECOVERY_MESSAGE)
        ctx.log.info(f"{LOG_PREFIX} Auto-recovered to cloud mode after cooldown")
        log_info("on_agent_start", "Cooldown elapsed, recovered to cloud")
        event.agent.set_llm_profile(CLOUD_PROFILE)
        return CLOUD_PROFILE

    if state["mode"] == MODE_CLOUD:
        event.agent.set_llm_profile(CLOUD_PROFILE)
        ctx.log.info(f"{LOG_PREFIX} Agent started in cloud mode")
        return CLOUD_PROFILE

    local_model = config["localModel"]
    profile = local_profile(local_model, config["ollamaBaseUrl"])
    event.agent.set_llm_profile(profile)
    ctx.log.info(f"{LOG_PREFIX} Agent started in local mode ({local_model})")
    return profile
