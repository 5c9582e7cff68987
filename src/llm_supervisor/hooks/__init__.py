#!/usr/bin/env python3
"""
Hook handlers registered with the host agent runtime.

- on_agent_start: pick the cloud or local LLM profile, recovering to cloud
  once the cooldown has elapsed
- on_llm_error: switch to local mode on rate-limit / overload errors
- before_task_execute: require a confirmation phrase for code actions in
  local mode
"""

from .on_agent_start import on_agent_start
from .on_llm_error import on_llm_error
from .before_task_execute import before_task_execute

__all__ = ["on_agent_start", "on_llm_error", "before_task_execute"]
