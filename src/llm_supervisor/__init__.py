#!/usr/bin/env python3
"""
LLM Supervisor: switches an agent between cloud and local LLM providers.

Register the coroutines in ``llm_supervisor.hooks`` with the host runtime:
``on_agent_start``, ``on_llm_error`` and ``before_task_execute``.
"""

from .hooks import before_task_execute, on_agent_start, on_llm_error

__version__ = "1.0.0"

__all__ = ["on_agent_start", "on_llm_error", "before_task_execute"]
