#!/usr/bin/env python3
"""
Host context and event objects for running hooks outside the host runtime.

The host normally supplies ``ctx`` (config, log, notify, state) and the
event objects. The CLI entry point builds equivalents from files and
stdin JSON using the classes below.
"""

import sys
from typing import Any, Dict, List, Optional

from .config import load_config
from .constants import DEFAULT_CONFIG_PATH, DEFAULT_STATE_PATH
from .logger import log_error, log_info, log_warning
from .state import FileStateStore


class FileLog:
    """``ctx.log`` adapter writing to the supervisor log file."""

    component = "host"

    def info(self, message: str):
        log_info(self.component, message)

    def warn(self, message: str):
        log_warning(self.component, message)

    def error(self, message: str):
        log_error(self.component, message)


class CollectingNotifier:
    """``ctx.notify`` adapter that records broadcasts and echoes them to stderr."""

    def __init__(self, stream=None):
        self.messages: List[str] = []
        self.stream = stream

    async def all(self, message: str) -> None:
        self.messages.append(message)
        print(message, file=self.stream or sys.stderr, flush=True)


class FileContext:
    """Skill context backed by the JSON config and state files."""

    def __init__(
        self,
        config_path: str = DEFAULT_CONFIG_PATH,
        state_path: str = DEFAULT_STATE_PATH,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.config = config if config is not None else load_config(config_path)
        self.log = FileLog()
        self.notify = CollectingNotifier()
        self.state = FileStateStore(state_path)


class Agent:
    """Records the profile selected by the agent-start hook."""

    def __init__(self):
        self.profile = None

    def set_llm_profile(self, profile):
        self.profile = profile


class AgentStartEvent:
    def __init__(self, agent: Optional[Agent] = None):
        self.agent = agent or Agent()


class LLMError:
    def __init__(self, message: Optional[str] = None, code: Optional[str] = None):
        self.message = message
        self.code = code


class LLMErrorEvent:
    def __init__(self, error: Optional[LLMError] = None):
        self.error = error

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LLMErrorEvent":
        error = data.get("error")
        if not isinstance(error, dict):
            return cls(None)
        return cls(LLMError(error.get("message"), error.get("code")))


class Task:
    def __init__(self, intent: Optional[str] = None):
        self.intent = intent


class TaskContext:
    def __init__(self, last_user_message: Optional[str] = None):
        self.last_user_message = last_user_message


class BeforeTaskExecuteEvent:
    """Task admission event; ``block`` records the reason."""

    def __init__(self, intent: Optional[str] = None, last_user_message: str = ""):
        self.task = Task(intent)
        self.context = TaskContext(last_user_message)
        self.blocked_reason: Optional[str] = None

    def block(self, reason: str):
        self.blocked_reason = reason

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BeforeTaskExecuteEvent":
        task = data.get("task") or {}
        context = data.get("context") or {}
        return cls(
            intent=task.get("intent"),
            last_user_message=context.get("lastUserMessage") or "",
        )
