#!/usr/bin/env python3
"""
Shared constants for LLM Supervisor.

Centralizes default configuration values, the persisted state key and the
pattern tables so hooks, CLI and commands agree on them.
"""

from pathlib import Path
from typing import Dict, Any, List

# Persisted state record
STATE_KEY = "llm-supervisor:state"
MODE_CLOUD = "cloud"
MODE_LOCAL = "local"
VALID_MODES = (MODE_CLOUD, MODE_LOCAL)

# LLM profiles
CLOUD_PROFILE = "anthropic:default"
LOCAL_PROVIDER = "ollama"
OLLAMA_BASE_URL = "http://127.0.0.1:11434"

DEFAULT_CONFIRMATION_PHRASE = "CONFIRM LOCAL"
DEFAULT_COOLDOWN_MINUTES = 30

# Intents treated as code-modifying actions
DEFAULT_CODE_INTENTS: List[str] = [
    "write_code",
    "edit_file",
    "create_file",
    "delete_file",
    "run_code",
]

# Substrings (lower-case) identifying rate-limit / overload errors
RATE_LIMIT_PATTERNS: List[str] = [
    "rate limit",
    "rate_limit",
    "quota",
    "429",
    "too many requests",
    "overloaded",
    "overload",
    "capacity",
    "throttl",
    "resource_exhausted",
    "server_busy",
    "service_unavailable",
    "503",
    "529",
]

# Log levels
LOG_LEVEL_OFF = 0
LOG_LEVEL_ERROR = 1
LOG_LEVEL_WARNING = 2
LOG_LEVEL_INFO = 3
LOG_LEVEL_DEBUG = 4

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "enabled": True,
    "localModel": "qwen2.5:7b",
    "cooldownMinutes": DEFAULT_COOLDOWN_MINUTES,
    "requireConfirmationForCode": True,
    "confirmationPhrase": DEFAULT_CONFIRMATION_PHRASE,
    "codeIntents": DEFAULT_CODE_INTENTS,
    "ollamaBaseUrl": OLLAMA_BASE_URL,
    "log_level": LOG_LEVEL_WARNING,
}

# Default file paths
DEFAULT_HOME = Path.home() / ".llm-supervisor"
DEFAULT_CONFIG_PATH = str(DEFAULT_HOME / "config.json")
DEFAULT_STATE_PATH = str(DEFAULT_HOME / "state.json")
DEFAULT_LOG_PATH = str(DEFAULT_HOME / "llm-supervisor.log")

# Prefix for lines written to the host log
LOG_PREFIX = "[llm-supervisor]"

OLLAMA_TIMEOUT_SECONDS = 3
