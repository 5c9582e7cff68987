#!/usr/bin/env python3
"""
Probe for the local Ollama server used as the fallback provider.

Handles:
- Listing installed models via GET /api/tags
- Checking whether the configured local model is pulled
- Graceful degradation: any failure yields None
"""

from typing import List, Optional

import requests

from .constants import OLLAMA_BASE_URL, OLLAMA_TIMEOUT_SECONDS
from .logger import log_debug


def list_local_models(
    base_url: str = OLLAMA_BASE_URL, timeout: float = OLLAMA_TIMEOUT_SECONDS
) -> Optional[List[str]]:
    """
    Fetch names of models installed in the local Ollama server.

    Args:
        base_url: Ollama server URL
        timeout: Request timeout in seconds

    Returns:
        List of model names (e.g. ["qwen2.5:7b"]), or None if unreachable
    """
    try:
        response = requests.get(f"{base_url.rstrip('/')}/api/tags", timeout=timeout)

        if response.status_code != 200:
            log_debug("ollama", f"Tags request returned {response.status_code}")
            return None

        models = response.json().get("models", [])
        return [m["name"] for m in models if isinstance(m, dict) and m.get("name")]

    except (requests.RequestException, ValueError, AttributeError) as e:
        log_debug("ollama", f"Ollama unreachable at {base_url}: {e}")
        return None


def is_model_available(
    model: str,
    base_url: str = OLLAMA_BASE_URL,
    timeout: float = OLLAMA_TIMEOUT_SECONDS,
) -> Optional[bool]:
    """
    Check whether ``model`` is installed locally.

    A tag-less name matches its ``:latest`` variant.

    Returns:
        True/False, or None if the server could not be queried
    """
    models = list_local_models(base_url, timeout)
    if models is None:
        return None

    candidates = {model}
    if ":" not in model:
        candidates.add(f"{model}:latest")

    return any(name in candidates for name in models)
