#!/usr/bin/env python3
"""
Rate-limit / overload detection for LLM errors.

Detection is a case-insensitive substring test of the error message and
code against RATE_LIMIT_PATTERNS. Unrecognized phrasing is not detected.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

from .constants import RATE_LIMIT_PATTERNS


def error_fields(error: Any) -> Tuple[Optional[str], Optional[str]]:
    """
    Extract (message, code) from an LLM error.

    Accepts None, a mapping with "message"/"code" keys, or an object with
    ``message``/``code`` attributes. Non-string codes (HTTP status ints)
    are converted to strings.
    """
    if error is None:
        return None, None

    if isinstance(error, Mapping):
        message = error.get("message")
        code = error.get("code")
    else:
        message = getattr(error, "message", None)
        code = getattr(error, "code", None)

    if code is not None and not isinstance(code, str):
        code = str(code)

    return message, code


def find_rate_limit_pattern(
    error: Any, patterns: Iterable[str] = RATE_LIMIT_PATTERNS
) -> Optional[str]:
    """Return the first pattern found in the error message or code."""
    message, code = error_fields(error)
    msg = (message or "").lower()
    code = (code or "").lower()

    for pattern in patterns:
        if pattern in msg or pattern in code:
            return pattern

    return None


def is_rate_limit_error(error: Any) -> bool:
    return find_rate_limit_pattern(error) is not None
