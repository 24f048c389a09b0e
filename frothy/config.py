from __future__ import annotations
import os
import sys
from typing import Optional


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def get_recursion_limit() -> Optional[int]:
    """Recursion limit requested via FROTHY_RECURSION_LIMIT, or None to keep Python's."""
    limit = int_from_env('FROTHY_RECURSION_LIMIT')
    if limit is not None and limit < 1:
        raise ValueError(f"FROTHY_RECURSION_LIMIT must be at least 1, got {limit}")
    return limit


def use_color(stream=None) -> bool:
    # colour by default only when writing to a terminal
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return flag_from_env('FROTHY_COLOR', bool(isatty and isatty()))
