from __future__ import annotations
from typing import Any, Optional
import re

import httpx

INT_TEXT_RE = re.compile(r"[+-]?[0-9]+")

def require_text(value: Any, allow_empty: bool = True) -> Optional[str]:
    """Return value if it is a str (non-empty unless allow_empty), else None."""
    if not isinstance(value, str):
        return None
    if not allow_empty and value == "":
        return None
    return value

def parse_int_text(value: Any) -> Optional[int]:
    """
    Parse an integer carried as JSON text, e.g. "001" -> 1.
    Only an optional sign followed by ASCII digits is accepted: no whitespace,
    underscores, decimals, or JSON numbers.
    """
    if not isinstance(value, str) or not INT_TEXT_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # past the interpreter's int-string digit limit
        return None

def parse_count_text(value: Any) -> Optional[int]:
    """Like parse_int_text, but counts can't be negative."""
    n = parse_int_text(value)
    if n is None or n < 0:
        return None
    return n

def parse_url_text(value: Any) -> Optional[str]:
    """
    Return value unchanged if httpx can parse it as a URL. Any scheme and
    relative references are fine; empty text and whitespace anywhere are not.
    """
    if not isinstance(value, str) or not value or any(c.isspace() for c in value):
        return None
    try:
        httpx.URL(value)
    except (httpx.InvalidURL, ValueError):
        return None
    return value
