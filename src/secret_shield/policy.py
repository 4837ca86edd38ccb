"""Allow/deny policy for detected values.

Lists hold glob patterns where ``*`` matches any run of characters.
Patterns are matched case-insensitively against the whole value.
Deny beats allow; anything not allowed is redacted.
"""

from __future__ import annotations
import re
from functools import lru_cache
from typing import Iterable


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> re.Pattern:
    """Compile a ``*``-only glob into a case-insensitive regex (use fullmatch)."""
    body = ".*".join(re.escape(part) for part in pattern.split("*"))
    return re.compile(body, re.IGNORECASE | re.DOTALL)


def matches_any(value: str, patterns: Iterable[str]) -> bool:
    """True if value matches at least one glob.  An empty list matches nothing."""
    return any(glob_to_regex(p).fullmatch(value) for p in patterns)


def is_allowed(value: str, allow_list: Iterable[str]) -> bool:
    return matches_any(value, allow_list)


def is_denied(value: str, deny_list: Iterable[str]) -> bool:
    return matches_any(value, deny_list)


def should_redact(value: str, allow_list: Iterable[str], deny_list: Iterable[str]) -> bool:
    """Decide whether a detected value gets redacted."""
    if is_denied(value, deny_list):
        return True
    if is_allowed(value, allow_list):
        return False
    return True
