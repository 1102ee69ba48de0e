"""
Fallback chains over loosely shaped API records.

A chain is an ordered list of accessors; the first one that yields a
non-blank value wins. Missing keys, None and wrong types along the way
count as "not present" rather than errors.
"""
from __future__ import annotations
from typing import Any, Callable, Iterable, Optional

Accessor = Callable[[Any], Any]

def dig(*keys) -> Accessor:
    """Accessor for a nested path; ints index into lists."""
    def get(obj):
        cur = obj
        for k in keys:
            if isinstance(k, int):
                if not isinstance(cur, list) or not -len(cur) <= k < len(cur):
                    return None
                cur = cur[k]
            else:
                if not isinstance(cur, dict):
                    return None
                cur = cur.get(k)
            if cur is None:
                return None
        return cur
    return get

def _present(value) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True

def first_present(obj, accessors: Iterable[Accessor], default: Optional[Any] = None):
    for accessor in accessors:
        value = accessor(obj)
        if _present(value):
            return value
    return default

LINK_TITLE_CHAIN = [dig("title"), dig("fullTitle")]
RANDOM_TITLE_CHAIN = [dig("fullTitle"), dig("title")]
POEM_POET_CHAIN = [dig("category", "poet", "name"), dig("poetName")]
POET_ID_CHAIN = [dig("category", "poet", "id"), dig("sections", 0, "poetId")]
POET_RECORD_NAME_CHAIN = [
    dig("poet", "name"),
    dig("poet", "nickname"),
    dig("name"),
    dig("nickname"),
]
