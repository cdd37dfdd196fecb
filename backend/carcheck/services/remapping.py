"""
Helpers for reshaping provider JSON into report sections.

All helpers are pure: they read from the upstream payload and build new
values, never mutating what they were given, so remapping the same payload
twice always yields the same report.
"""

import re
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_TRUE_STRINGS = {"true", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "no", "n", "0"}
_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


def dig(payload: Any, path: str, default: Any = None) -> Any:
    """
    Look up a dotted path through nested dicts and lists.

    dig({"a": {"b": [{"c": 1}]}}, "a.b.0.c") -> 1
    """
    current = payload
    for part in path.split("."):
        if isinstance(current, dict):
            if part not in current:
                return default
            current = current[part]
        elif isinstance(current, list) and part.isdigit():
            index = int(part)
            if index >= len(current):
                return default
            current = current[index]
        else:
            return default
    return current


def dig_dict(payload: Any, path: str) -> dict:
    """Like dig, but only ever returns a dict (empty when the value is anything else)."""
    value = dig(payload, path)
    return value if isinstance(value, dict) else {}


def is_empty(value: Any) -> bool:
    """None, blank strings and empty containers count as empty."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, tuple, set)):
        return len(value) == 0
    return False


def first_of(payload: Any, *paths: str) -> Any:
    """Return the first non-empty value found among the given paths."""
    for path in paths:
        value = dig(payload, path)
        if not is_empty(value):
            return value
    return None


def map_list(items: Any, mapper: Callable[[dict], T]) -> list[T]:
    """Map a provider sub-list, skipping anything that isn't an object."""
    if not isinstance(items, list):
        return []
    return [mapper(item) for item in items if isinstance(item, dict)]


def as_str(value: Any) -> str | None:
    if is_empty(value):
        return None
    return str(value).strip()


def as_float(value: Any) -> float | None:
    """Lenient float parse: 1234, "1,234", "150 BHP" -> float, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_RE.search(str(value).replace(",", ""))
    if not match:
        return None
    return float(match.group())


def as_int(value: Any) -> int | None:
    number = as_float(value)
    if number is None:
        return None
    return int(round(number))


def as_bool(value: Any) -> bool | None:
    """Parse booleans as providers send them: true/"Yes"/"1", false/"No"/"0"."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return None


def has_records(value: Any) -> bool | None:
    """Providers report some markers as record lists; any record means True."""
    if value is None:
        return None
    if isinstance(value, list):
        return len(value) > 0
    return as_bool(value)

