"""Key-set transforms over string-keyed mappings."""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from .errors import DecodeError


def rename_keys(f: Callable[[Any], Any], m: Mapping) -> dict:
    """Return a new dict with every key of ``m`` passed through ``f``.

    When two keys map to the same output key the one that comes later in
    ``m``'s iteration order wins.
    """
    return {f(key): value for key, value in m.items()}


def try_rename_keys(f: Callable[[Any], Any], m: Mapping) -> dict:
    """Like ``rename_keys`` but ``f`` may fail.

    ``f`` fails by raising ``DecodeError`` or returning ``None``. The first
    failure aborts the whole rename; no partial mapping is returned.
    """
    result = {}
    for key, value in m.items():
        new_key = f(key)
        if new_key is None:
            raise DecodeError(f"cannot transform key {key!r}")
        result[new_key] = value
    return result


def parse_key(key_type: Any, text: str) -> Any:
    """Parse one textual key, returning ``None`` when there is no unique parse."""
    if not isinstance(text, str) or text != text.strip():
        return None
    if key_type is str:
        return text
    if key_type is bool:
        return {"True": True, "False": False, "true": True, "false": False}.get(text)
    if isinstance(key_type, type) and issubclass(key_type, Enum):
        matches = {member for member in key_type if text in (member.name, str(member.value))}
        if len(matches) != 1:
            return None
        return matches.pop()
    try:
        parsed = key_type(text)
    except (TypeError, ValueError):
        return None
    if key_type is int and str(parsed) != text.lstrip("+"):
        # "007" and "1_000" parse but do not render back to themselves
        return None
    return parsed


def parse_keys(key_type: Any, m: Mapping[str, Any]) -> dict:
    """Parse every textual key of ``m`` into ``key_type``.

    Raises ``DecodeError`` if any key does not parse.
    """

    def parse(text: str) -> Any:
        parsed = parse_key(key_type, text)
        if parsed is None:
            name = getattr(key_type, "__name__", repr(key_type))
            raise DecodeError(f"cannot parse key {text!r} as {name}")
        return parsed

    return try_rename_keys(parse, m)
