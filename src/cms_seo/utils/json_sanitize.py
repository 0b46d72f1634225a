from __future__ import annotations

from typing import Any, Mapping


def coerce_str(x: Any, default: str) -> str:
    """
    Turn a stored settings value into a string.
    - None -> default
    - str -> unchanged
    - int/float -> str(x)
    - anything else (lists, objects) -> default
    """
    if x is None or isinstance(x, bool):
        return default
    if isinstance(x, str):
        return x
    if isinstance(x, (int, float)):
        return str(x)
    return default


def coerce_bool(x: Any, default: bool) -> bool:
    """
    Turn a stored settings value into a bool.
    - None -> default
    - bool -> unchanged
    - "true"/"1"/"yes"/"on" (any case) -> True, other strings -> False
    - numbers -> truthiness
    """
    if x is None:
        return default
    if isinstance(x, bool):
        return x
    if isinstance(x, str):
        return x.strip().lower() in {"true", "1", "yes", "on"}
    if isinstance(x, (int, float)):
        return bool(x)
    return default


def merge_with_defaults(raw: Mapping[str, Any], defaults: Mapping[str, Any]) -> dict[str, Any]:
    """
    Overlay known keys from raw onto defaults, coercing each to the default's type.
    Unknown keys are dropped.
    """
    out: dict[str, Any] = {}
    for key, default in defaults.items():
        value = raw.get(key)
        if isinstance(default, bool):
            out[key] = coerce_bool(value, default)
        else:
            out[key] = coerce_str(value, default)
    return out
