"""Common type aliases for the codebase."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

from pydantic import JsonValue

JSONValue: TypeAlias = JsonValue
"""Type alias for JSON values."""

JSONObject: TypeAlias = dict[str, JSONValue]
"""Type alias for JSON objects (dictionaries with string keys)."""

JSONArray: TypeAlias = list[JSONValue]
"""Type alias for JSON arrays."""

ParamValues: TypeAlias = Mapping[str, str]
"""Raw WDK parameter values keyed by parameter name (caller-owned, read-only)."""


def as_param_values(value: JSONValue) -> dict[str, str]:
    """Coerce a decoded JSON document into raw WDK parameter values.

    WDK stores every internal param value as a string; numbers and booleans
    found in hand-written input files are converted with ``str`` so that
    ``true`` becomes ``"true"`` the way the question form would send it.

    :param value: Decoded JSON value.
    :returns: Parameter name to raw string value.
    :raises TypeError: If value is not an object of scalars.
    """
    if not isinstance(value, dict):
        raise TypeError(f"Expected dict, got {type(value)}")
    params: dict[str, str] = {}
    for name, raw in value.items():
        if isinstance(raw, bool):
            params[name] = "true" if raw else "false"
        elif isinstance(raw, (str, int, float)):
            params[name] = str(raw)
        else:
            raise TypeError(f"Parameter '{name}' must be a scalar, got {type(raw)}")
    return params
