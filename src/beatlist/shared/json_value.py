# Where: beatlist.shared.json_value
# What: Recursive JSON value alias and checks for caller-defined custom data.
# Why: Keep custom data passthrough explicit instead of trusting arbitrary objects.

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import NoReturn, TypeAlias, cast

JsonValue: TypeAlias = (
    None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]
)
JsonObject: TypeAlias = dict[str, JsonValue]


def is_json_value(value: object) -> bool:
    """Return whether ``value`` can be written to JSON without loss."""

    if value is None or isinstance(value, (bool, int, str)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, list):
        return all(is_json_value(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(key, str) and is_json_value(item) for key, item in value.items())
    return False


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"`{name}` is not a JSON value")


def loads_json(text: str) -> JsonValue:
    """Parse strict JSON text.

    ``NaN`` and the infinities are rejected, and so is nesting deeper than the
    interpreter can parse; both surface as ``ValueError`` like any syntax error.
    """
    try:
        return cast(JsonValue, json.loads(text, parse_constant=_reject_constant))
    except RecursionError as error:
        raise ValueError("JSON nesting is too deep") from error


def split_known_keys(
    document: Mapping[str, JsonValue],
    known_keys: frozenset[str],
) -> JsonObject:
    """Return the entries of ``document`` whose keys are not in ``known_keys``.

    Insertion order of the original document is kept.
    """

    return {key: value for key, value in document.items() if key not in known_keys}


__all__ = ["JsonObject", "JsonValue", "is_json_value", "loads_json", "split_known_keys"]
