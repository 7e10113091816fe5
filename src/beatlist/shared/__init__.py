# Where: beatlist.shared.__init__
# What: Provide a concise import surface for shared helpers and type aliases.
# Why: Encourage consistent reuse of shared helpers across features.

"""Shared cross-cutting utilities exposed at the package level."""

from .json_value import JsonObject, JsonValue, is_json_value, split_known_keys

__all__ = ["JsonObject", "JsonValue", "is_json_value", "split_known_keys"]
