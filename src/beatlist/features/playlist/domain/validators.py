"""
Summary: Pure predicates over strings, bytes and archive paths used by playlist validation.
Why: Keep field format rules in one dependency-free place shared by the model and codec.
"""

from __future__ import annotations

import hmac
import string
from collections.abc import Collection
from pathlib import PurePosixPath
from typing import Final

PNG_SIGNATURE: Final[bytes] = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE: Final[bytes] = b"\xff\xd8\xff"

SHA1_HEX_LENGTH: Final[int] = 40

_HEX_DIGITS: Final[frozenset[str]] = frozenset(string.hexdigits)
_LINE_BREAKS: Final[tuple[str, ...]] = ("\n", "\r")


def is_single_line_nonempty(value: str) -> bool:
    """Return ``False`` when ``value`` is empty or contains a line break."""

    if not value:
        return False
    return not any(line_break in value for line_break in _LINE_BREAKS)


def is_hex_string(value: str) -> bool:
    """Return whether every character of ``value`` is an ASCII hex digit.

    An empty string passes; callers check emptiness on their own.
    """

    return all(char in _HEX_DIGITS for char in value)


def is_sha1_hex(value: str) -> bool:
    """Return whether ``value`` looks like a SHA-1 hex digest."""

    return len(value) == SHA1_HEX_LENGTH and is_hex_string(value)


def is_single_file_name(path: PurePosixPath | str) -> bool:
    """Return whether ``path`` is one file name with an extension.

    Parent references, nested directories, absolute paths and Windows
    separators are all rejected.
    """

    raw = str(path)
    if not raw or "\\" in raw:
        return False

    candidate = PurePosixPath(raw)
    if candidate.is_absolute() or len(candidate.parts) != 1:
        return False
    # PurePosixPath drops "." segments and trailing slashes
    if candidate.name != raw:
        return False
    if candidate.name in {".", ".."}:
        return False
    return bool(candidate.suffix)


def is_safe_relative_path(path: PurePosixPath | str, entries: Collection[str]) -> bool:
    """Return whether ``path`` is a single file name present in ``entries``.

    Args:
        path: Relative path read from an untrusted manifest.
        entries: Names of the entries stored in the archive.
    """

    return is_single_file_name(path) and str(path) in entries


def has_signature(data: bytes, signature: bytes) -> bool:
    """Compare the leading bytes of ``data`` against ``signature`` in constant time."""

    if len(data) < len(signature):
        return False
    return hmac.compare_digest(data[: len(signature)], signature)


__all__ = [
    "JPEG_SIGNATURE",
    "PNG_SIGNATURE",
    "SHA1_HEX_LENGTH",
    "has_signature",
    "is_hex_string",
    "is_safe_relative_path",
    "is_sha1_hex",
    "is_single_file_name",
    "is_single_line_nonempty",
]
