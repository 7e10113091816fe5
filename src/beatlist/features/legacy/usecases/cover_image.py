"""
Summary: Decode the legacy ``image`` field (bare base64 or data URI) into cover bytes and kind.
Why: Historical tools used two incompatible encodings and both must convert losslessly.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from dataclasses import dataclass
from typing import ClassVar, Final

from beatlist.features.playlist.domain.errors import LegacyFormatError
from beatlist.features.playlist.domain.models import CoverKind

from ..domain.models import ImageEncoding

logger = logging.getLogger(__name__)

DATA_URI_PREFIX: Final[str] = "data:"


@dataclass(frozen=True, slots=True)
class DecodedImage:
    """Cover bytes recovered from a legacy document."""

    kind: CoverKind
    data: bytes


class LegacyImageDecoder:
    """Decode legacy cover strings according to an :class:`ImageEncoding`."""

    DATA_URI_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^data:(?P<mime>[^;,]*);base64,\s*(?P<payload>.*)$",
        re.DOTALL,
    )
    MIME_KINDS: ClassVar[dict[str, CoverKind]] = {
        "image/png": CoverKind.PNG,
        "image/jpg": CoverKind.JPEG,
        "image/jpeg": CoverKind.JPEG,
    }

    encoding: ImageEncoding

    def __init__(self, encoding: ImageEncoding = ImageEncoding.AUTO) -> None:
        self.encoding = encoding

    def decode(self, value: str | None) -> DecodedImage | None:
        """Return the decoded cover, or ``None`` when no usable cover is present.

        Args:
            value: Raw ``image`` field of the legacy document.

        Returns:
            DecodedImage | None: ``None`` for empty input, bytes that are
            neither PNG nor JPEG, or a data URI with an unsupported type.

        Raises:
            LegacyFormatError: The payload is not valid base64, or a data URI
                was required and the value is not one.
        """
        if value is None or not value.strip():
            return None

        if self.encoding is ImageEncoding.DATA_URI or (
            self.encoding is ImageEncoding.AUTO and value.startswith(DATA_URI_PREFIX)
        ):
            return self._decode_data_uri(value)
        return self._decode_bare(value)

    def _decode_bare(self, value: str) -> DecodedImage | None:
        data = _b64decode(value)
        kind = CoverKind.sniff(data)
        if kind is CoverKind.UNKNOWN:
            logger.warning("Dropping legacy cover: decoded bytes are neither PNG nor JPEG")
            return None
        return DecodedImage(kind=kind, data=data)

    def _decode_data_uri(self, value: str) -> DecodedImage | None:
        match = self.DATA_URI_PATTERN.match(value)
        if match is None:
            raise LegacyFormatError("legacy cover is not a base64 data URI")

        mime = match.group("mime").strip().lower()
        kind = self.MIME_KINDS.get(mime)
        if kind is None:
            logger.warning("Dropping legacy cover with unsupported type `%s`", mime)
            return None
        return DecodedImage(kind=kind, data=_b64decode(match.group("payload")))


def _b64decode(payload: str) -> bytes:
    try:
        return base64.b64decode(payload.strip(), validate=True)
    except (binascii.Error, ValueError) as error:
        raise LegacyFormatError(f"legacy cover is not valid base64: {error}") from error


__all__ = ["DATA_URI_PREFIX", "DecodedImage", "LegacyImageDecoder"]
