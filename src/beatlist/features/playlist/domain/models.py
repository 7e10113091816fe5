"""src/beatlist/features/playlist/domain/models.py
What: In-memory playlist entities (playlist, cover, track, difficulty) and their validation.
Why: Give the codec and the legacy adapter one canonical model with first-error validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, StrEnum
from pathlib import PurePosixPath

from beatlist.shared.json_value import JsonObject

from .errors import (
    InvalidCoverDataError,
    InvalidCoverPathError,
    InvalidDifficultyError,
    InvalidFieldError,
    InvalidTrackError,
    MismatchedTypeError,
    PlaylistValidationError,
    UnknownCoverTypeError,
)
from .validators import (
    JPEG_SIGNATURE,
    PNG_SIGNATURE,
    has_signature,
    is_hex_string,
    is_sha1_hex,
    is_single_file_name,
    is_single_line_nonempty,
)


class CoverKind(Enum):
    """Declared format of the embedded cover image."""

    PNG = "png"
    JPEG = "jpg"
    UNKNOWN = "unknown"

    @property
    def signature(self) -> bytes | None:
        """Magic bytes every image of this kind starts with."""

        if self is CoverKind.PNG:
            return PNG_SIGNATURE
        if self is CoverKind.JPEG:
            return JPEG_SIGNATURE
        return None

    @property
    def extensions(self) -> tuple[str, ...]:
        """File extensions (without the dot) accepted for this kind."""

        if self is CoverKind.PNG:
            return ("png",)
        if self is CoverKind.JPEG:
            return ("jpg", "jpeg")
        return ()

    @property
    def default_path(self) -> PurePosixPath:
        """Archive entry name used when a cover of this kind is attached."""

        if self is CoverKind.UNKNOWN:
            raise UnknownCoverTypeError()
        return PurePosixPath(f"cover.{self.extensions[0]}")

    @classmethod
    def sniff(cls, data: bytes) -> CoverKind:
        """Classify ``data`` by its leading signature bytes."""

        for kind in (cls.PNG, cls.JPEG):
            signature = kind.signature
            if signature is not None and has_signature(data, signature):
                return kind
        return cls.UNKNOWN

    @classmethod
    def from_path(cls, path: PurePosixPath | str) -> CoverKind:
        """Map a file extension onto a cover kind (case-sensitive)."""

        extension = PurePosixPath(str(path)).suffix.removeprefix(".")
        for kind in (cls.PNG, cls.JPEG):
            if extension in kind.extensions:
                return kind
        return cls.UNKNOWN


class TrackKind(StrEnum):
    """Addressing scheme used by a track, serialized as the track ``type``."""

    KEY = "key"
    HASH = "hash"
    LEVEL_ID = "levelID"


@dataclass(slots=True)
class Difficulty:
    """One playable difficulty of a track."""

    name: str
    characteristic: str

    def validate(self) -> None:
        if not is_single_line_nonempty(self.name):
            raise InvalidFieldError("track difficulty", "name", self.name)
        if not is_single_line_nonempty(self.characteristic):
            raise InvalidFieldError("track difficulty", "characteristic", self.characteristic)


@dataclass(slots=True)
class Cover:
    """Embedded cover image stored as its own archive entry."""

    relative_path: PurePosixPath
    image_bytes: bytes = b""
    kind: CoverKind = CoverKind.UNKNOWN

    def __post_init__(self) -> None:
        if not isinstance(self.relative_path, PurePosixPath):
            self.relative_path = PurePosixPath(str(self.relative_path))

    def validate(self) -> None:
        """Check path safety, extension and signature against ``kind``.

        Raises:
            UnknownCoverTypeError: ``kind`` is ``UNKNOWN``.
            InvalidCoverPathError: The path is not a single file name or its
                extension does not belong to ``kind``.
            InvalidCoverDataError: ``image_bytes`` does not start with the
                signature of ``kind``.
        """
        signature = self.kind.signature
        if signature is None:
            raise UnknownCoverTypeError()

        if (
            not is_single_file_name(self.relative_path)
            or self.relative_path.suffix.removeprefix(".") not in self.kind.extensions
        ):
            raise InvalidCoverPathError(self.kind.value, self.relative_path)

        if not has_signature(self.image_bytes, signature):
            raise InvalidCoverDataError(self.kind.value)


@dataclass(slots=True)
class Track:
    """Reference to an externally stored level, addressed by key, hash or level ID."""

    kind: TrackKind
    key: str | None = None
    hash: str | None = None
    level_id: str | None = None
    added_at: datetime | None = None
    difficulties: list[Difficulty] = field(default_factory=list)
    custom_data: JsonObject = field(default_factory=dict)

    @classmethod
    def from_key(cls, key: str) -> Track:
        return cls(kind=TrackKind.KEY, key=key, added_at=datetime.now(UTC))

    @classmethod
    def from_hash(cls, hash: str) -> Track:
        return cls(kind=TrackKind.HASH, hash=hash, added_at=datetime.now(UTC))

    @classmethod
    def from_level_id(cls, level_id: str) -> Track:
        return cls(kind=TrackKind.LEVEL_ID, level_id=level_id, added_at=datetime.now(UTC))

    def identifier(self) -> str | None:
        """Return the identifier selected by ``kind``."""

        if self.kind is TrackKind.KEY:
            return self.key
        if self.kind is TrackKind.HASH:
            return self.hash
        return self.level_id

    def validate(self) -> None:
        """Validate the kind/identifier pairing, then difficulties, then identifier formats."""

        if self.identifier() is None:
            raise MismatchedTypeError(self.kind.value, self.kind.value)

        for index, difficulty in enumerate(self.difficulties):
            try:
                difficulty.validate()
            except PlaylistValidationError as error:
                raise InvalidDifficultyError(index, error) from error

        if self.key is not None and (not self.key or not is_hex_string(self.key)):
            raise InvalidFieldError("track", "key", self.key)
        if self.hash is not None and not is_sha1_hex(self.hash):
            raise InvalidFieldError("track", "hash", self.hash)
        if self.level_id is not None and not is_single_line_nonempty(self.level_id):
            raise InvalidFieldError("track", "levelID", self.level_id)


@dataclass(slots=True)
class Playlist:
    """Root entity of a playlist container."""

    title: str
    author: str | None = None
    description: str | None = None
    cover: Cover | None = None
    maps: list[Track] = field(default_factory=list)
    custom_data: JsonObject = field(default_factory=dict)

    def validate(self) -> None:
        """Validate the playlist, stopping at the first problem.

        Order: title, author, description, cover, then tracks by index.

        Raises:
            PlaylistValidationError: Describes the first invalid field; its
                ``location`` names the nested track/difficulty indexes.
        """
        if not is_single_line_nonempty(self.title):
            raise InvalidFieldError("playlist", "title", self.title)
        if self.author is not None and not is_single_line_nonempty(self.author):
            raise InvalidFieldError("playlist", "author", self.author)
        if self.description is not None and not self.description:
            raise InvalidFieldError("playlist", "description", self.description)

        if self.cover is not None:
            self.cover.validate()

        for index, track in enumerate(self.maps):
            try:
                track.validate()
            except PlaylistValidationError as error:
                raise InvalidTrackError(index, error) from error

    def is_valid(self) -> bool:
        try:
            self.validate()
        except PlaylistValidationError:
            return False
        return True

    def set_png_cover(self, data: bytes) -> None:
        self._attach_cover(CoverKind.PNG, data)

    def set_jpg_cover(self, data: bytes) -> None:
        self._attach_cover(CoverKind.JPEG, data)

    def set_cover(self, data: bytes) -> CoverKind:
        """Attach ``data`` as the cover, picking the kind from its signature.

        Raises:
            InvalidCoverDataError: ``data`` is neither PNG nor JPEG.
        """
        kind = CoverKind.sniff(data)
        if kind is CoverKind.UNKNOWN:
            raise InvalidCoverDataError(kind.value)
        self._attach_cover(kind, data)
        return kind

    def remove_cover(self) -> None:
        self.cover = None

    def sort_maps_by_date(self) -> None:
        """Order tracks by ``added_at``; undated tracks come first.

        Timestamps without an offset are ordered as UTC.
        """

        def instant(track: Track) -> datetime:
            if track.added_at is None:
                return datetime.min.replace(tzinfo=UTC)
            if track.added_at.tzinfo is None:
                return track.added_at.replace(tzinfo=UTC)
            return track.added_at

        self.maps.sort(key=lambda track: (track.added_at is not None, instant(track)))

    def _attach_cover(self, kind: CoverKind, data: bytes) -> None:
        self.cover = Cover(relative_path=kind.default_path, image_bytes=bytes(data), kind=kind)


__all__ = ["Cover", "CoverKind", "Difficulty", "Playlist", "Track", "TrackKind"]
