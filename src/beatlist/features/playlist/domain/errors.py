"""src/beatlist/features/playlist/domain/errors.py
What: Exception hierarchy for playlist validation and container decoding.
Why: Let callers report exactly which field, track or archive entry was rejected.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TypeAlias

Location: TypeAlias = tuple[str | int, ...]


def format_location(location: Location) -> str:
    """Render a location as a dotted path such as ``maps[1].difficulties[0].name``."""

    label = ""
    for part in location:
        if isinstance(part, int):
            label += f"[{part}]"
        elif label:
            label += f".{part}"
        else:
            label = part
    return label


class BeatlistError(Exception):
    """Base class for every error raised by beatlist."""


class PlaylistValidationError(BeatlistError, ValueError):
    """A playlist, track, difficulty or cover violates the schema."""

    location: Location

    def __init__(self, message: str, location: Location = ()) -> None:
        super().__init__(message)
        self.location = location

    def location_label(self) -> str:
        return format_location(self.location)


class InvalidFieldError(PlaylistValidationError):
    """A named field holds a value violating its format rule."""

    owner: str
    field: str
    value: str

    def __init__(self, owner: str, field: str, value: str) -> None:
        message = f"{owner} field `{field}` has value of `{value}` which doesn't respect the schema"
        super().__init__(message, (field,))
        self.owner = owner
        self.field = field
        self.value = value


class MismatchedTypeError(PlaylistValidationError):
    """A track's declared reference kind has no matching identifier."""

    kind: str
    field: str

    def __init__(self, kind: str, field: str) -> None:
        super().__init__(f"missing field `{field}` in track of type `{kind}`", (field,))
        self.kind = kind
        self.field = field


class InvalidDifficultyError(PlaylistValidationError):
    """Wrap the error of the difficulty at ``index``."""

    index: int
    error: PlaylistValidationError

    def __init__(self, index: int, error: PlaylistValidationError) -> None:
        super().__init__(
            f"track difficulty at index `{index}` is invalid: {error}",
            ("difficulties", index, *error.location),
        )
        self.index = index
        self.error = error


class InvalidTrackError(PlaylistValidationError):
    """Wrap the error of the track at ``index``."""

    index: int
    error: PlaylistValidationError

    def __init__(self, index: int, error: PlaylistValidationError) -> None:
        super().__init__(
            f"track at index `{index}` is invalid: {error}",
            ("maps", index, *error.location),
        )
        self.index = index
        self.error = error


class CoverError(PlaylistValidationError):
    """The cover image is inconsistent with its declared kind."""


class UnknownCoverTypeError(CoverError):
    def __init__(self) -> None:
        super().__init__("playlist cover has an unknown type", ("cover",))


class InvalidCoverPathError(CoverError):
    """The cover path is unsafe or its extension does not match the kind."""

    kind: str
    path: PurePosixPath

    def __init__(self, kind: str, path: PurePosixPath | str) -> None:
        super().__init__(
            f"playlist cover of type `{kind}` has invalid path `{path}`",
            ("cover",),
        )
        self.kind = kind
        self.path = PurePosixPath(path)


class InvalidCoverDataError(CoverError):
    """The cover bytes do not start with the signature of the declared kind."""

    kind: str

    def __init__(self, kind: str) -> None:
        super().__init__(f"playlist cover of type `{kind}` has invalid data", ("cover",))
        self.kind = kind


class ContainerFormatError(BeatlistError):
    """The archive or one of its entries cannot be decoded."""


class ArchiveOpenError(ContainerFormatError):
    """The container is not a readable zip archive."""


class MissingEntryError(ContainerFormatError):
    """A required archive entry is absent."""

    name: str

    def __init__(self, name: str) -> None:
        super().__init__(f"archive entry `{name}` is missing")
        self.name = name


class ManifestDecodeError(ContainerFormatError):
    """The manifest bytes are not valid UTF-8 JSON."""


class ManifestSchemaError(ContainerFormatError):
    """The manifest JSON does not have the expected shape."""


class ManifestEncodeError(ContainerFormatError):
    """The playlist cannot be serialized to JSON (e.g. non-JSON custom data)."""


class LegacyFormatError(BeatlistError):
    """A legacy playlist document cannot be parsed."""


__all__ = [
    "ArchiveOpenError",
    "BeatlistError",
    "ContainerFormatError",
    "CoverError",
    "InvalidCoverDataError",
    "InvalidCoverPathError",
    "InvalidDifficultyError",
    "InvalidFieldError",
    "InvalidTrackError",
    "LegacyFormatError",
    "Location",
    "ManifestDecodeError",
    "ManifestEncodeError",
    "ManifestSchemaError",
    "MismatchedTypeError",
    "MissingEntryError",
    "PlaylistValidationError",
    "UnknownCoverTypeError",
    "format_location",
]
