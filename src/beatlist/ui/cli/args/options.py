"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from beatlist.features.legacy.domain.models import ImageEncoding


@final
@dataclass(slots=True)
class ConvertArgs:
    """Command line arguments for the ``convert`` subcommand."""

    command: Literal["convert"]
    pattern: str
    verbose: bool
    quiet: bool
    preserve_custom_data: bool
    exit_on_error: bool
    delete_converted: bool
    image_encoding: ImageEncoding
    workers: int | None


@final
@dataclass(slots=True)
class ValidateArgs:
    """Command line arguments for the ``validate`` subcommand."""

    command: Literal["validate"]
    paths: list[Path]
    verbose: bool
    quiet: bool


CLIArgs = ConvertArgs | ValidateArgs

__all__ = ["CLIArgs", "ConvertArgs", "ValidateArgs"]
