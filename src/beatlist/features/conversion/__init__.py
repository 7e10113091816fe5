"""Public surface for batch conversion of legacy playlists."""

from .domain.models import (
    ConversionError,
    ConversionEvent,
    ConversionRequest,
    ConversionResult,
    DestinationExistsError,
    ValidationResult,
)
from .usecases.batch_converter import BatchConverter
from .usecases.convert_file import convert_file, target_path_for
from .usecases.validate_files import validate_container, validate_containers

__all__ = [
    "BatchConverter",
    "ConversionError",
    "ConversionEvent",
    "ConversionRequest",
    "ConversionResult",
    "DestinationExistsError",
    "ValidationResult",
    "convert_file",
    "target_path_for",
    "validate_container",
    "validate_containers",
]
