"""Domain types of the conversion feature."""

from .models import (
    BatchLogContext,
    ConversionError,
    ConversionEvent,
    ConversionRequest,
    ConversionResult,
    DestinationExistsError,
    ValidationResult,
)

__all__ = [
    "BatchLogContext",
    "ConversionError",
    "ConversionEvent",
    "ConversionRequest",
    "ConversionResult",
    "DestinationExistsError",
    "ValidationResult",
]
