"""Use cases of the conversion feature."""

from .batch_converter import BatchConverter, ProgressCallback
from .convert_file import convert_file, target_path_for
from .validate_files import validate_container, validate_containers

__all__ = [
    "BatchConverter",
    "ProgressCallback",
    "convert_file",
    "target_path_for",
    "validate_container",
    "validate_containers",
]
