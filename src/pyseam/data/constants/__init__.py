"""File format and manifest constants for PySeam."""

from .processing_constants import MaterialFileConstants, ManifestConstants, ErrorMessages, FileConstants

__all__ = [
    "MaterialFileConstants",
    "ManifestConstants",
    "ErrorMessages",
    "FileConstants"
]
