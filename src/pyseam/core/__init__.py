"""
Core data structures of PySeam.

This module contains the material record produced by the material file
parser, the documented material type vocabulary, and the exception hierarchy.
"""

from .records import MaterialRecord
from .material_types import MaterialType, PARAMETER_NAMES, parameter_names_for
from .exceptions import PySeamError, ManifestError, SettingsError

__all__ = [
    "MaterialRecord",
    "MaterialType",
    "PARAMETER_NAMES",
    "parameter_names_for",
    "PySeamError",
    "ManifestError",
    "SettingsError"
]
