"""
File format constants and bundled sample input decks.

This package provides the constants shared by the manifest resolver and the
material file parser, plus small sample files used by the demo and the tests.
"""
from pathlib import Path

from .constants.processing_constants import MaterialFileConstants, ManifestConstants, ErrorMessages, FileConstants

SAMPLES_DIR = Path(__file__).parent / "samples"

__all__ = [
    "MaterialFileConstants",
    "ManifestConstants",
    "ErrorMessages",
    "FileConstants",
    "SAMPLES_DIR"
]
