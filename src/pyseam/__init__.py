"""
PySeam - input deck handling for SEAM vibro-acoustic simulation jobs.

This library resolves the files listed in a job manifest and reads the
material file of the deck into structured records.

Key Features:
- Manifest resolution by file role (material, subsystem, junction, excitation, parameter)
- Lenient reader for the two-line-per-record material file format
- Fixed-column and comma-delimited free format input
- Named access to the MP1..MP6 material parameters
- Text, DataFrame and YAML export of parsed records

Main Components:
- Core: Material records, material types and exceptions
- Parsing: Manifest resolution, material file parsing, settings and export
- Data: File format constants and sample input decks
"""

# Version handling with fallbacks
try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        try:
            __version__ = version("pyseam")
        except PackageNotFoundError:
            __version__ = "0.1.0+unknown"
    except ImportError:
        __version__ = "0.1.0+unknown"

# Core definitions
from .core.records import MaterialRecord
from .core.material_types import MaterialType
from .core.exceptions import PySeamError, ManifestError, SettingsError

# Main API functions
from .parsing.api import (
    SeamJob,
    read_material_file,
    load_settings,
    resolve_manifest,
    load_job
)

# Parsers
from .parsing.material.material_file_parser import MaterialFileParser, ParseWarning
from .parsing.manifest.path_resolver import PathResolver, ManifestPaths, FileRole
from .parsing.config.settings_yaml_parser import ResolverSettings

# Export
from .parsing.io.material_exporter import (
    format_materials,
    display_materials,
    materials_to_dataframe,
    write_materials_yaml
)

__all__ = [
    # Version
    '__version__',

    # Core classes
    'MaterialRecord',
    'MaterialType',
    'PySeamError',
    'ManifestError',
    'SettingsError',

    # Main API
    'SeamJob',
    'read_material_file',
    'load_settings',
    'resolve_manifest',
    'load_job',

    # Parsers
    'MaterialFileParser',
    'ParseWarning',
    'PathResolver',
    'ManifestPaths',
    'FileRole',
    'ResolverSettings',

    # Export
    'format_materials',
    'display_materials',
    'materials_to_dataframe',
    'write_materials_yaml'
]
