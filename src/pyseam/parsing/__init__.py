"""
Parsing modules for PySeam.

This package handles job manifest resolution, material file parsing,
resolver settings and the export of parsed material records.
"""

from .api import SeamJob, read_material_file, load_settings, resolve_manifest, load_job
from .material.material_file_parser import MaterialFileParser, ParserState, ParseWarning
from .manifest.path_resolver import PathResolver, ManifestPaths, FileRole
from .config.settings_yaml_parser import ResolverSettings

__all__ = [
    'SeamJob',
    'read_material_file',
    'load_settings',
    'resolve_manifest',
    'load_job',
    'MaterialFileParser',
    'ParserState',
    'ParseWarning',
    'PathResolver',
    'ManifestPaths',
    'FileRole',
    'ResolverSettings'
]
