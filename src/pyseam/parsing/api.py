import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from pyseam.core.records import MaterialRecord
from pyseam.parsing.config.settings_yaml_parser import ResolverSettings, SettingsYAMLParser
from pyseam.parsing.manifest.path_resolver import ManifestPaths, PathResolver
from pyseam.parsing.material.material_file_parser import MaterialFileParser, ParseWarning

logger = logging.getLogger(__name__)


@dataclass
class SeamJob:
    """Resolved input deck of a job: file paths plus the parsed material records."""
    paths: ManifestPaths
    materials: Dict[str, MaterialRecord] = field(default_factory=dict)
    warnings: List[ParseWarning] = field(default_factory=list)


def read_material_file(path: Union[str, Path], encoding: Optional[str] = None) -> Dict[str, MaterialRecord]:
    """
    Read a SEAM material file.

    This never raises for an unreadable file: the failure is logged and an
    empty mapping is returned.
    Args:
        path: Path to the material file
        encoding: Text encoding, utf-8 when not given
    Returns:
        Dictionary of MaterialRecord keyed by subsystem id
    Examples:
        materials = read_material_file('panel.mat')
        steel = materials['1011']
        print(steel.material_type, steel.named_parameters())
    """
    parser = MaterialFileParser(encoding=encoding) if encoding else MaterialFileParser()
    return parser.parse(path)


def load_settings(yaml_path: Union[str, Path]) -> ResolverSettings:
    """
    Load resolver settings from a YAML file.
    Raises:
        FileNotFoundError: If the file doesn't exist
        SettingsError: If the YAML content is invalid
    """
    logger.info("Loading resolver settings: %s", yaml_path)
    return SettingsYAMLParser(yaml_path).create_settings()


def resolve_manifest(manifest_path: Union[str, Path],
                     settings: Optional[ResolverSettings] = None) -> ManifestPaths:
    """
    Resolve the role file paths listed in a job manifest.
    Raises:
        ManifestError: If the manifest cannot be opened
    """
    return PathResolver(settings).resolve(manifest_path)


def load_job(manifest_path: Union[str, Path], settings: Optional[ResolverSettings] = None) -> SeamJob:
    """
    Resolve a job manifest and read its material file.

    The material file is only read when the manifest named one that could
    be opened. Diagnostics from both steps are kept on the returned job.
    Raises:
        ManifestError: If the manifest cannot be opened
    """
    settings = settings or ResolverSettings()
    paths = PathResolver(settings).resolve(manifest_path)
    job = SeamJob(paths=paths)
    if paths.material is None:
        logger.warning("No material file resolved from %s", manifest_path)
        return job
    parser = MaterialFileParser(encoding=settings.encoding)
    job.materials = parser.parse(paths.material)
    job.warnings = parser.warnings
    logger.info("Loaded job from %s with %d material records", manifest_path, len(job.materials))
    return job
