"""Job manifest resolution: file roles and existence checks."""

from .path_resolver import PathResolver, ManifestPaths, FileRole, RECOGNIZED_ROLES

__all__ = [
    "PathResolver",
    "ManifestPaths",
    "FileRole",
    "RECOGNIZED_ROLES"
]
