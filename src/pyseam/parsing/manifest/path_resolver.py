import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PureWindowsPath
from typing import Dict, List, Optional, Union

from pyseam.core.exceptions import ManifestError
from pyseam.data.constants import ErrorMessages, FileConstants
from pyseam.parsing.config.settings_yaml_parser import ResolverSettings

logger = logging.getLogger(__name__)


class FileRole(Enum):
    """Role of a manifest entry, identified by its file extension."""
    MATERIAL = ".mat"
    SUBSYSTEM = ".sub"
    JUNCTION = ".jun"
    EXCITATION = ".exc"
    PARAMETER = ".par"
    UNRECOGNIZED = ""

    @property
    def label(self) -> str:
        """Short upper-case tag used in diagnostics, e.g. 'MAT'."""
        return self.value.lstrip('.').upper()


# Scan order matters: the first extension found in a line decides its role.
RECOGNIZED_ROLES = (FileRole.MATERIAL, FileRole.SUBSYSTEM, FileRole.JUNCTION,
                    FileRole.EXCITATION, FileRole.PARAMETER)

_SUMMARY_LABELS = {
    FileRole.MATERIAL: "MAT",
    FileRole.SUBSYSTEM: "SUB",
    FileRole.JUNCTION: "JNC",
    FileRole.EXCITATION: "EXC",
    FileRole.PARAMETER: "PAR",
}


@dataclass
class ManifestPaths:
    """File paths resolved from a job manifest, one optional slot per role."""
    material: Optional[str] = None
    subsystem: Optional[str] = None
    junction: Optional[str] = None
    excitation: Optional[str] = None
    parameter: Optional[str] = None
    diagnostics: List[str] = field(default_factory=list)

    def get(self, role: FileRole) -> Optional[str]:
        if role is FileRole.UNRECOGNIZED:
            return None
        return getattr(self, role.name.lower())

    def as_dict(self) -> Dict[FileRole, Optional[str]]:
        return {role: self.get(role) for role in RECOGNIZED_ROLES}

    def summary(self) -> str:
        """Render the resolved path of every role, one per line."""
        return "\n".join(f"{_SUMMARY_LABELS[role]} file path: {path or ''}"
                         for role, path in self.as_dict().items())


class PathResolver:
    """
    Resolves the file paths listed in a job manifest.

    Only lines starting with one of the configured drive letters are
    considered. Each one is classified by extension and checked for
    existence; the first accepted path of each role is kept. Lines that
    cannot be classified or whose file is missing are reported as
    diagnostics, and resolution continues with the next line.
    """

    def __init__(self, settings: Optional[ResolverSettings] = None) -> None:
        self.settings = settings or ResolverSettings()

    @staticmethod
    def resolve_role(line: str) -> FileRole:
        """Classify a manifest line by the first known extension it contains."""
        for role in RECOGNIZED_ROLES:
            if role.value in line:
                return role
        return FileRole.UNRECOGNIZED

    def locate(self, path: str) -> Optional[Path]:
        """
        Return a readable location for ``path``, or None.

        The path is tried as written first, then by file name inside the
        configured input folder.
        """
        candidates = [Path(path)]
        if self.settings.input_folder is not None:
            candidates.append(Path(self.settings.input_folder) / PureWindowsPath(path).name)
        for candidate in candidates:
            if self._is_openable(candidate):
                return candidate
        return None

    def exists(self, path: str) -> bool:
        """Whether the file referenced by ``path`` can be opened for reading."""
        return self.locate(path) is not None

    def resolve(self, manifest_path: Union[str, Path]) -> ManifestPaths:
        """
        Read a manifest and resolve one file path per role.
        Args:
            manifest_path: Path to the manifest file
        Returns:
            ManifestPaths holding the accepted path of each role and the
            diagnostics reported along the way
        Raises:
            ManifestError: If the manifest itself cannot be opened
        """
        manifest_path = Path(manifest_path)
        logger.info("Resolving job manifest: %s", manifest_path)
        result = ManifestPaths()
        try:
            with open(manifest_path, 'r', encoding=self.settings.encoding,
                      errors=FileConstants.DECODING_ERRORS) as f:
                for line_number, line in enumerate(f, start=1):
                    if line_number == 1:
                        line = line.lstrip(FileConstants.BYTE_ORDER_MARK)
                    self._resolve_line(line.rstrip(), result)
        except (OSError, LookupError) as e:
            raise ManifestError(ErrorMessages.MANIFEST_UNREADABLE.format(path=manifest_path)) from e
        logger.info("Manifest resolved: %d of %d roles found, %d diagnostics",
                    sum(1 for path in result.as_dict().values() if path), len(RECOGNIZED_ROLES),
                    len(result.diagnostics))
        return result

    def _resolve_line(self, line: str, result: ManifestPaths) -> None:
        if not line or line[0] not in self.settings.drive_letters:
            return
        role = self.resolve_role(line)
        if role is FileRole.UNRECOGNIZED:
            self._report(result, ErrorMessages.UNSUPPORTED_FILE.format(line=line))
            return
        location = self.locate(line)
        if location is None:
            self._report(result, ErrorMessages.MISSING_ROLE_FILE.format(label=role.label, line=line))
            return
        if result.get(role) is not None:
            logger.info("%s file already resolved, ignoring %s", role.label, line)
            return
        setattr(result, role.name.lower(), str(location))
        logger.debug("%s file resolved: %s -> %s", role.label, line, location)

    @staticmethod
    def _is_openable(path: Path) -> bool:
        try:
            with open(path, 'rb'):
                return True
        except OSError:
            return False

    @staticmethod
    def _report(result: ManifestPaths, message: str) -> None:
        logger.error("Error: %s", message)
        result.diagnostics.append(message)
