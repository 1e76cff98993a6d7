import codecs
import logging
from dataclasses import dataclass
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ruamel.yaml import YAML, constructor, error

from pyseam.core.exceptions import SettingsError
from pyseam.data.constants import ManifestConstants, FileConstants
from pyseam.parsing.config.yaml_keys import DRIVE_LETTERS_KEY, INPUT_FOLDER_KEY, ENCODING_KEY, \
    VALID_SETTINGS_KEYS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverSettings:
    """
    Settings used to resolve a job manifest.

    Attributes:
        drive_letters: Leading characters that mark a manifest line as a file path
        input_folder: Local folder searched for a referenced file when its
            absolute path cannot be opened (e.g. a deck written on another machine)
        encoding: Text encoding of the manifest and material files
    """
    drive_letters: Tuple[str, ...] = ManifestConstants.DEFAULT_DRIVE_LETTERS
    input_folder: Optional[Path] = None
    encoding: str = FileConstants.DEFAULT_READ_ENCODING


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r', encoding=FileConstants.DEFAULT_READ_ENCODING) as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys",
                         len(config) if isinstance(config, dict) else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            raise SettingsError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except error.YAMLError as e:
            raise SettingsError(f"YAML syntax error in {self.config_path}: {str(e)}") from e


class SettingsYAMLParser(YAMLFileParser):
    """Parser for resolver settings files in YAML format."""

    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        self._validate_config()

    def create_settings(self) -> ResolverSettings:
        """Build ResolverSettings from the loaded configuration."""
        drive_letters = self.config.get(DRIVE_LETTERS_KEY, ManifestConstants.DEFAULT_DRIVE_LETTERS)
        if isinstance(drive_letters, str):
            drive_letters = [drive_letters]
        input_folder = self.config.get(INPUT_FOLDER_KEY)
        if input_folder is not None:
            input_folder = Path(input_folder)
            # Relative folders are taken from the settings file location
            if not input_folder.is_absolute():
                input_folder = (self.base_dir / input_folder).resolve()
        settings = ResolverSettings(
            drive_letters=tuple(str(letter) for letter in drive_letters),
            input_folder=input_folder,
            encoding=self.config.get(ENCODING_KEY, FileConstants.DEFAULT_READ_ENCODING),
        )
        logger.debug("Resolver settings: %s", settings)
        return settings

    def _validate_config(self) -> None:
        if self.config is None:
            self.config = {}
            return
        if not isinstance(self.config, dict):
            raise SettingsError(f"Settings file {self.config_path} must contain a mapping of keys to values")
        unknown = set(self.config) - VALID_SETTINGS_KEYS
        if unknown:
            messages = []
            for key in sorted(unknown, key=str):
                suggestion = get_close_matches(str(key), VALID_SETTINGS_KEYS, n=1)
                hint = f" (did you mean '{suggestion[0]}'?)" if suggestion else ""
                messages.append(f"'{key}'{hint}")
            raise SettingsError(f"Unknown settings in {self.config_path}: {', '.join(messages)}")
        drive_letters = self.config.get(DRIVE_LETTERS_KEY)
        if drive_letters is not None:
            letters = [drive_letters] if isinstance(drive_letters, str) else drive_letters
            if not isinstance(letters, list) or not letters or any(len(str(d)) != 1 for d in letters):
                raise SettingsError(f"'{DRIVE_LETTERS_KEY}' must be a single character or a list of them, "
                                    f"got {drive_letters!r}")
        input_folder = self.config.get(INPUT_FOLDER_KEY)
        if input_folder is not None and not isinstance(input_folder, str):
            raise SettingsError(f"'{INPUT_FOLDER_KEY}' must be a path string, got {input_folder!r}")
        encoding = self.config.get(ENCODING_KEY)
        if encoding is not None and not isinstance(encoding, str):
            raise SettingsError(f"'{ENCODING_KEY}' must be a string, got {encoding!r}")
        if encoding is not None:
            try:
                codecs.lookup(encoding)
            except LookupError as e:
                raise SettingsError(f"Unknown '{ENCODING_KEY}' in {self.config_path}: {encoding!r}") from e
