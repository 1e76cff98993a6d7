from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class MaterialFileConstants:
    """Layout constants of the SEAM material file format (rev 3.0)."""
    # Column-1 markers
    COMMENT_CHAR: Final[str] = '!'
    SECTION_OPEN_CHAR: Final[str] = '('
    SECTION_CLOSE_CHAR: Final[str] = ')'
    # Free-format field separators, whitespace is always a separator too
    FIELD_DELIMITERS: Final[str] = ','
    # Number of documented material parameters (MP1..MP6)
    MAX_DOCUMENTED_PARAMETERS: Final[int] = 6


@dataclass(frozen=True)
class ManifestConstants:
    """Constants used when resolving a job manifest."""
    DEFAULT_DRIVE_LETTERS: Final[tuple] = ('C',)
    DEFAULT_MANIFEST_NAME: Final[str] = 'seam.in'


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized diagnostic message templates."""
    MISSING_ROLE_FILE: Final[str] = "{label} file does not exist - {line}"
    UNSUPPORTED_FILE: Final[str] = "File does not exist or unsupported file type - {line}"
    MANIFEST_UNREADABLE: Final[str] = "Unable to open the input file: {path}"
    MATERIAL_FILE_UNREADABLE: Final[str] = "Failed to open file: {path}"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    # Input decks written on Windows often start with a byte order mark
    DEFAULT_READ_ENCODING: Final[str] = 'utf-8-sig'
    BYTE_ORDER_MARK: Final[str] = '\ufeff'
    # Hand-edited decks occasionally carry legacy code page characters in comments
    DECODING_ERRORS: Final[str] = 'replace'
