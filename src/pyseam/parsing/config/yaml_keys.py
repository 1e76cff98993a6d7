"""Keys recognised in resolver settings files."""

DRIVE_LETTERS_KEY = "drive_letters"
INPUT_FOLDER_KEY = "input_folder"
ENCODING_KEY = "encoding"

VALID_SETTINGS_KEYS = frozenset({DRIVE_LETTERS_KEY, INPUT_FOLDER_KEY, ENCODING_KEY})

__all__ = [
    "DRIVE_LETTERS_KEY",
    "INPUT_FOLDER_KEY",
    "ENCODING_KEY",
    "VALID_SETTINGS_KEYS"
]
