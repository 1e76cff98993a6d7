import logging
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pyseam.core.records import MaterialRecord
from pyseam.data.constants import MaterialFileConstants, ErrorMessages, FileConstants
from pyseam.parsing.material.tokenizer import split_tokens, leading_numbers

logger = logging.getLogger(__name__)


class ParserState(Enum):
    """Position inside the two-line material record."""
    HEADER = auto()
    PROPERTIES = auto()


@dataclass(frozen=True)
class ParseWarning:
    """A non-fatal irregularity found while reading a material file."""
    line_number: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"


class MaterialFileParser:
    """
    Reader for SEAM material files.

    Each material is described by two lines: a header line carrying the
    subsystem id and material type, followed by a properties line carrying
    the material parameters. Comment lines (``!`` in column 1), blank lines
    and section markers (``(`` or ``)`` in column 1) are skipped and never
    advance the header/properties cycle. Fields may be separated by blanks,
    commas or both.

    The reader is lenient: malformed lines are recorded in ``warnings`` and
    never abort the parse. A file that cannot be opened is reported through
    the log and produces an empty result.
    """

    def __init__(self, encoding: str = FileConstants.DEFAULT_READ_ENCODING) -> None:
        self.encoding = encoding
        self.warnings: List[ParseWarning] = []
        self._materials: Dict[str, MaterialRecord] = {}
        self._state = ParserState.HEADER
        self._current: Optional[MaterialRecord] = None
        self._line_number = 0

    # --- Public API ---
    def parse(self, path: Union[str, Path]) -> Dict[str, MaterialRecord]:
        """
        Parse a material file into a mapping of subsystem id to record.
        Args:
            path: Path to the material file
        Returns:
            Dictionary of MaterialRecord keyed by subsystem id. Empty when the
            file cannot be opened.
        """
        path = Path(path)
        logger.info("Reading material file: %s", path)
        self._reset()
        try:
            with open(path, 'r', encoding=self.encoding, errors=FileConstants.DECODING_ERRORS) as f:
                materials = self._consume(f)
        except (OSError, LookupError) as e:
            logger.error("%s (%s)", ErrorMessages.MATERIAL_FILE_UNREADABLE.format(path=path), e)
            self._reset()
            return {}
        logger.info("Read %d material records from %s (%d warnings)", len(materials), path, len(self.warnings))
        return materials

    def parse_lines(self, lines: Iterable[str]) -> Dict[str, MaterialRecord]:
        """Parse material records from lines of text that were already read."""
        self._reset()
        return self._consume(lines)

    @property
    def state(self) -> ParserState:
        """State the parser is in after the last consumed line."""
        return self._state

    # --- Line processing ---
    def _reset(self) -> None:
        self.warnings = []
        self._materials = {}
        self._state = ParserState.HEADER
        self._current = None
        self._line_number = 0

    def _consume(self, lines: Iterable[str]) -> Dict[str, MaterialRecord]:
        for raw_line in lines:
            self._line_number += 1
            line = raw_line.rstrip('\r\n')
            if self._line_number == 1:
                line = line.lstrip(FileConstants.BYTE_ORDER_MARK)
            self._process_line(line)
        if self._state is ParserState.PROPERTIES:
            self._warn(f"record '{self._current.subsystem_id}' has no properties line")
        materials = self._materials
        self._current = None
        return materials

    def _process_line(self, line: str) -> None:
        if self._is_skipped(line):
            return
        tokens = split_tokens(line)
        if not tokens:
            logger.debug("Line %d holds only delimiters, skipped", self._line_number)
            return
        if self._state is ParserState.HEADER:
            self._read_header(tokens)
            self._state = ParserState.PROPERTIES
        else:
            self._read_properties(tokens)
            self._state = ParserState.HEADER

    @staticmethod
    def _is_skipped(line: str) -> bool:
        """Blank, comment and section marker lines carry no record data."""
        if not line.strip():
            return True
        return line[0] in (MaterialFileConstants.COMMENT_CHAR,
                           MaterialFileConstants.SECTION_OPEN_CHAR,
                           MaterialFileConstants.SECTION_CLOSE_CHAR)

    def _read_header(self, tokens: List[str]) -> None:
        subsystem_id = tokens[0]
        if len(tokens) > 1:
            material_type = tokens[1]
        else:
            material_type = ""
            self._warn(f"header for '{subsystem_id}' has no material type")
        if subsystem_id in self._materials:
            self._warn(f"duplicate subsystem id '{subsystem_id}' replaces the earlier record")
        record = MaterialRecord(subsystem_id=subsystem_id, material_type=material_type)
        self._materials[subsystem_id] = record
        self._current = record
        logger.debug("Line %d: header for subsystem %s (%s)", self._line_number, subsystem_id, material_type)

    def _read_properties(self, tokens: List[str]) -> None:
        values, stop_token = leading_numbers(tokens)
        self._current.properties.extend(values)
        if stop_token is not None:
            logger.debug("Line %d: numeric fields end at '%s'", self._line_number, stop_token)
        if not values:
            self._warn(f"properties line for '{self._current.subsystem_id}' has no numeric values")
        elif len(self._current.properties) > MaterialFileConstants.MAX_DOCUMENTED_PARAMETERS:
            self._warn(f"record '{self._current.subsystem_id}' has {len(self._current.properties)} values, "
                       f"more than the {MaterialFileConstants.MAX_DOCUMENTED_PARAMETERS} documented parameters")

    def _warn(self, message: str) -> None:
        warning = ParseWarning(self._line_number, message)
        self.warnings.append(warning)
        logger.warning("Material file %s", warning)
