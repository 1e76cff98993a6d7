"""Material file reading: tokenizer and two-line record parser."""

from .material_file_parser import MaterialFileParser, ParserState, ParseWarning
from .tokenizer import split_tokens, parse_number, leading_numbers

__all__ = [
    "MaterialFileParser",
    "ParserState",
    "ParseWarning",
    "split_tokens",
    "parse_number",
    "leading_numbers"
]
