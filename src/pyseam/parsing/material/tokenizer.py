"""Delimiter-agnostic tokenization of material file lines."""
import re
from typing import List, Optional, Sequence, Tuple

from pyseam.data.constants import MaterialFileConstants

# Fields are separated by whitespace, commas, or any mix of the two.
_FIELD_SPLIT_REGEX = re.compile(r'[\s' + re.escape(MaterialFileConstants.FIELD_DELIMITERS) + r']+')

# Fixed or free format real number; Fortran 'D' exponents are accepted.
_NUMBER_REGEX = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eEdD][+-]?\d+)?$')


def split_tokens(line: str) -> List[str]:
    """
    Split a line into fields.

    Empty fields, as produced by consecutive commas, are dropped.
    Examples:
        >>> split_tokens(" 7.85e-6,2.07e8,8.0e7, 0.3, #1061,, panel_b")
        ['7.85e-6', '2.07e8', '8.0e7', '0.3', '#1061', 'panel_b']
    """
    return [token for token in _FIELD_SPLIT_REGEX.split(line) if token]


def parse_number(token: str) -> Optional[float]:
    """Parse a numeric field, returning None when the token is not a number."""
    if not _NUMBER_REGEX.match(token):
        return None
    return float(token.replace('d', 'e').replace('D', 'e'))


def leading_numbers(tokens: Sequence[str]) -> Tuple[List[float], Optional[str]]:
    """
    Consume numeric tokens from the left until the first non-numeric one.
    Returns:
        Tuple of (values, stop_token). ``stop_token`` is the token that ended
        consumption, or None when every token was numeric.
    """
    values = []
    for token in tokens:
        value = parse_number(token)
        if value is None:
            return values, token
        values.append(value)
    return values, None
