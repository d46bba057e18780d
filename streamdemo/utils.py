"""Generic utility helpers for argument parsing."""

import re
from typing import Optional

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Leading/trailing whitespace, an optional sign and ASCII digits only.
_INTEGER_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]+)[\t\n\v\f\r ]*", re.ASCII)


def try_parse_int(text: str) -> Optional[int]:
    """
    Convert text to a signed 32-bit integer, if possible.

    Surrounding whitespace and a single leading sign are accepted. Anything else,
    including digit separators, decimals and values that do not fit in 32 bits,
    yields None instead of raising.

    Parameters:
        text (str): The text to convert.

    Returns:
        Optional[int]: The parsed integer, or None if the text is not a 32-bit integer.
    """
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        return None

    value = int(match.group(1))
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value
