# ./utils/memory_size.py

import math
import re
from typing import Union
from cache_options.exceptions import InvalidArgumentError

# Power of 1024 applied for each recognised unit suffix
_UNIT_EXPONENTS = {
    "K": 1,
    "M": 2,
    "G": 3,
}

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)
_SHORTHAND_RE = re.compile(r"(-?\d+)\s*(\w*)", re.ASCII)


def _truncate(number: float, value: Union[str, float]) -> int:
    if not math.isfinite(number):
        raise InvalidArgumentError(f"Invalid memory limit '{value}'", value)
    return int(number)


def normalize_memory_limit(value: Union[str, int, float]) -> int:
    """
    Normalize a memory limit into a number of bytes.

    Numbers and numeric strings are truncated to an integer and returned unchanged,
    negative values included. Shorthand strings such as ``"256K"``, ``"4M"`` or ``"2G"``
    are expanded with binary multipliers. A shorthand with a non-positive magnitude
    yields 0, and an unknown suffix applies no multiplier.

    Args:
        value (Union[str, int, float]): A byte count or a shorthand size string.

    Returns:
        int: The number of bytes.

    Raises:
        InvalidArgumentError: If the value is not a number and not a valid shorthand string.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid memory limit '{value}'", value)

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return _truncate(value, value)

    if not isinstance(value, str):
        raise InvalidArgumentError(f"Invalid memory limit '{value}'", value)

    if _NUMERIC_RE.match(value):
        stripped = value.strip()
        try:
            return int(stripped)
        except ValueError:
            return _truncate(float(stripped), value)

    match = _SHORTHAND_RE.match(value)
    if not match:
        raise InvalidArgumentError(f"Invalid memory limit '{value}'", value)

    amount = int(match.group(1))
    if amount <= 0:
        return 0

    exponent = _UNIT_EXPONENTS.get(match.group(2).upper(), 0)
    return amount * 1024 ** exponent
