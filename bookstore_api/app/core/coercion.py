"""
Lenient value coercion shared by every entity store.

Clients of this API send loosely typed JSON and rely on it being
accepted as is.  Two primitives encode that contract:

* ``parse_leading_int`` reads the integer at the start of a value
  (``"1.99"`` gives ``1``, ``"12abc"`` gives ``12``).  Anything that
  does not start with a number is *not a number*, represented by
  ``None`` and rendered as JSON ``null``.
* ``is_truthy`` decides whether an update value is allowed to
  overwrite a stored field.  Falsy values (``None``, ``False``, zero,
  NaN and the empty string) are skipped, so ``{"published_year": 0}``
  leaves the stored year untouched.
"""

import math
import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]*|[0-9]+)")


def parse_leading_int(value: Any) -> Optional[int]:
    """Return the integer prefix of ``value`` or ``None`` (not a number).

    Strings may carry leading whitespace, a sign and a ``0x`` hex
    prefix; trailing characters are ignored.  Integers pass through,
    finite floats are truncated toward zero.  Booleans, ``None`` and
    any other type are not numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    match = _LEADING_INT.match(value)
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        if len(digits) == 2:
            return None
        number = int(digits[2:], 16)
    else:
        number = int(digits)
    return -number if sign == "-" else number


def is_truthy(value: Any) -> bool:
    """Truthiness as the existing clients expect it.

    Differs from Python's ``bool`` for containers: an empty list or
    object still counts as a value.
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def verbatim(value: Any) -> Any:
    return value
