"""
Coercion of raw input strings to the kind of a field's initial value.

Input change events always carry text. Before validation and storage the
text is converted to the primitive kind the field was declared with.
"""

import math
import re
from typing import Any, Union

Number = Union[int, float]

# ASCII-only grammar of JS Number(): no underscores, no "inf" or "nan" words
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\Z")
_INTEGER = re.compile(r"[+-]?[0-9]+\Z")
_INFINITY = re.compile(r"[+-]?Infinity\Z")
_RADIX = re.compile(r"0([xXoObB])([0-9a-fA-F]+)\Z")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def to_number(raw: Any) -> Number:
    """
    Convert raw input to a number.

    Follows JS Number(): blank text is 0, 0x/0o/0b prefixes select a radix,
    Infinity is accepted. Integral decimal text is an int, other decimal
    text a float. Anything else becomes NaN.
    """
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, (int, float)):
        return raw
    text = str(raw).strip()
    if not text:
        return 0
    match = _RADIX.match(text)
    if match:
        try:
            return int(match.group(2), _RADIX_BASES[match.group(1).lower()])
        except ValueError:
            return math.nan
    if _INFINITY.match(text):
        return -math.inf if text.startswith("-") else math.inf
    if not _DECIMAL.match(text):
        return math.nan
    if _INTEGER.match(text):
        return int(text)
    return float(text)


def coerce_like(template: Any, raw: Any) -> Any:
    """
    Coerce raw to the primitive kind of template.

    Args:
        template: The field's original initial value
        raw: Incoming value, usually a string

    Returns:
        str(raw), a number, or bool(raw) depending on template's kind;
        raw unchanged for any other kind
    """
    # bool before int: bool is an int subclass
    if isinstance(template, bool):
        return bool(raw)
    if isinstance(template, (int, float)):
        return to_number(raw)
    if isinstance(template, str):
        return str(raw)
    return raw
