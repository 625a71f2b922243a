"""
Numeric literal grammars used to classify stored values.

Both grammars are strict: no surrounding whitespace, no digit-group
underscores, ASCII digits only. Anything that does not match is textual.
"""
from __future__ import annotations

import math
import re
from typing import Optional, Tuple, Union

from .schema import Kind, NumericGrammar

Number = Union[int, float]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_DECIMAL_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII
)
# Hex mantissa requires a binary exponent, e.g. 0x1.8p3
_HEX_FLOAT_RE = re.compile(
    r"([+-]?)0[xX]((?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)",
    re.ASCII,
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)


def parse_integer(value: str) -> Optional[int]:
    """Parse a signed 64-bit base-10 integer, or return None."""
    if not _INTEGER_RE.fullmatch(value):
        return None
    digits = value.lstrip("+-").lstrip("0") or "0"
    # Longer digit runs cannot fit in 64 bits.
    if len(digits) > 19:
        return None
    number = int(digits)
    if value.startswith("-"):
        number = -number
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def parse_float(value: str) -> Optional[float]:
    """Parse a double-precision literal, or return None.

    Finite literals that overflow to infinity are rejected.
    """
    if _SPECIAL_FLOAT_RE.fullmatch(value):
        return float(value)

    hex_match = _HEX_FLOAT_RE.fullmatch(value)
    if hex_match:
        sign, body = hex_match.groups()
        try:
            number = float.fromhex(f"{sign}0x{body}")
        except OverflowError:
            return None
        return number

    if not _DECIMAL_FLOAT_RE.fullmatch(value):
        return None
    number = float(value)
    if math.isinf(number):
        return None
    return number


_PARSERS = {
    NumericGrammar.INTEGER: parse_integer,
    NumericGrammar.FLOAT: parse_float,
}


def classify(value: str, grammar: NumericGrammar) -> Tuple[Kind, Optional[Number]]:
    """Return (kind, number) for a value under the given grammar."""
    number = _PARSERS[grammar](value)
    if number is None:
        return Kind.TEXTUAL, None
    return Kind.NUMERIC, number
