"""Normalization helpers.

Centralizes the permissive text parsing used by the form. Nothing in here
raises on bad input: numbers that cannot be read become NaN, choices that
are not known stay raw strings.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import TypeVar

TEnum = TypeVar("TEnum", bound=Enum)

# Leading-prefix parsing: "12abc" reads as 12, "2.8f" as 2.8.
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))")

NAN = math.nan


def parse_int(raw: str) -> int | float:
    """Parse a base-10 integer prefix of *raw*, or return NaN."""
    match = _INT_PREFIX.match(raw)
    if match is None:
        return NAN
    digits = match.group(1)
    try:
        return int(digits, 10)
    except ValueError:
        # Past the interpreter's digit limit for int(); read it as a float (+/-inf).
        return float(digits)


def parse_float(raw: str) -> float:
    """Parse a decimal float prefix of *raw*, or return NaN."""
    match = _FLOAT_PREFIX.match(raw)
    if match is None:
        return NAN
    return float(match.group(1))


def to_enum(enum_cls: type[TEnum], raw: str) -> TEnum | str:
    """Return the member of *enum_cls* whose value is *raw*, else *raw* itself."""
    try:
        return enum_cls(raw)
    except ValueError:
        return raw


def is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def to_float(value: int | float) -> float:
    """Convert a stored number to float; integers too large become +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
