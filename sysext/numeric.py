# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.numeric

Numeric helpers for bool, int, float and enums.

None of these raise on numeric input: conversions saturate and
NaN falls back to zero where an integer is required.

"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum, Flag
from typing import TypeVar
from .constants import INT32_MAX, INT32_MIN

E = TypeVar('E', bound=Enum)
Number = int | float


def saturate(value: int, low=INT32_MIN, high=INT32_MAX) -> int:
    """Saturate an integer into [low, high]."""
    return max(low, min(high, value))


def to_int(value: Number) -> int:
    """Convert to a 32-bit integer.

    Floats are rounded half to even, NaN becomes 0 and
    everything saturates into the int32 range.

    """
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return INT32_MAX if value > 0 else INT32_MIN
        value = round(value)
    return saturate(int(value))


def to_float(value: Number) -> float:
    """Convert to float."""
    return float(value)


def to_bool(value: Number) -> bool:
    """Non-zero is True."""
    return value != 0


def round_away(value: float, digits=0) -> float:
    """Round value to digits decimals, midpoints away from zero.

    >>> round_away(2.5), round_away(-2.5), round_away(2.675, 2)
    (3.0, -3.0, 2.68)

    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        # wide enough for any finite double
        ctx.prec = 330 + abs(digits)
        exponent = Decimal(1).scaleb(-digits)
        return float(Decimal(repr(float(value))).quantize(
            exponent, rounding=ROUND_HALF_UP))


def truncate(value: float) -> float:
    """Integral part of value."""
    if not math.isfinite(value):
        return value
    return float(math.trunc(value))


def abs_value(value: Number) -> Number:
    """Absolute value, bools become ints."""
    return abs(int(value) if isinstance(value, bool) else value)


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Clamp value into [low, high], NaN stays NaN."""
    if value != value:
        return value
    return min(max(value, low), high)


def clamp_nan(value: float) -> float:
    """NaN and infinities become 0.0."""
    return value if math.isfinite(value) else 0.0


def distance(source: Number, destination: Number) -> Number:
    """Absolute difference."""
    return abs(destination - source)


def is_defined(enum_cls: type[E], value: int) -> bool:
    """Whether value is the value of a member of enum_cls."""
    return any(member.value == value for member in enum_cls)


def to_enum(enum_cls: type[E], value: int) -> E | None:
    """Member of enum_cls with that value.

    Flag types accept any combination of their members.
    Undefined values give None.

    """
    if not issubclass(enum_cls, Flag) and not is_defined(enum_cls, value):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None
