# Copyright (c) "Neo4j"
# Neo4j Sweden AB [https://neo4j.com]
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


from __future__ import annotations

import typing as t
from decimal import (
    Decimal,
    ROUND_FLOOR,
)
from fractions import Fraction


__all__ = [
    "MICRO_SECONDS",
    "exact_fraction",
    "micro_to_seconds",
    "round_half_to_even",
    "seconds_to_micro",
    "symmetric_divmod",
]


MICRO_SECONDS = 1000000

_MICRO_QUANTUM = Decimal("0.000001")


def symmetric_divmod(dividend: int, divisor: int) -> t.Tuple[int, int]:
    """Like :func:`divmod` but truncating towards zero.

    The remainder carries the sign of the dividend, so that
    ``symmetric_divmod(-x, y) == tuple(-v for v in symmetric_divmod(x, y))``.
    """
    if dividend >= 0:
        quotient, remainder = divmod(dividend, divisor)
        return int(quotient), remainder
    quotient, remainder = divmod(-dividend, divisor)
    return -int(quotient), -remainder


def exact_fraction(number) -> Fraction:
    """Convert a number to a :class:`~fractions.Fraction`.

    Floats are taken at their shortest decimal ``repr`` (``0.1`` is one
    tenth), which is what a user typing the literal meant.
    """
    if isinstance(number, float):
        return Fraction(repr(number))
    return Fraction(number)


def round_half_to_even(n) -> int:
    """Round a number to the nearest integer, ties going to the even
    neighbour.
    """
    return round(exact_fraction(n))


def seconds_to_micro(seconds) -> int:
    """Convert a number of seconds to an integer count of microseconds.

    Accepts :class:`int`, :class:`~decimal.Decimal`, :class:`str` and
    :class:`float` (through its shortest ``repr``). Anything finer than a
    microsecond is rounded towards -inf.

    :raises ValueError: if `seconds` is not a finite number.
    """
    if isinstance(seconds, int):
        return seconds * MICRO_SECONDS
    if isinstance(seconds, float):
        seconds = repr(seconds)
    try:
        value = Decimal(seconds)
    except ArithmeticError:
        raise ValueError("Cannot interpret %r as seconds" % (seconds,)) \
            from None
    if not value.is_finite():
        raise ValueError("Seconds must be finite, got %r" % (seconds,))
    return int((value * MICRO_SECONDS).to_integral_value(ROUND_FLOOR))


def micro_to_seconds(micro: int) -> Decimal:
    """Exact number of seconds, with six decimal places, for a count of
    microseconds.
    """
    return (Decimal(micro) / MICRO_SECONDS).quantize(_MICRO_QUANTUM)
