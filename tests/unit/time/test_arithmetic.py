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


from decimal import Decimal
from fractions import Fraction

import pytest

from sdntime.time import (
    add,
    add_days,
    add_hours,
    add_microseconds,
    add_milliseconds,
    add_minutes,
    add_months,
    add_seconds,
    add_years,
    compare,
    diff,
    Instant,
    normalize,
    serialize,
    Span,
    span_add,
    span_multiply,
    span_negate,
    span_serialize,
    span_subtract,
    span_unserialize,
    sub_days,
    sub_hours,
    sub_minutes,
    sub_months,
    sub_seconds,
    sub_years,
    subtract,
    UnixEpoch,
    unserialize,
)
from sdntime.time._arithmetic import (
    micro_to_seconds,
    round_half_to_even,
    seconds_to_micro,
    symmetric_divmod,
)


class TestSerialization:

    def test_serialize(self):
        instant = Instant(2001, 1, 2, 3, 4, 5, 678, 901)
        assert serialize(instant) == Decimal("211845207845.678901")

    def test_serialize_unix_epoch(self):
        assert serialize(UnixEpoch) == 210866803200

    def test_serialize_min(self):
        assert serialize(Instant.min) == 86400

    @pytest.mark.parametrize("seconds", (
        Decimal("211845207845.678901"),
        "211845207845.678901",
    ))
    def test_unserialize(self, seconds):
        assert unserialize(seconds) == Instant(2001, 1, 2, 3, 4, 5, 678, 901)

    def test_unserialize_whole_seconds(self):
        assert unserialize(210866803200) == UnixEpoch

    @pytest.mark.parametrize("seconds", (0, 86399, -1, "abc", "NaN",
                                         float("inf")))
    def test_unserialize_invalid(self, seconds):
        with pytest.raises(ValueError):
            unserialize(seconds)

    def test_serialize_requires_instant(self):
        with pytest.raises(TypeError):
            serialize(Span())

    def test_span_serialize(self):
        span = Span(2001, 1, 2, 3, 4, 5, 678, 901)
        assert span_serialize(span) == (Decimal("183845.678901"), 24013)

    def test_span_serialize_negative(self):
        assert span_serialize(Span(months=-1, microseconds=-1)) == \
            (Decimal("-0.000001"), -1)

    def test_span_unserialize(self):
        span = span_unserialize(4711, 42)
        assert tuple(span) == (3, 6, 0, 1, 18, 31, 0, 0)

    def test_span_unserialize_default_months(self):
        assert tuple(span_unserialize("-0.5")) == (0, 0, 0, 0, 0, 0, -500, 0)

    def test_span_serialize_requires_span(self):
        with pytest.raises(TypeError):
            span_serialize(Instant(2000, 1, 1))


class TestAdd:

    def test_leap_day_example(self):
        result = add(Instant(2000, 2, 28), Span(8, 0, 1, 36))
        assert result == Instant(2008, 3, 1, 12)

    def test_years(self):
        instant = Instant(1967, 3, 20, 6, 50)
        assert add(instant, Span(years=42)) == Instant(2009, 3, 20, 6, 50)
        assert subtract(instant, Span(years=42)) == \
            Instant(1925, 3, 20, 6, 50)

    def test_subtract_example(self):
        result = subtract(Instant(2000, 3, 1), Span(8, 0, 1, 36))
        assert result == Instant(1992, 2, 27, 12)

    def test_months_before_days(self):
        span = Span(months=1, days=-1)
        assert add(Instant(2001, 3, 1), span) == Instant(2001, 3, 31)

    def test_month_overflow(self):
        assert add(Instant(2001, 3, 31), Span(months=1)) == \
            Instant(2001, 5, 1)
        assert add(Instant(2001, 1, 31), Span(months=1)) == \
            Instant(2001, 3, 3)

    def test_leap_year_month_overflow(self):
        assert add(Instant(2000, 2, 29), Span(years=1)) == Instant(2001, 3, 1)
        assert add(Instant(2000, 2, 29), Span(years=4)) == \
            Instant(2004, 2, 29)

    def test_negative_months(self):
        assert add(Instant(2001, 1, 15), Span(months=-1)) == \
            Instant(2000, 12, 15)
        assert add(Instant(2001, 1, 15), Span(months=-25)) == \
            Instant(1998, 12, 15)

    def test_skips_year_zero(self):
        assert add(Instant(1, 6, 1), Span(years=-1)) == Instant(-1, 6, 1)
        assert add(Instant(-1, 6, 1), Span(years=1)) == Instant(1, 6, 1)
        assert add(Instant(1, 1, 1), Span(days=-1)) == Instant(-1, 12, 31)
        assert add(Instant(-1, 12, 31), Span(hours=24)) == Instant(1, 1, 1)

    def test_time_carry(self):
        instant = Instant(1999, 12, 31, 23, 59, 59, 999, 999)
        assert add(instant, Span(microseconds=1)) == Instant(2000, 1, 1)

    def test_mixed_signs(self):
        span = Span(days=1, hours=-1)
        assert add(Instant(2000, 1, 1), span) == Instant(2000, 1, 1, 23)

    def test_near_first_day(self):
        instant = Instant(-4714, 12, 26)
        assert subtract(instant, Span(months=1)) == Instant(-4714, 11, 26)

    @pytest.mark.parametrize(("instant", "span"), (
        (Instant.min, Span(microseconds=-1)),
        (Instant.min, Span(days=-1)),
        (Instant(-4714, 12, 1), Span(months=-1)),
        (Instant(-4700, 1, 1), Span(years=-100)),
    ))
    def test_before_first_day(self, instant, span):
        with pytest.raises(ValueError):
            add(instant, span)

    def test_does_not_mutate(self):
        instant = Instant(2000, 1, 1)
        span = Span(months=1)
        add(instant, span)
        assert instant == Instant(2000, 1, 1)
        assert tuple(span) == (0, 1, 0, 0, 0, 0, 0, 0)

    @pytest.mark.parametrize(("a", "b"), (
        (Span(), Span()),
        (Instant(2000, 1, 1), Instant(2000, 1, 1)),
        (Instant(2000, 1, 1), (0, 0, 1)),
        (Span(), Instant(2000, 1, 1)),
    ))
    def test_type_errors(self, a, b):
        with pytest.raises(TypeError):
            add(a, b)
        with pytest.raises(TypeError):
            subtract(a, b)

    @pytest.mark.parametrize(("func", "amount", "expected"), (
        (add_years, 1, Instant(2001, 2, 28, 12)),
        (add_months, 1, Instant(2000, 3, 28, 12)),
        (add_days, 2, Instant(2000, 3, 1, 12)),
        (add_hours, 12, Instant(2000, 2, 29)),
        (add_minutes, 720, Instant(2000, 2, 29)),
        (add_seconds, 43200, Instant(2000, 2, 29)),
        (add_milliseconds, 1, Instant(2000, 2, 28, 12, 0, 0, 1)),
        (add_microseconds, -1, Instant(2000, 2, 28, 11, 59, 59, 999, 999)),
        (sub_years, 1, Instant(1999, 2, 28, 12)),
        (sub_months, 1, Instant(2000, 1, 28, 12)),
        (sub_days, 28, Instant(2000, 1, 31, 12)),
        (sub_hours, 13, Instant(2000, 2, 27, 23)),
        (sub_minutes, 1, Instant(2000, 2, 28, 11, 59)),
        (sub_seconds, 1, Instant(2000, 2, 28, 11, 59, 59)),
    ))
    def test_single_field(self, func, amount, expected):
        assert func(Instant(2000, 2, 28, 12), amount) == expected


class TestDiff:

    def test_years(self):
        span = diff(Instant(1967, 3, 20, 6, 50), Instant(2009, 3, 20, 6, 50))
        assert span == Span(days=15341)

    def test_leap_day_example(self):
        span = diff(Instant(2000, 2, 28), Instant(2008, 3, 1, 12))
        assert tuple(span) == (0, 0, 2924, 12, 0, 0, 0, 0)

    def test_sign(self):
        span = diff(Instant(2008, 3, 1, 12), Instant(2000, 2, 28))
        assert tuple(span) == (0, 0, -2924, -12, 0, 0, 0, 0)

    def test_zero(self):
        instant = Instant(2000, 1, 1)
        assert not diff(instant, instant)

    @pytest.mark.parametrize(("a", "b"), (
        (Instant(2000, 2, 28), Instant(2008, 3, 1, 12)),
        (Instant(2008, 3, 1, 12), Instant(2000, 2, 28)),
        (Instant.min, Instant(9999, 12, 31, 23, 59, 59, 999, 999)),
        (Instant(-1, 12, 31), Instant(1, 1, 1, 0, 0, 0, 0, 1)),
    ))
    def test_add_diff_round_trip(self, a, b):
        assert add(a, diff(a, b)) == b

    def test_type_error(self):
        with pytest.raises(TypeError):
            diff(Instant(2000, 1, 1), Span())


class TestCompare:

    @pytest.mark.parametrize(("a", "b", "expected"), (
        (Instant(2000, 1, 1), Instant(2000, 1, 1), 0),
        (Instant(2000, 1, 1), Instant(2000, 1, 1, 0, 0, 0, 0, 1), -1),
        (Instant(2000, 1, 2), Instant(2000, 1, 1, 23), 1),
        (Instant(-1, 12, 31), Instant(1, 1, 1), -1),
    ))
    def test_compare(self, a, b, expected):
        assert compare(a, b) == expected
        assert compare(b, a) == -expected

    def test_type_error(self):
        with pytest.raises(TypeError):
            compare(Instant(2000, 1, 1), (2000, 1, 1))


class TestNormalize:

    @pytest.mark.parametrize(("fields", "expected"), (
        ((2008, 2, 31), Instant(2008, 3, 2)),
        ((2008, 13, 1), Instant(2009, 1, 1)),
        ((2008, 0, 1), Instant(2007, 12, 1)),
        ((2001, 1, 0), Instant(2000, 12, 31)),
        ((2001, 1, 1, 25), Instant(2001, 1, 2, 1)),
        ((2001, 1, 1, 0, -1), Instant(2000, 12, 31, 23, 59)),
        ((2001, 1, 1, 0, 0, 0, 1500, 1500),
         Instant(2001, 1, 1, 0, 0, 1, 501, 500)),
        ((-1, 13), Instant(1, 1, 1)),
        ((2000,), Instant(2000, 1, 1)),
        ((-4714, 11, 25), Instant.min),
        ((-4714, 12, -5), Instant.min),
    ))
    def test_normalize(self, fields, expected):
        assert normalize(*fields) == expected

    @pytest.mark.parametrize("fields", (
        (0, 1, 1),
        (-4714, 11, 24),
        (-4715, 12, 31),
    ))
    def test_normalize_invalid(self, fields):
        with pytest.raises(ValueError):
            normalize(*fields)


class TestSpanArithmetic:

    def test_span_add(self):
        span = span_add(Span(months=6, hours=12), Span(months=6, hours=12))
        assert tuple(span) == (1, 0, 1, 0, 0, 0, 0, 0)

    @pytest.mark.parametrize(("a", "b", "expected"), (
        (Span(0, 1, 1), Span(0, 2, 2), (0, -1, -1, 0, 0, 0, 0, 0)),
        (Span(1, 1, 1), Span(0, 2, 2), (0, 11, -1, 0, 0, 0, 0, 0)),
        (Span(days=1), Span(days=1), (0, 0, 0, 0, 0, 0, 0, 0)),
    ))
    def test_span_subtract(self, a, b, expected):
        assert tuple(span_subtract(a, b)) == expected

    def test_span_negate(self):
        span = span_negate(Span(1, -2, 3, -4, 5, -6, 7, -8))
        assert tuple(span) == (-1, 2, -3, 4, -5, 6, -7, 8)

    def test_span_negate_twice(self):
        span = Span(1, -2, 3, -4, 5, -6, 7, -8)
        assert tuple(span_negate(span_negate(span))) == tuple(span)

    @pytest.mark.parametrize(("span", "factor", "expected"), (
        (Span(0, 6, 0, 12), 2, (1, 0, 1, 0, 0, 0, 0, 0)),
        (Span(0, 6, 0, 12), 0.25, (0, 1, 0, 3, 0, 0, 0, 0)),
        (Span(0, 6, 0, 12), -0.25, (0, -1, 0, -3, 0, 0, 0, 0)),
        (Span(0, 6, 0, 12), 0, (0, 0, 0, 0, 0, 0, 0, 0)),
        (Span(days=1), Fraction(1, 3), (0, 0, 0, 8, 0, 0, 0, 0)),
        (Span(days=1), Decimal("0.5"), (0, 0, 0, 12, 0, 0, 0, 0)),
        (Span(seconds=1), 0.1, (0, 0, 0, 0, 0, 0, 100, 0)),
        (Span(microseconds=1), 0.5, (0, 0, 0, 0, 0, 0, 0, 0)),
        (Span(microseconds=3), 0.5, (0, 0, 0, 0, 0, 0, 0, 2)),
        (Span(microseconds=-3), 0.5, (0, 0, 0, 0, 0, 0, 0, -2)),
        (Span(years=1), Fraction(1, 24), (0, 0, 0, 0, 0, 0, 0, 0)),
    ))
    def test_span_multiply(self, span, factor, expected):
        assert tuple(span_multiply(span, factor)) == expected

    @pytest.mark.parametrize("factor", ("2", None, Span(days=1)))
    def test_span_multiply_type_error(self, factor):
        with pytest.raises(TypeError):
            span_multiply(Span(days=1), factor)

    @pytest.mark.parametrize("func", (span_add, span_subtract))
    def test_type_errors(self, func):
        with pytest.raises(TypeError):
            func(Instant(2000, 1, 1), Span())
        with pytest.raises(TypeError):
            func(Span(), Instant(2000, 1, 1))

    def test_span_negate_type_error(self):
        with pytest.raises(TypeError):
            span_negate(Instant(2000, 1, 1))


class TestHelpers:

    @pytest.mark.parametrize(("dividend", "divisor", "expected"), (
        (7, 2, (3, 1)),
        (-7, 2, (-3, -1)),
        (0, 2, (0, 0)),
        (-4711, 3600, (-1, -1111)),
    ))
    def test_symmetric_divmod(self, dividend, divisor, expected):
        assert symmetric_divmod(dividend, divisor) == expected

    @pytest.mark.parametrize(("n", "expected"), (
        (0.5, 0),
        (1.5, 2),
        (2.5, 2),
        (-0.5, 0),
        (-1.5, -2),
        (Fraction(7, 3), 2),
        (Decimal("2.5"), 2),
    ))
    def test_round_half_to_even(self, n, expected):
        assert round_half_to_even(n) == expected

    @pytest.mark.parametrize(("seconds", "expected"), (
        (1, 1000000),
        (-1, -1000000),
        (0.1, 100000),
        (Decimal("1.0000019"), 1000001),
        (Decimal("-0.0000001"), -1),
        ("12.5", 12500000),
    ))
    def test_seconds_to_micro(self, seconds, expected):
        assert seconds_to_micro(seconds) == expected

    def test_micro_to_seconds(self):
        assert str(micro_to_seconds(-1)) == "-0.000001"
        assert str(micro_to_seconds(1500000)) == "1.500000"
