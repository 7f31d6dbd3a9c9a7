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


"""
Conversions between calendar dates and serial day numbers.

The serial day number (SDN) is a continuous count of days where SDN 1 is
November 25, 4714 BC in the Gregorian calendar (January 2, 4713 BC in the
Julian calendar) and SDN 2447893 is January 1, 1990. The difference of two
SDNs is the number of days between two dates, whatever calendar they were
expressed in.

Years are numbered without a year zero: the year preceding 1 AD is -1.

SDN values less than one are not supported. A conversion that returns an SDN
of zero signals a date that is either invalid or outside the supported range
of its calendar. A positive SDN does not guarantee a valid input date (the
30th of February converts happily); use :func:`is_valid_gregorian` or
:func:`is_valid_julian`, which convert to SDN and back and compare.

The algorithms go back to R. J. Tantzen, "Conversions Between Calendar Date
and Julian Day Number", CACM algorithm 199 (1963), as refined by Scott E.
Lee.
"""


from __future__ import annotations

import typing as t
from logging import getLogger


if t.TYPE_CHECKING:
    import typing_extensions as te


__all__ = [
    "DAY_NAMES",
    "DAY_NAMES_SHORT",
    "MONTH_NAMES",
    "MONTH_NAMES_SHORT",
    "day_of_week",
    "days_in_month",
    "days_in_year",
    "doy_to_gregorian",
    "gregorian_to_doy",
    "gregorian_to_sdn",
    "is_leap_year",
    "is_valid_gregorian",
    "is_valid_julian",
    "julian_to_sdn",
    "month_from_name",
    "month_name",
    "sdn_to_gregorian",
    "sdn_to_julian",
]


log = getLogger("sdntime.calendar")


DAYS_PER_4_YEARS: te.Final[int] = 1461
DAYS_PER_400_YEARS: te.Final[int] = 146097
DAYS_PER_5_MONTHS: te.Final[int] = 153
GREGORIAN_SDN_OFFSET: te.Final[int] = 32045
JULIAN_SDN_OFFSET: te.Final[int] = 32083

#: Earliest year that can be converted from the Gregorian calendar.
GREGORIAN_MIN_YEAR: te.Final[int] = -4714

#: Earliest year that can be converted from the Julian calendar.
JULIAN_MIN_YEAR: te.Final[int] = -4713

#: Day names indexed by :func:`day_of_week` (0 is Sunday).
DAY_NAMES: te.Final[t.Dict[int, str]] = dict(enumerate((
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
    "Saturday",
)))

#: Three letter day names indexed by :func:`day_of_week`.
DAY_NAMES_SHORT: te.Final[t.Dict[int, str]] = {
    number: name[:3] for number, name in DAY_NAMES.items()
}

#: Gregorian month names indexed 1 to 12.
MONTH_NAMES: te.Final[t.Dict[int, str]] = dict(enumerate((
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
), start=1))

#: Three letter Gregorian month names indexed 1 to 12.
MONTH_NAMES_SHORT: te.Final[t.Dict[int, str]] = {
    number: name[:3] for number, name in MONTH_NAMES.items()
}

_MONTH_NAME_STYLES = {
    "Month": lambda month: MONTH_NAMES[month],
    "Mon": lambda month: MONTH_NAMES_SHORT[month],
    "MONTH": lambda month: MONTH_NAMES[month].upper(),
    "MON": lambda month: MONTH_NAMES_SHORT[month].upper(),
}

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _out_of_range(what, *values):
    log.debug("%s %r out of supported range", what, values)


def _shift_to_march(year, month):
    # Internally the year starts on March 1 so February, the irregular
    # month, is the last one. The year is moved into positive territory
    # to keep all integer divisions on non-negative operands.
    if year < 0:
        year += 4801
    else:
        year += 4800
    if month > 2:
        month -= 3
    else:
        month += 9
        year -= 1
    return year, month


def _shift_from_march(year, month):
    if month < 10:
        month += 3
    else:
        year += 1
        month -= 9
    year -= 4800
    if year <= 0:
        # no year zero
        year -= 1
    return year, month


def gregorian_to_sdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to a serial day number.

    Zero is returned when the date is detected as invalid or precedes
    November 25, 4714 BC. Some invalid dates (like February 30) yield a
    positive value, see :func:`is_valid_gregorian`.

        >>> gregorian_to_sdn(1967, 3, 20)
        2439570
    """
    if (year == 0 or year < GREGORIAN_MIN_YEAR
            or not 1 <= month <= 12 or not 1 <= day <= 31):
        _out_of_range("Gregorian date", year, month, day)
        return 0
    if year == GREGORIAN_MIN_YEAR and (
        month < 11 or (month == 11 and day < 25)
    ):
        _out_of_range("Gregorian date", year, month, day)
        return 0
    year, month = _shift_to_march(year, month)
    return ((year // 100) * DAYS_PER_400_YEARS // 4
            + (year % 100) * DAYS_PER_4_YEARS // 4
            + (month * DAYS_PER_5_MONTHS + 2) // 5
            + day
            - GREGORIAN_SDN_OFFSET)


def sdn_to_gregorian(sdn: int) -> t.Tuple[int, int, int]:
    """Convert a serial day number to a Gregorian ``(year, month, day)``.

    For an SDN less than 1 the sentinel ``(0, 0, 0)`` is returned.

        >>> sdn_to_gregorian(2447893)
        (1990, 1, 1)
    """
    if sdn <= 0:
        _out_of_range("SDN", sdn)
        return 0, 0, 0
    temp = (sdn + GREGORIAN_SDN_OFFSET) * 4 - 1

    century = temp // DAYS_PER_400_YEARS

    temp = (temp % DAYS_PER_400_YEARS) // 4 * 4 + 3
    year = century * 100 + temp // DAYS_PER_4_YEARS
    day_of_year = (temp % DAYS_PER_4_YEARS) // 4 + 1

    temp = day_of_year * 5 - 3
    month = temp // DAYS_PER_5_MONTHS
    day = (temp % DAYS_PER_5_MONTHS) // 5 + 1

    year, month = _shift_from_march(year, month)
    return year, month, day


def julian_to_sdn(year: int, month: int, day: int) -> int:
    """Convert a Julian calendar date to a serial day number.

    Zero is returned for invalid dates and for dates before
    January 2, 4713 BC.

        >>> julian_to_sdn(1990, 1, 1)
        2447906
    """
    if (year == 0 or year < JULIAN_MIN_YEAR
            or not 1 <= month <= 12 or not 1 <= day <= 31):
        _out_of_range("Julian date", year, month, day)
        return 0
    if year == JULIAN_MIN_YEAR and month == 1 and day == 1:
        _out_of_range("Julian date", year, month, day)
        return 0
    year, month = _shift_to_march(year, month)
    return (year * DAYS_PER_4_YEARS // 4
            + (month * DAYS_PER_5_MONTHS + 2) // 5
            + day
            - JULIAN_SDN_OFFSET)


def sdn_to_julian(sdn: int) -> t.Tuple[int, int, int]:
    """Convert a serial day number to a Julian ``(year, month, day)``.

    For an SDN less than 1 the sentinel ``(0, 0, 0)`` is returned.
    """
    if sdn <= 0:
        _out_of_range("SDN", sdn)
        return 0, 0, 0
    temp = (sdn + JULIAN_SDN_OFFSET) * 4 - 1

    year = temp // DAYS_PER_4_YEARS
    day_of_year = (temp % DAYS_PER_4_YEARS) // 4 + 1

    temp = day_of_year * 5 - 3
    month = temp // DAYS_PER_5_MONTHS
    day = (temp % DAYS_PER_5_MONTHS) // 5 + 1

    year, month = _shift_from_march(year, month)
    return year, month, day


def day_of_week(sdn: int) -> int:
    """Day of the week for an SDN, 0 (Sunday) to 6 (Saturday).

        >>> DAY_NAMES[day_of_week(gregorian_to_sdn(1967, 3, 20))]
        'Monday'
    """
    return (sdn + 1) % 7


def _sdn_before_year(year):
    # Counted back from December 31, which exists even in the first
    # supported year.
    last = gregorian_to_sdn(year, 12, 31)
    if last == 0:
        return None
    return last - days_in_year(year)


def gregorian_to_doy(year: int, month: int, day: int) -> int:
    """Day of the year (1-based) of a Gregorian date.

    Zero is returned for dates :func:`gregorian_to_sdn` rejects.
    """
    sdn = gregorian_to_sdn(year, month, day)
    if sdn == 0:
        return 0
    return sdn - _sdn_before_year(year)


def doy_to_gregorian(year: int, doy: int) -> t.Tuple[int, int, int]:
    """Gregorian ``(year, month, day)`` of the `doy`-th day of `year`.

    Day numbers beyond the end of the year roll over into the next one.
    The sentinel ``(0, 0, 0)`` is returned when the day precedes SDN 1.
    """
    before = _sdn_before_year(year)
    if before is None:
        _out_of_range("Gregorian year", year)
        return 0, 0, 0
    return sdn_to_gregorian(before + doy)


def is_valid_gregorian(year: int, month: int, day: int) -> bool:
    """Whether the triple names an existing, supported Gregorian date."""
    sdn = gregorian_to_sdn(year, month, day)
    return sdn > 0 and sdn_to_gregorian(sdn) == (year, month, day)


def is_valid_julian(year: int, month: int, day: int) -> bool:
    """Whether the triple names an existing, supported Julian date."""
    sdn = julian_to_sdn(year, month, day)
    return sdn > 0 and sdn_to_julian(sdn) == (year, month, day)


def is_leap_year(year: int) -> bool:
    """Indicates whether or not `year` is a Gregorian leap year.

    BC years are leap years when they precede a multiple of four, so
    1 BC (year -1) and 5 BC are leap years.

    :raises ValueError: for year 0.
    """
    if year == 0:
        raise ValueError("There is no year 0")
    if year < 0:
        year += 1
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def days_in_year(year: int) -> int:
    """Return the number of days in Gregorian `year`."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in `month` of Gregorian `year`.

    :raises ValueError: for year 0 or a month outside 1..12.
    """
    if year == 0:
        raise ValueError("There is no year 0")
    if not 1 <= month <= 12:
        raise ValueError("Month out of range (1..12)")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def month_name(month: int, style: str = "MON") -> str:
    """Name of a Gregorian month.

    :param month: month of the year, 1 to 12.
    :param style: ``"Month"`` (``"March"``), ``"Mon"`` (``"Mar"``),
        ``"MONTH"`` (``"MARCH"``) or ``"MON"`` (``"MAR"``).

    :raises ValueError: if `month` or `style` are not known.
    """
    try:
        render = _MONTH_NAME_STYLES[style]
    except KeyError:
        raise ValueError("Unknown month name style %r" % style) from None
    try:
        return render(month)
    except KeyError:
        raise ValueError("Month out of range (1..12)") from None


def month_from_name(name: str) -> int:
    """Month of the year from its (possibly abbreviated) name.

    Matching is case-insensitive on the first three letters, so ``"Mar"``,
    ``"MARCH"`` and ``"Marz"`` all give 3. Only ``"May"`` itself matches
    May. Unknown names give 0.
    """
    key = name.strip().lower()
    if key == "may":
        return 5
    for number, short in MONTH_NAMES_SHORT.items():
        if number != 5 and key.startswith(short.lower()):
            return number
    return 0
