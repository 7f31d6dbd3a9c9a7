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
This module contains the two temporal value types, :class:`.Instant` and
:class:`.Span`, and the arithmetic defined between them.

An :class:`.Instant` is a valid moment in the proleptic Gregorian calendar,
in UTC, with microsecond resolution. A :class:`.Span` is a difference
between two moments; it has the same eight fields but none of them is
constrained. The permitted operations are::

    Instant + Span    = Instant    (add)
    Span    + Span    = Span       (span_add)
    Instant - Instant = Span       (diff)
    Instant - Span    = Instant    (subtract)
    Span    - Span    = Span       (span_subtract)
    Span    * number  = Span       (span_multiply)
    -Span             = Span       (span_negate)

Any other combination raises :exc:`TypeError`.

Internally every value is serialized to an integer count of microseconds
(through the serial day number for instants) and the arithmetic happens on
that count. Months vary in length, so the years and months of a span are
kept aside as a separate month count and applied first: adding
``Span(months=1, days=-1)`` to 1 March 2001 goes to 1 April, then back one
day to 31 March.
"""


from __future__ import annotations

import typing as t
from datetime import (
    date,
    datetime,
    timedelta,
)
from decimal import Decimal
from fractions import Fraction
from logging import getLogger
from re import compile as re_compile

from pytz import utc

from ..calendar import (
    day_of_week as _day_of_week,
    days_in_month as _days_in_month,
    days_in_year as _days_in_year,
    doy_to_gregorian,
    gregorian_to_doy,
    gregorian_to_sdn,
    GREGORIAN_MIN_YEAR,
    sdn_to_gregorian,
    sdn_to_julian,
)
from ._arithmetic import (
    exact_fraction,
    MICRO_SECONDS,
    micro_to_seconds,
    round_half_to_even,
    seconds_to_micro,
    symmetric_divmod,
)
from ._metaclasses import InstantType


if t.TYPE_CHECKING:
    import typing_extensions as te


__all__ = [
    "MIN_YEAR",
    "Clock",
    "ClockTime",
    "Instant",
    "Span",
    "UnixEpoch",
    "add",
    "add_days",
    "add_hours",
    "add_microseconds",
    "add_milliseconds",
    "add_minutes",
    "add_months",
    "add_seconds",
    "add_years",
    "compare",
    "diff",
    "normalize",
    "now",
    "serialize",
    "span_add",
    "span_multiply",
    "span_negate",
    "span_serialize",
    "span_subtract",
    "span_unserialize",
    "sub_days",
    "sub_hours",
    "sub_minutes",
    "sub_months",
    "sub_seconds",
    "sub_years",
    "subtract",
    "today",
    "tomorrow",
    "unserialize",
    "yesterday",
]


log = getLogger("sdntime.time")


#: The smallest year number allowed in an :class:`.Instant`.
MIN_YEAR: te.Final[int] = GREGORIAN_MIN_YEAR

MICRO_MILLISECOND = 1000
MICRO_MINUTE = 60 * MICRO_SECONDS
MICRO_HOUR = 60 * MICRO_MINUTE
MICRO_DAY = 24 * MICRO_HOUR

INSTANT_ISO_PATTERN = re_compile(
    r"^(-?\d{4,})-(\d{2})-(\d{2})"
    r"(?:[T ](\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?)?\Z"
)
SPAN_ISO_PATTERN = re_compile(
    r"^P(?:(-?\d+)Y)?(?:(-?\d+)M)?(?:(-?\d+)D)?"
    r"(?:T(?:(-?\d+)H)?(?:(-?\d+)M)?(?:(-?)(\d+)(?:\.(\d{1,6}))?S)?)?\Z"
)

_INSTANT_FIELDS = ("year", "month", "day", "hour", "minute", "second",
                   "millisecond", "microsecond")
_SPAN_FIELDS = tuple(name + "s" for name in _INSTANT_FIELDS)


def _whole_numbers(names, values):
    fields = []
    for name, value in zip(names, values):
        number = int(value)
        if number != value:
            raise ValueError("%s must be a whole number, got %r"
                             % (name, value))
        fields.append(number)
    return tuple(fields)


def _split_micro(micro):
    # floor decomposition of a non-negative time of day
    hour, micro = divmod(micro, MICRO_HOUR)
    minute, micro = divmod(micro, MICRO_MINUTE)
    second, micro = divmod(micro, MICRO_SECONDS)
    millisecond, microsecond = divmod(micro, MICRO_MILLISECOND)
    return hour, minute, second, millisecond, microsecond


def _fields_to_micro(days, hours, minutes, seconds, milliseconds,
                     microseconds):
    return ((days * 24 + hours) * 3600 + minutes * 60 + seconds) \
        * MICRO_SECONDS + milliseconds * MICRO_MILLISECOND + microseconds


def _month_start_sdn(year, month):
    # Day 28 exists in every month, including the first supported one.
    sdn = gregorian_to_sdn(year, month, 28)
    if sdn == 0:
        raise ValueError("Month %d-%02d precedes serial day 1"
                         % (year, month))
    return sdn - 27


def _shift_months(year, month, months):
    # Carry in astronomical numbering, where 1 BC is year 0, so that the
    # historical numbering used everywhere else never lands on year 0.
    if year < 0:
        year += 1
    year, month0 = divmod(year * 12 + month - 1 + months, 12)
    if year <= 0:
        year -= 1
    return year, month0 + 1


class ClockTime(tuple):
    """ A count of `seconds` and `microseconds`. This class can be used to
    mark a particular point in time, relative to an externally-specified
    epoch.

    The `seconds` and `microseconds` values provided to the constructor can
    have any sign but will be normalized internally into a positive or
    negative `seconds` value along with a positive `microseconds` value
    between `0` and `999,999`. Therefore ``ClockTime(-1, -1)`` is
    normalized to ``ClockTime(-2, 999999)``.
    """

    def __new__(cls, seconds: float = 0, microseconds: int = 0) -> ClockTime:
        seconds, microseconds = divmod(
            seconds_to_micro(seconds) + int(microseconds), MICRO_SECONDS
        )
        return tuple.__new__(cls, (seconds, microseconds))

    def __getnewargs__(self):
        return tuple(self)

    def __add__(self, other):
        if isinstance(other, (int, float)):
            other = ClockTime(other)
        if isinstance(other, ClockTime):
            return ClockTime(self.seconds + other.seconds,
                             self.microseconds + other.microseconds)
        if isinstance(other, Span):
            micro, months = other.to_microseconds_months()
            if months:
                raise ValueError("Cannot add Span with years or months")
            return ClockTime(self.seconds, self.microseconds + micro)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (int, float)):
            other = ClockTime(other)
        if isinstance(other, ClockTime):
            return ClockTime(self.seconds - other.seconds,
                             self.microseconds - other.microseconds)
        if isinstance(other, Span):
            micro, months = other.to_microseconds_months()
            if months:
                raise ValueError("Cannot subtract Span with years or months")
            return ClockTime(self.seconds, self.microseconds - micro)
        return NotImplemented

    def __repr__(self):
        return "ClockTime(seconds=%r, microseconds=%r)" % self

    @property
    def seconds(self) -> int:
        return self[0]

    @property
    def microseconds(self) -> int:
        return self[1]

    def to_microseconds(self) -> int:
        return self[0] * MICRO_SECONDS + self[1]


class Clock:
    """ Accessor for the current time. This class is fulfilled by
    implementations that subclass :class:`.Clock`. These implementations are
    contained within the ``sdntime.time._clock_implementations`` module, and
    are not intended to be accessed directly.

    Creating a new :class:`.Clock` instance will produce the highest
    precision clock implementation available.

        >>> clock = Clock()
        >>> type(clock)                                        # doctest: +SKIP
        sdntime.time._clock_implementations.PEP564Clock
        >>> clock.utc_time()                                   # doctest: +SKIP
        ClockTime(seconds=1525265942, microseconds=506844)

    """

    __implementations = None

    def __new__(cls):
        if cls.__implementations is None:
            # Find an available clock with the best precision
            import sdntime.time._clock_implementations  # noqa: F401
            cls.__implementations = sorted(
                (clock for clock in Clock.__subclasses__()
                 if clock.available()),
                key=lambda clock: clock.precision(), reverse=True
            )
            if cls.__implementations:
                log.debug("Clock implementations by precision: %s",
                          ", ".join(clock.__name__
                                    for clock in cls.__implementations))
        if not cls.__implementations:
            raise RuntimeError("No clock implementations available")
        instance = object.__new__(cls.__implementations[0])
        return instance

    @classmethod
    def precision(cls):
        """ The precision of this clock implementation, represented as a
        number of decimal places. Therefore, for a nanosecond precision
        clock, this function returns `9`.
        """
        raise NotImplementedError("No clock implementation selected")

    @classmethod
    def available(cls):
        """ A boolean flag to indicate whether or not this clock
        implementation is available on this platform.
        """
        raise NotImplementedError("No clock implementation selected")

    def utc_time(self):
        """ Read and return the current UTC time from this clock, measured
        relative to the Unix Epoch.
        """
        raise NotImplementedError("No clock implementation selected")


class Instant(  # type: ignore[misc]
    t.Tuple[int, int, int, int, int, int, int, int], metaclass=InstantType
):
    """A valid moment in the proleptic Gregorian calendar, in UTC.

    An :class:`.Instant` is an 8-tuple of ``(year, month, day, hour, minute,
    second, millisecond, microsecond)``. Years are numbered without a year
    zero (1 BC is year -1) and the earliest supported moment is the start of
    serial day 1, 25 November 4714 BC (:attr:`Instant.min`).

    :param year: the year, at least :data:`MIN_YEAR`, never 0.
    :param month: the month, 1 to 12.
    :param day: the day, 1 to the number of days in the month.
    :param hour: 0 to 23
    :param minute: 0 to 59
    :param second: 0 to 59
    :param millisecond: 0 to 999
    :param microsecond: 0 to 999

    :raises ValueError: if any of the fields is out of range or not a whole
        number.

    Instants are immutable; all arithmetic returns new values. Use
    :func:`normalize` to build an instant from fields that may overflow.
    """

    # CONSTRUCTOR #

    def __new__(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0
    ) -> Instant:
        fields = _whole_numbers(_INSTANT_FIELDS, (
            year, month, day, hour, minute, second, millisecond, microsecond
        ))
        cls.__check(*fields)
        return tuple.__new__(cls, fields)

    @classmethod
    def __unchecked_new(cls, *fields) -> Instant:
        return tuple.__new__(cls, fields)

    @classmethod
    def __check(cls, year, month, day, hour, minute, second, millisecond,
                microsecond):
        if year == 0:
            raise ValueError("Year 0 does not exist, 1 BC is year -1")
        if year < MIN_YEAR:
            raise ValueError("Year out of range (%d..)" % MIN_YEAR)
        if month < 1 or month > 12:
            raise ValueError("Month out of range (1..12)")
        days_in_month = _days_in_month(year, month)
        if day < 1 or day > days_in_month:
            raise ValueError("Day %d out of range (1..%d)"
                             % (day, days_in_month))
        if gregorian_to_sdn(year, month, day) <= 0:
            raise ValueError("Date %d-%02d-%02d precedes serial day 1"
                             % (year, month, day))
        if hour < 0 or hour > 23:
            raise ValueError("Hour out of range (0..23)")
        if minute < 0 or minute > 59:
            raise ValueError("Minute out of range (0..59)")
        if second < 0 or second > 59:
            raise ValueError("Second out of range (0..59)")
        if millisecond < 0 or millisecond > 999:
            raise ValueError("Millisecond out of range (0..999)")
        if microsecond < 0 or microsecond > 999:
            raise ValueError("Microsecond out of range (0..999)")

    # CLASS METHODS #

    @classmethod
    def now(cls) -> Instant:
        """Read the current UTC time from the best available clock."""
        return cls.from_clock_time(Clock().utc_time(), UnixEpoch)

    @classmethod
    def today(cls) -> Instant:
        """The start (00:00:00 UTC) of the current day."""
        return cls.now().replace(hour=0, minute=0, second=0, millisecond=0,
                                 microsecond=0)

    @classmethod
    def from_microseconds(cls, micro: int) -> Instant:
        """Inverse of :meth:`to_microseconds`.

        :raises ValueError: if the moment precedes serial day 1.
        """
        sdn, time_of_day = divmod(int(micro), MICRO_DAY)
        year, month, day = sdn_to_gregorian(sdn)
        if year == 0:
            raise ValueError("Serialized time %d precedes serial day 1"
                             % micro)
        return cls.__unchecked_new(year, month, day,
                                   *_split_micro(time_of_day))

    @classmethod
    def from_sdn(
        cls, sdn: int, hour: int = 0, minute: int = 0, second: int = 0,
        millisecond: int = 0, microsecond: int = 0
    ) -> Instant:
        """The :class:`.Instant` at the given time of serial day `sdn`.

        :raises ValueError: if `sdn` is less than 1.
        """
        year, month, day = sdn_to_gregorian(sdn)
        if year == 0:
            raise ValueError("Serial day number out of range (1..)")
        return cls(year, month, day, hour, minute, second, millisecond,
                   microsecond)

    @classmethod
    def from_doy(
        cls, year: int, doy: int, hour: int = 0, minute: int = 0,
        second: int = 0, millisecond: int = 0, microsecond: int = 0
    ) -> Instant:
        """The :class:`.Instant` at the given time of day `doy` of `year`.

        :raises ValueError: if `doy` is not a day of `year`.
        """
        if year == 0:
            raise ValueError("Year 0 does not exist, 1 BC is year -1")
        days = _days_in_year(year)
        if doy < 1 or doy > days:
            raise ValueError("Day of year out of range (1..%d)" % days)
        year, month, day = doy_to_gregorian(year, doy)
        if year == 0:
            raise ValueError("Day %d of year precedes serial day 1" % doy)
        return cls(year, month, day, hour, minute, second, millisecond,
                   microsecond)

    @classmethod
    def from_clock_time(
        cls,
        clock_time: t.Union[ClockTime, t.Tuple[float, int]],
        epoch: Instant
    ) -> Instant:
        """Convert from a ClockTime relative to a given epoch.

        :param clock_time: the clock time as :class:`.ClockTime` or as tuple of
            (seconds, microseconds)
        :param epoch: the epoch to which `clock_time` is relative
        """
        try:
            clock_time = ClockTime(*clock_time)
        except (TypeError, ValueError):
            raise ValueError("Clock time must be a 2-tuple of (s, us)")
        return cls.from_microseconds(epoch.to_microseconds()
                                     + clock_time.to_microseconds())

    @classmethod
    def from_timestamp(cls, timestamp: t.Union[int, float, Decimal, str]
                       ) -> Instant:
        """:class:`.Instant` from a Unix time stamp (seconds since
        1970-01-01 00:00:00 UTC).
        """
        return cls.from_microseconds(UnixEpoch.to_microseconds()
                                     + seconds_to_micro(timestamp))

    @classmethod
    def from_iso_format(cls, s: str) -> Instant:
        """Parse an ISO formatted date and time string.

        Accepted formats:
            'YYYY-MM-DD'
            'YYYY-MM-DDThh:mm'
            'YYYY-MM-DDThh:mm:ss'
            'YYYY-MM-DDThh:mm:ss.ffffff' (one to six fractional digits)

        A space may replace the ``T``. BC years carry a leading ``-``.

        :raises ValueError: if the string does not match the required format
            or names an invalid moment.
        """
        match = INSTANT_ISO_PATTERN.match(s)
        if not match:
            raise ValueError("Instant string must be in ISO format")
        year, month, day, hour, minute, second, fraction = match.groups()
        fraction = (fraction or "").ljust(6, "0")
        return cls(int(year), int(month), int(day), int(hour or 0),
                   int(minute or 0), int(second or 0),
                   int(fraction[:3]), int(fraction[3:]))

    @classmethod
    def from_native(cls, dt: t.Union[datetime, date]) -> Instant:
        """Convert from a native Python :class:`datetime.datetime` or
        :class:`datetime.date`.

        Naive values are taken to be UTC, aware ones are converted to UTC.
        """
        if isinstance(dt, datetime):
            if dt.tzinfo is not None:
                dt = dt.astimezone(utc)
            millisecond, microsecond = divmod(dt.microsecond, 1000)
            return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                       dt.second, millisecond, microsecond)
        return cls(dt.year, dt.month, dt.day)

    # CLASS METHOD ALIASES #

    if t.TYPE_CHECKING:
        @classmethod
        def fromisoformat(cls, s: str) -> Instant:
            ...

        @classmethod
        def fromordinal(cls, sdn: int) -> Instant:
            ...

        @classmethod
        def fromtimestamp(cls, timestamp: float) -> Instant:
            ...

        @classmethod
        def utcnow(cls) -> Instant:
            ...

    # CLASS ATTRIBUTES #

    min: te.Final[Instant] = None  # type: ignore
    """The earliest instant possible."""

    resolution: te.Final[Span] = None  # type: ignore
    """The minimum resolution supported."""

    # PROPERTIES #

    @property
    def year(self) -> int:
        return self[0]

    @property
    def month(self) -> int:
        return self[1]

    @property
    def day(self) -> int:
        return self[2]

    @property
    def hour(self) -> int:
        return self[3]

    @property
    def minute(self) -> int:
        return self[4]

    @property
    def second(self) -> int:
        return self[5]

    @property
    def millisecond(self) -> int:
        return self[6]

    @property
    def microsecond(self) -> int:
        return self[7]

    @property
    def year_month_day(self) -> t.Tuple[int, int, int]:
        """3-tuple of (year, month, day) describing the date."""
        return self[0], self[1], self[2]

    @property
    def time_of_day(self) -> t.Tuple[int, int, int, int, int]:
        """5-tuple of (hour, minute, second, millisecond, microsecond)."""
        return self[3], self[4], self[5], self[6], self[7]

    @property
    def sdn(self) -> int:
        """The serial day number of the date."""
        return gregorian_to_sdn(self[0], self[1], self[2])

    @property
    def day_of_week(self) -> int:
        """The day of the week where Sunday is 0 and Saturday is 6."""
        return _day_of_week(self.sdn)

    @property
    def day_of_year(self) -> int:
        """Number of the day in the year, 1 January being 1."""
        return gregorian_to_doy(self[0], self[1], self[2])

    @property
    def pdu_cycle(self) -> int:
        """Number of the three minute cycle within the day, 0 to 479.

        Cycle 0 runs from 00:00:00 to 00:02:59, cycle 1 starts at 00:03:00.
        """
        return (self[3] * 60 + self[4]) // 3

    @property
    def julian_date(self) -> t.Tuple[int, int, int]:
        """The same day in the Julian calendar as (year, month, day)."""
        return sdn_to_julian(self.sdn)

    # OPERATIONS #

    def __getnewargs__(self):
        return tuple(self)

    def __hash__(self):
        return tuple.__hash__(self)

    def __eq__(self, other: object) -> bool:
        """``==`` comparison with another :class:`.Instant`."""
        if isinstance(other, Instant):
            return tuple.__eq__(self, other)
        return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: Instant) -> bool:
        return compare(self, other) < 0

    def __le__(self, other: Instant) -> bool:
        return compare(self, other) <= 0

    def __ge__(self, other: Instant) -> bool:
        return compare(self, other) >= 0

    def __gt__(self, other: Instant) -> bool:
        return compare(self, other) > 0

    def __add__(self, other: Span) -> Instant:  # type: ignore[override]
        """Add a :class:`.Span`, see :func:`add`."""
        if isinstance(other, Span):
            return add(self, other)
        return NotImplemented

    @t.overload
    def __sub__(self, other: Instant) -> Span:
        ...

    @t.overload
    def __sub__(self, other: Span) -> Instant:
        ...

    def __sub__(self, other):
        """Subtract an :class:`.Instant` or a :class:`.Span`.

        :returns: If an :class:`.Instant` is subtracted, the time between the
            two as :class:`.Span` (see :func:`diff`). If a :class:`.Span` is
            subtracted, a new :class:`.Instant` (see :func:`subtract`).
        """
        if isinstance(other, Instant):
            return diff(other, self)
        if isinstance(other, Span):
            return subtract(self, other)
        return NotImplemented

    def __mul__(self, other):  # type: ignore[override]
        # tuple repetition makes no sense for a point in time
        return NotImplemented

    __rmul__ = __mul__

    # INSTANCE METHODS #

    def replace(self, **kwargs) -> Instant:
        """Return an :class:`.Instant` with one or more fields replaced.

        Accepts the keyword arguments `year`, `month`, `day`, `hour`,
        `minute`, `second`, `millisecond` and `microsecond`.

        :raises TypeError: for unknown keyword arguments.
        :raises ValueError: if the result is not a valid instant.
        """
        unknown = set(kwargs) - set(_INSTANT_FIELDS)
        if unknown:
            raise TypeError("Unknown Instant field(s): %s"
                            % ", ".join(sorted(unknown)))
        return Instant(*(kwargs.get(name, value)
                         for name, value in zip(_INSTANT_FIELDS, self)))

    def to_microseconds(self) -> int:
        """Microseconds elapsed since the start of serial day 0."""
        return _fields_to_micro(self.sdn, *self.time_of_day)

    def to_clock_time(self, epoch: t.Optional[Instant] = None) -> ClockTime:
        """Convert to :class:`ClockTime` relative to `epoch`.

        :param epoch: defaults to :data:`UnixEpoch`
        """
        if epoch is None:
            epoch = UnixEpoch
        return ClockTime(0, self.to_microseconds() - epoch.to_microseconds())

    def timestamp(self) -> Decimal:
        """Exact seconds since the Unix epoch."""
        return micro_to_seconds(self.to_microseconds()
                                - UnixEpoch.to_microseconds())

    def to_native(self) -> datetime:
        """Convert to an aware native :class:`datetime.datetime` in UTC.

        :raises ValueError: for years outside of 1..9999.
        """
        return datetime(self[0], self[1], self[2], self[3], self[4], self[5],
                        self[6] * 1000 + self[7], tzinfo=utc)

    def iso_format(self, sep: str = "T") -> str:
        """Return the :class:`.Instant` as ISO formatted string.

        Fractional seconds are only written when non-zero.
        """
        year = "%04d" % self[0] if self[0] > 0 else "-%04d" % -self[0]
        s = "%s-%02d-%02d%s%02d:%02d:%02d" % (year, self[1], self[2], sep,
                                              self[3], self[4], self[5])
        if self[6] or self[7]:
            s += ".%03d%03d" % (self[6], self[7])
        return s

    def __repr__(self) -> str:
        return "sdntime.time.Instant(%r, %r, %r, %r, %r, %r, %r, %r)" % self

    def __str__(self) -> str:
        return self.iso_format()

    # INSTANCE METHOD ALIASES #

    def __getattr__(self, name):
        """ Map standard library attribute names to local attribute names,
        for compatibility.
        """
        try:
            return {
                "isoformat": self.iso_format,
                "toordinal": lambda: self.sdn,
            }[name]
        except KeyError:
            raise AttributeError("Instant has no attribute %r" % name)

    if t.TYPE_CHECKING:
        isoformat = iso_format

        def toordinal(self) -> int:
            ...


class Span(  # type: ignore[misc]
    t.Tuple[int, int, int, int, int, int, int, int]
):
    """A difference between two points in time.

    A :class:`.Span` has the same eight fields as an :class:`.Instant`:
    `years`, `months`, `days`, `hours`, `minutes`, `seconds`, `milliseconds`
    and `microseconds`. The fields are kept as given, each with its own sign,
    and none of them is bounded. This allows spans such as
    `1 month minus 1 day`.

    For arithmetic a span is serialized into two independent numbers: a
    count of months (``years * 12 + months``) and a count of microseconds
    (from days and all smaller units). Two spans are equal when these two
    numbers are, so ``Span(days=1) == Span(hours=24)``. Spans created by
    arithmetic are normalized: years and months share one sign, days and all
    smaller units share one sign, and every field below days is within its
    natural range.
    """

    def __new__(
        cls,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0
    ) -> Span:
        return tuple.__new__(cls, _whole_numbers(_SPAN_FIELDS, (
            years, months, days, hours, minutes, seconds, milliseconds,
            microseconds
        )))

    @classmethod
    def from_microseconds_months(cls, micro: int, months: int = 0) -> Span:
        """Inverse of :meth:`to_microseconds_months`.

        The result is normalized, every field carrying the sign of the value
        it was taken from (truncation towards zero).
        """
        years, months = symmetric_divmod(int(months), 12)
        days, micro = symmetric_divmod(int(micro), MICRO_DAY)
        hours, micro = symmetric_divmod(micro, MICRO_HOUR)
        minutes, micro = symmetric_divmod(micro, MICRO_MINUTE)
        seconds, micro = symmetric_divmod(micro, MICRO_SECONDS)
        milliseconds, microseconds = symmetric_divmod(micro,
                                                      MICRO_MILLISECOND)
        return cls(years, months, days, hours, minutes, seconds,
                   milliseconds, microseconds)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Span:
        """Convert from a native Python :class:`datetime.timedelta`."""
        return cls(days=td.days, seconds=td.seconds,
                   microseconds=td.microseconds)

    @classmethod
    def from_iso_format(cls, s: str) -> Span:
        """Parse an ISO formatted duration string.

        Accepted formats (all lowercase letters are placeholders):
            'PyY', 'PmM', 'PdD' for years, months and days

            'PThH', 'PTmM', 'PTsS', 'PTs.ffffffS' for hours, minutes and
            (fractional) seconds

            Any combination of the above in that order, e.g. 'P1MT-2H'.
            Every number may be negative.

        :raises ValueError: if the string does not match the required format.
        """
        match = SPAN_ISO_PATTERN.match(s)
        if not match or s == "P" or s.endswith("T"):
            raise ValueError("Span string must be in ISO format")
        (years, months, days, hours, minutes, sign, seconds,
         fraction) = match.groups()
        fraction = (fraction or "").ljust(6, "0")
        micro = (int(seconds or 0) * MICRO_SECONDS + int(fraction))
        if sign:
            micro = -micro
        return cls(years=int(years or 0), months=int(months or 0),
                   days=int(days or 0), hours=int(hours or 0),
                   minutes=int(minutes or 0), microseconds=micro)

    # PROPERTIES #

    @property
    def years(self) -> int:
        return self[0]

    @property
    def months(self) -> int:
        return self[1]

    @property
    def days(self) -> int:
        return self[2]

    @property
    def hours(self) -> int:
        return self[3]

    @property
    def minutes(self) -> int:
        return self[4]

    @property
    def seconds(self) -> int:
        return self[5]

    @property
    def milliseconds(self) -> int:
        return self[6]

    @property
    def microseconds(self) -> int:
        return self[7]

    # OPERATIONS #

    def __getnewargs__(self):
        return tuple(self)

    def __hash__(self):
        return hash(self.to_microseconds_months())

    def __eq__(self, other: object) -> bool:
        """Equal if both serialize to the same months and microseconds."""
        if isinstance(other, Span):
            return (self.to_microseconds_months()
                    == other.to_microseconds_months())
        return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other):
        # months and microseconds cannot be weighed against each other
        return NotImplemented

    __le__ = __gt__ = __ge__ = __lt__

    def __bool__(self) -> bool:
        """Falsy if the span has no length."""
        return any(self.to_microseconds_months())

    def __add__(self, other: Span) -> Span:  # type: ignore[override]
        """Add a :class:`.Span`, see :func:`span_add`."""
        if isinstance(other, Span):
            return span_add(self, other)
        return NotImplemented

    def __sub__(self, other: Span) -> Span:
        """Subtract a :class:`.Span`, see :func:`span_subtract`."""
        if isinstance(other, Span):
            return span_subtract(self, other)
        return NotImplemented

    def __mul__(self, other) -> Span:  # type: ignore[override]
        """Multiply by an :class:`int`, :class:`float`,
        :class:`~fractions.Fraction` or :class:`~decimal.Decimal`,
        see :func:`span_multiply`.
        """
        if isinstance(other, Span) or not _is_scalar(other):
            return NotImplemented
        return span_multiply(self, other)

    __rmul__ = __mul__

    def __pos__(self) -> Span:
        return self

    def __neg__(self) -> Span:
        """Negate every field, see :func:`span_negate`."""
        return span_negate(self)

    def __abs__(self) -> Span:
        return Span(*map(abs, self))

    # INSTANCE METHODS #

    def to_microseconds_months(self) -> t.Tuple[int, int]:
        """Serialized span as ``(microseconds, months)``.

        Days are counted as 24 hours, years as 12 months.
        """
        return (_fields_to_micro(*self[2:]), self[0] * 12 + self[1])

    def normalized(self) -> Span:
        """The same span with normalized fields."""
        return Span.from_microseconds_months(*self.to_microseconds_months())

    def to_timedelta(self) -> timedelta:
        """Convert to a native Python :class:`datetime.timedelta`.

        :raises ValueError: if the span has years or months, which do not
            have a fixed length.
        """
        micro, months = self.to_microseconds_months()
        if months:
            raise ValueError("Cannot convert Span with years or months "
                             "to timedelta")
        return timedelta(microseconds=micro)

    def iso_format(self) -> str:
        """Return the normalized :class:`Span` as ISO formatted string."""
        (years, months, days, hours, minutes, seconds, milliseconds,
         microseconds) = self.normalized()
        parts = []
        if hours:
            parts.append("%dH" % hours)
        if minutes:
            parts.append("%dM" % minutes)
        fraction = milliseconds * 1000 + microseconds
        if fraction:
            sign = "-" if seconds < 0 or fraction < 0 else ""
            digits = str(abs(fraction)).rjust(6, "0").rstrip("0")
            parts.append("%s%d.%sS" % (sign, abs(seconds), digits))
        elif seconds:
            parts.append("%dS" % seconds)
        if parts:
            parts.insert(0, "T")
        if days:
            parts.insert(0, "%dD" % days)
        if months:
            parts.insert(0, "%dM" % months)
        if years:
            parts.insert(0, "%dY" % years)
        if parts:
            parts.insert(0, "P")
            return "".join(parts)
        else:
            return "PT0S"

    def __repr__(self) -> str:
        return ("sdntime.time.Span(years=%r, months=%r, days=%r, hours=%r, "
                "minutes=%r, seconds=%r, milliseconds=%r, microseconds=%r)"
                % self)

    def __str__(self) -> str:
        return self.iso_format()


Instant.min = Instant(MIN_YEAR, 11, 25)  # type: ignore
Instant.resolution = Span(microseconds=1)  # type: ignore

#: The Unix epoch, 1970-01-01 00:00:00 UTC.
UnixEpoch = Instant(1970, 1, 1)


def _is_scalar(value):
    return isinstance(value, (int, float, Decimal, Fraction))


def _check_instant(value):
    if not isinstance(value, Instant):
        raise TypeError("Expected an Instant, got %s" % type(value).__name__)


def _check_span(value):
    if not isinstance(value, Span):
        raise TypeError("Expected a Span, got %s" % type(value).__name__)


# SERIALIZATION #


def serialize(instant: Instant) -> Decimal:
    """Seconds since the start of serial day 0, exact to the microsecond.

        >>> serialize(Instant(2001, 1, 2, 3, 4, 5, 678, 901))
        Decimal('211845207845.678901')
    """
    _check_instant(instant)
    return micro_to_seconds(instant.to_microseconds())


def unserialize(seconds: t.Union[Decimal, int, str, float]) -> Instant:
    """Inverse of :func:`serialize`.

    :raises ValueError: if `seconds` is not a number or precedes serial
        day 1.
    """
    return Instant.from_microseconds(seconds_to_micro(seconds))


def span_serialize(span: Span) -> t.Tuple[Decimal, int]:
    """Serialized span as ``(seconds, months)``.

        >>> span_serialize(Span(2001, 1, 2, 3, 4, 5, 678, 901))
        (Decimal('183845.678901'), 24013)
    """
    _check_span(span)
    micro, months = span.to_microseconds_months()
    return micro_to_seconds(micro), months


def span_unserialize(seconds: t.Union[Decimal, int, str, float],
                     months: int = 0) -> Span:
    """Inverse of :func:`span_serialize`, producing a normalized span.

        >>> tuple(span_unserialize(4711, 42))
        (3, 6, 0, 1, 18, 31, 0, 0)
    """
    return Span.from_microseconds_months(seconds_to_micro(seconds), months)


# INSTANT ARITHMETIC #


def add(instant: Instant, span: Span) -> Instant:
    """Add a span to an instant.

    Years and months are added first and carried into a valid month; the
    days and all smaller units are then added as elapsed time. Therefore
    the 31st of March plus one month is the 1st of May, and adding
    ``Span(months=1, days=-1)`` to the 1st of March gives the 31st of
    March.

    :raises ValueError: if the result precedes serial day 1.
    """
    _check_instant(instant)
    _check_span(span)
    year, month = _shift_months(instant.year, instant.month,
                                span.years * 12 + span.months)
    sdn = _month_start_sdn(year, month)
    base = _fields_to_micro(sdn, *instant.time_of_day)
    delta = _fields_to_micro(instant.day - 1 + span.days, *span[3:])
    return Instant.from_microseconds(base + delta)


def subtract(instant: Instant, span: Span) -> Instant:
    """Subtract a span from an instant, i.e. add its negation."""
    _check_span(span)
    return add(instant, span_negate(span))


def diff(instant1: Instant, instant2: Instant) -> Span:
    """The span from `instant1` to `instant2`.

    The result never has years or months, the whole difference is expressed
    in days and smaller units. It is negative when `instant2` is the earlier
    one, so ``add(instant1, diff(instant1, instant2)) == instant2``.
    """
    _check_instant(instant1)
    _check_instant(instant2)
    return Span.from_microseconds_months(
        instant2.to_microseconds() - instant1.to_microseconds()
    )


def compare(instant1: Instant, instant2: Instant) -> int:
    """-1, 0 or 1 if `instant1` is before, at or after `instant2`."""
    _check_instant(instant1)
    _check_instant(instant2)
    micro1 = instant1.to_microseconds()
    micro2 = instant2.to_microseconds()
    return (micro1 > micro2) - (micro1 < micro2)


def normalize(
    year: int, month: int = 1, day: int = 1, hour: int = 0, minute: int = 0,
    second: int = 0, millisecond: int = 0, microsecond: int = 0
) -> Instant:
    """Build an :class:`.Instant` from fields that may be out of range.

    Everything but the year is added as a span to the 1st of January, so
    the "31st of February 2008" is the 2nd of March 2008.

    :raises ValueError: if the year is 0 or the result precedes serial
        day 1.
    """
    if year == 0:
        raise ValueError("Year 0 does not exist, 1 BC is year -1")
    year, month = _shift_months(year, 1, month - 1)
    return Instant.from_microseconds(_fields_to_micro(
        _month_start_sdn(year, month) + day - 1, hour, minute, second,
        millisecond, microsecond
    ))


def add_years(instant: Instant, years: int) -> Instant:
    return add(instant, Span(years=years))


def add_months(instant: Instant, months: int) -> Instant:
    return add(instant, Span(months=months))


def add_days(instant: Instant, days: int) -> Instant:
    return add(instant, Span(days=days))


def add_hours(instant: Instant, hours: int) -> Instant:
    return add(instant, Span(hours=hours))


def add_minutes(instant: Instant, minutes: int) -> Instant:
    return add(instant, Span(minutes=minutes))


def add_seconds(instant: Instant, seconds: int) -> Instant:
    return add(instant, Span(seconds=seconds))


def add_milliseconds(instant: Instant, milliseconds: int) -> Instant:
    return add(instant, Span(milliseconds=milliseconds))


def add_microseconds(instant: Instant, microseconds: int) -> Instant:
    return add(instant, Span(microseconds=microseconds))


def sub_years(instant: Instant, years: int) -> Instant:
    return add_years(instant, -years)


def sub_months(instant: Instant, months: int) -> Instant:
    return add_months(instant, -months)


def sub_days(instant: Instant, days: int) -> Instant:
    return add_days(instant, -days)


def sub_hours(instant: Instant, hours: int) -> Instant:
    return add_hours(instant, -hours)


def sub_minutes(instant: Instant, minutes: int) -> Instant:
    return add_minutes(instant, -minutes)


def sub_seconds(instant: Instant, seconds: int) -> Instant:
    return add_seconds(instant, -seconds)


# SPAN ARITHMETIC #


def span_add(span1: Span, span2: Span) -> Span:
    """Sum of two spans, normalized."""
    _check_span(span1)
    _check_span(span2)
    micro1, months1 = span1.to_microseconds_months()
    micro2, months2 = span2.to_microseconds_months()
    return Span.from_microseconds_months(micro1 + micro2, months1 + months2)


def span_subtract(span1: Span, span2: Span) -> Span:
    """Difference of two spans, normalized.

        >>> tuple(span_subtract(Span(0, 1, 1), Span(0, 2, 2)))
        (0, -1, -1, 0, 0, 0, 0, 0)
    """
    _check_span(span2)
    return span_add(span1, span_negate(span2))


def span_negate(span: Span) -> Span:
    """Flip the sign of every field independently."""
    _check_span(span)
    return Span(*(-value for value in span))


def span_multiply(span: Span, factor) -> Span:
    """Scale a span.

    The month count is multiplied and truncated towards zero, dropping any
    fractional month; the microsecond count is multiplied and rounded half
    to even. Half a year and 12 hours times 0.25 is therefore one month and
    three hours.
    """
    _check_span(span)
    if not _is_scalar(factor):
        raise TypeError("Cannot multiply Span by %s" % type(factor).__name__)
    factor = exact_fraction(factor)
    micro, months = span.to_microseconds_months()
    return Span.from_microseconds_months(round_half_to_even(micro * factor),
                                         int(months * factor))


# CURRENT TIME #


def now() -> Instant:
    """The current UTC instant."""
    return Instant.now()


def today() -> Instant:
    """Today at 00:00:00 UTC."""
    return Instant.today()


def tomorrow() -> Instant:
    """Tomorrow at 00:00:00 UTC."""
    return add_days(Instant.today(), 1)


def yesterday() -> Instant:
    """Yesterday at 00:00:00 UTC."""
    return sub_days(Instant.today(), 1)
