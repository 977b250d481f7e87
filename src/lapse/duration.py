"""
integer durations with an exact rational tick period (seconds per tick)
"""

import datetime
from fractions import Fraction
from math import gcd

import numpy as np

from lapse.ratio import as_ratio

NANOSECONDS = Fraction(1, 1000000000)
MICROSECONDS = Fraction(1, 1000000)
MILLISECONDS = Fraction(1, 1000)
SECONDS = Fraction(1)
MINUTES = Fraction(60)
HOURS = Fraction(3600)
DAYS = Fraction(86400)
WEEKS = Fraction(604800)

# linear numpy.timedelta64 units. 'Y' and 'M' have no fixed length
NUMPY_UNITS = {
    'W': WEEKS,
    'D': DAYS,
    'h': HOURS,
    'm': MINUTES,
    's': SECONDS,
    'ms': MILLISECONDS,
    'us': MICROSECONDS,
    'ns': NANOSECONDS,
    'ps': Fraction(1, 10**12),
    'fs': Fraction(1, 10**15),
    'as': Fraction(1, 10**18),
}


def as_period(period):
    num, den = as_ratio(period)
    return Fraction(num, den)


def common_period(p1, p2):
    """largest period that divides both p1 and p2, so conversion to it is exact"""
    p1, p2 = as_period(p1), as_period(p2)
    den = p1.denominator * p2.denominator // gcd(p1.denominator, p2.denominator)
    return Fraction(gcd(p1.numerator, p2.numerator), den)


def _trunc_div(a, b):
    """integer division rounding toward zero (b > 0)"""
    q = abs(a) // b
    return q if a >= 0 else -q


class Duration:
    """
    Signed integer 'count' of ticks, each 'period' seconds long.
    Mixed-period arithmetic and comparisons go through the common period and
    are therefore exact.
    """

    __slots__ = ('_count', '_period')

    def __init__(self, count=0, period=NANOSECONDS):
        assert isinstance(count, (int, np.integer)), f"count must be an integer, got {type(count).__name__}"
        self._count = int(count)
        self._period = as_period(period)

    # read-only, instances are hashable
    @property
    def count(self):
        return self._count

    @property
    def period(self):
        return self._period

    @classmethod
    def from_timedelta64(cls, td):
        """convert a numpy.timedelta64 in a linear unit (including multiples like '10ms')"""
        td = np.timedelta64(td)
        unit, multiple = np.datetime_data(td.dtype)
        if unit not in NUMPY_UNITS:
            raise ValueError(f"timedelta64 unit '{unit}' is not supported")
        if np.isnat(td):
            raise ValueError("cannot convert NaT to a Duration")
        return cls(int(td.astype(np.int64)), NUMPY_UNITS[unit] * multiple)

    @classmethod
    def from_timedelta(cls, td):
        """convert a datetime.timedelta (microsecond resolution)"""
        us = (td.days * 86400 + td.seconds) * 1000000 + td.microseconds
        return cls(us, MICROSECONDS)

    def to_timedelta64(self, unit='ns'):
        """truncate to 'unit' and return as numpy.timedelta64"""
        if unit not in NUMPY_UNITS:
            raise ValueError(f"unsupported timedelta64 unit '{unit}'")
        return np.timedelta64(duration_cast(self, NUMPY_UNITS[unit]).count, unit)

    def to_timedelta(self):
        """truncate to microseconds and return as datetime.timedelta"""
        return datetime.timedelta(microseconds=duration_cast(self, MICROSECONDS).count)

    def total_seconds(self):
        return self.count * self.period

    def _common(self, other):
        p = common_period(self.period, other.period)
        return duration_cast(self, p).count, duration_cast(other, p).count, p

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, p = self._common(other)
        return Duration(a + b, p)

    def __sub__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, p = self._common(other)
        return Duration(a - b, p)

    def __neg__(self):
        return Duration(-self.count, self.period)

    def __abs__(self):
        return Duration(abs(self.count), self.period)

    def __bool__(self):
        return self.count != 0

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, _ = self._common(other)
        return a == b

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, _ = self._common(other)
        return a < b

    def __le__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, _ = self._common(other)
        return a <= b

    def __gt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, _ = self._common(other)
        return a > b

    def __ge__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, _ = self._common(other)
        return a >= b

    def __hash__(self):
        return hash(self.total_seconds())

    def __repr__(self):
        return f"Duration({self.count}, Fraction({self.period.numerator}, {self.period.denominator}))"


def duration_cast(duration, period):
    """convert to 'period', truncating toward zero when the conversion is inexact"""
    period = as_period(period)
    if period == duration.period:
        return Duration(duration.count, period)
    ratio = duration.period / period
    return Duration(_trunc_div(duration.count * ratio.numerator, ratio.denominator), period)


def as_duration(value):
    """coerce Duration, numpy.timedelta64 or datetime.timedelta into a Duration"""
    if isinstance(value, Duration):
        return value
    if isinstance(value, np.timedelta64):
        return Duration.from_timedelta64(value)
    if isinstance(value, datetime.timedelta):
        return Duration.from_timedelta(value)
    raise TypeError(f"cannot interpret {type(value).__name__} as a Duration")
