""" split durations into days/hours/minutes/... """

from dataclasses import dataclass, field, fields

from lapse.duration import (DAYS, HOURS, MINUTES, SECONDS, MILLISECONDS, MICROSECONDS, NANOSECONDS,
                            Duration, as_duration, duration_cast)

# (field name, period, label, zero-padded width), coarse to fine
UNITS = [
    ('days', DAYS, 'd', 0),
    ('hours', HOURS, 'h', 2),
    ('minutes', MINUTES, 'm', 2),
    ('seconds', SECONDS, 's', 2),
    ('milliseconds', MILLISECONDS, 'ms', 3),
    ('microseconds', MICROSECONDS, 'us', 3),
    ('nanoseconds', NANOSECONDS, 'ns', 3),
]


@dataclass
class TimeElements:
    """a time as a set of standard elements, each one in its own unit"""
    days: Duration = field(default_factory=lambda: Duration(0, DAYS))
    hours: Duration = field(default_factory=lambda: Duration(0, HOURS))
    minutes: Duration = field(default_factory=lambda: Duration(0, MINUTES))
    seconds: Duration = field(default_factory=lambda: Duration(0, SECONDS))
    milliseconds: Duration = field(default_factory=lambda: Duration(0, MILLISECONDS))
    microseconds: Duration = field(default_factory=lambda: Duration(0, MICROSECONDS))
    nanoseconds: Duration = field(default_factory=lambda: Duration(0, NANOSECONDS))

    @classmethod
    def from_counts(cls, days=0, hours=0, minutes=0, seconds=0, milliseconds=0, microseconds=0, nanoseconds=0):
        counts = dict(days=days, hours=hours, minutes=minutes, seconds=seconds,
                      milliseconds=milliseconds, microseconds=microseconds, nanoseconds=nanoseconds)
        return cls(**{name: Duration(counts[name], period) for name, period, _, _ in UNITS})

    def counts(self):
        """plain integer counts as a tuple (days, hours, ..., nanoseconds)"""
        return tuple(getattr(self, f.name).count for f in fields(self))

    def total(self):
        """reassemble into a single nanosecond duration"""
        result = Duration(0, NANOSECONDS)
        for name, _, _, _ in UNITS:
            result = result + getattr(self, name)
        return duration_cast(result, NANOSECONDS)


def split_time_elements(duration):
    """
    Split a duration into TimeElements. Each step truncates toward zero, so for
    negative input every field carries the sign of the remainder at that step.
    Anything finer than a nanosecond is dropped.
    """
    duration = as_duration(duration)
    parts = {}
    for name, period, _, _ in UNITS:
        part = duration_cast(duration, period)
        duration = duration - part
        parts[name] = part
    return TimeElements(**parts)
