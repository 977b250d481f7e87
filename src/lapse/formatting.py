""" render durations as strings like '1d.01h.01m.01s.500ms.' """

from lapse.duration import as_duration, as_period
from lapse.elements import UNITS, split_time_elements
from lapse.ratio import ratio_less_equal


def time_elements_to_string(elements, period):
    """
    Only units at least as coarse as 'period' are printed. Leading zero units
    are skipped, but once any unit is non-zero all following printable units
    appear, zero-padded.
    """
    period = as_period(period)
    out = []
    activate = False
    for name, unit, label, width in UNITS:
        count = getattr(elements, name).count
        if count != 0:
            activate = True
        if activate and ratio_less_equal(period, unit):
            out.append(f"{count:0{width}d}{label}." if width else f"{count}{label}.")
    return "".join(out)


def time_to_string(duration, period=None):
    """string representation of a duration, by default at its own resolution"""
    duration = as_duration(duration)
    if period is None:
        period = duration.period
    return time_elements_to_string(split_time_elements(duration), period)
