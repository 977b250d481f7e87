"""Tests for formatting module."""

import datetime

import numpy as np
import pytest

from lapse.duration import (NANOSECONDS, MICROSECONDS, MILLISECONDS, SECONDS, MINUTES, HOURS, DAYS,
                            Duration)
from lapse.elements import TimeElements
from lapse.formatting import time_elements_to_string, time_to_string


class TestTimeToString:
    def test_hours_minutes_seconds(self):
        assert time_to_string(Duration(3661, SECONDS)) == "01h.01m.01s."

    def test_milliseconds(self):
        assert time_to_string(Duration(90000, MILLISECONDS)) == "01m.30s.000ms."

    def test_every_unit(self):
        assert time_to_string(Duration(90061500250125, NANOSECONDS)) == "1d.01h.01m.01s.500ms.250us.125ns."

    @pytest.mark.parametrize("period", [NANOSECONDS, MICROSECONDS, MILLISECONDS, SECONDS, MINUTES, HOURS, DAYS])
    def test_zero_is_empty(self, period):
        assert time_to_string(Duration(0, period)) == ""

    def test_explicit_coarser_resolution(self):
        assert time_to_string(Duration(90061500250125, NANOSECONDS), SECONDS) == "1d.01h.01m.01s."
        assert time_to_string(Duration(90061500250125, NANOSECONDS), MICROSECONDS) == "1d.01h.01m.01s.500ms.250us."

    def test_activation_below_resolution_prints_nothing(self):
        assert time_to_string(Duration(59, SECONDS), MINUTES) == ""

    def test_sub_second_only(self):
        assert time_to_string(Duration(50, MILLISECONDS)) == "050ms."
        assert time_to_string(Duration(7, NANOSECONDS)) == "007ns."

    def test_days_are_not_padded(self):
        assert time_to_string(Duration(100, DAYS)) == "100d."
        assert time_to_string(Duration(100, DAYS), HOURS) == "100d.00h."

    def test_negative_keeps_sign(self):
        assert time_to_string(Duration(-3661, SECONDS)) == "-1h.-1m.-1s."
        assert time_to_string(Duration(-5, MILLISECONDS)) == "-05ms."

    def test_foreign_inputs(self):
        assert time_to_string(np.timedelta64(90000, 'ms')) == "01m.30s.000ms."
        assert time_to_string(datetime.timedelta(minutes=1, seconds=30)) == "01m.30s.000ms.000us."


class TestTimeElementsToString:
    def test_zero_units_after_activation_are_kept(self):
        e = TimeElements.from_counts(hours=1, seconds=5)
        assert time_elements_to_string(e, SECONDS) == "01h.00m.05s."

    def test_trailing_zero_units_are_kept(self):
        e = TimeElements.from_counts(minutes=2)
        assert time_elements_to_string(e, MILLISECONDS) == "02m.00s.000ms."

    def test_units_finer_than_resolution_are_dropped(self):
        e = TimeElements.from_counts(seconds=1, milliseconds=999, nanoseconds=1)
        assert time_elements_to_string(e, SECONDS) == "01s."

    def test_tuple_period(self):
        e = TimeElements.from_counts(seconds=3)
        assert time_elements_to_string(e, (1, 1000)) == "03s.000ms."

    def test_empty(self):
        assert time_elements_to_string(TimeElements(), NANOSECONDS) == ""

    def test_float_period_is_rejected(self):
        e = TimeElements.from_counts(seconds=3, milliseconds=250)
        with pytest.raises(AssertionError):
            time_elements_to_string(e, 0.001)
