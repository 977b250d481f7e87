""" elapsed-time measurement: stop-watch, durations and human-readable formatting """

from lapse.ratio import (ratio_equal, ratio_not_equal, ratio_less, ratio_less_equal,
                         ratio_greater, ratio_greater_equal)
from lapse.duration import (NANOSECONDS, MICROSECONDS, MILLISECONDS, SECONDS, MINUTES, HOURS, DAYS,
                            Duration, duration_cast, as_duration)
from lapse.elements import TimeElements, split_time_elements
from lapse.formatting import time_elements_to_string, time_to_string
from lapse.stopwatch import StopWatch
