import logging
import threading
import time

from lapse.duration import NANOSECONDS, Duration, duration_cast
from lapse.formatting import time_to_string

logger = logging.getLogger(__name__)


class StopWatch:
    """
    thread-safe stop-watch for benchmarking sections of code
     - starts running on construction, start() restarts it
     - time points are integer nanoseconds of 'clock', which has to be monotonic.
       Elapsed times are not clamped, so a clock going backwards shows up as a
       negative duration.
     - can be used as a context manager: 'with StopWatch() as sw: ...'
    """

    def __init__(self, clock=time.perf_counter_ns, name=None):
        self._clock = clock
        self.name = name
        # reentrant because to_string() calls elapsed() while holding the lock
        self._lock = threading.RLock()
        self.start()

    def start(self):
        with self._lock:
            self._start = self._clock()
            self._end = self._start
            self._running = True
        if self.name is not None:
            logger.debug("%s started", self.name)

    def stop(self):
        with self._lock:
            self._end = self._clock()
            self._running = False
            if self.name is not None:
                logger.debug("%s stopped after %s", self.name, self.to_string())

    def is_running(self):
        with self._lock:
            return self._running

    def get_start_time(self):
        with self._lock:
            return self._start

    def get_end_time(self):
        """end point, or the current time if still running"""
        with self._lock:
            if self._running:
                return self._clock()
            return self._end

    def elapsed(self, period=NANOSECONDS):
        """elapsed time as a Duration, truncated to 'period'"""
        with self._lock:
            end = self._clock() if self._running else self._end
            return duration_cast(Duration(end - self._start, NANOSECONDS), period)

    def to_string(self, period=NANOSECONDS):
        """elapsed time formatted down to 'period', e.g. '01m.30s.000ms.'"""
        with self._lock:
            return time_to_string(self.elapsed(period), period)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        with self._lock:
            state = "running" if self._running else "stopped"
            return f"StopWatch(name={self.name!r}, {state}, elapsed={self.to_string()!r})"
