# planeproducer/airplane/systems/clock.py
"""
Clocks that can run a callback after a delay.

SimulatedClock measures time in simulated seconds and only moves when
advance() is called, so delayed tasks fire deterministically on the thread
that advances it. WallClock runs each delayed task on its own
threading.Timer thread in real time.
"""
import heapq
import itertools
import logging
import threading
import time
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class DelayedTask:
    """Handle for a callback scheduled on a clock. Cancellable until it runs."""

    def __init__(self, deadline: float, callback: Callable[[], None]):
        self.deadline = deadline
        self._callback = callback
        self._lock = threading.Lock()
        self._cancelled = False
        self._started = False
        self._done = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done.is_set()

    def cancel(self) -> bool:
        """Prevents the callback from running. Returns False if it already ran."""
        with self._lock:
            if self._started:
                return False
            self._cancelled = True
        self._done.set()
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Blocks until the task has run or been cancelled."""
        return self._done.wait(timeout)

    def run(self):
        with self._lock:
            if self._cancelled or self._started:
                return
            self._started = True
        try:
            self._callback()
        finally:
            self._done.set()


class SimulatedClock:
    """Discrete clock advanced one simulated second at a time by the simulation step."""

    def __init__(self, start: float = 0.0):
        self._now = float(start)
        self._lock = threading.Lock()
        self._queue: List[Tuple[float, int, DelayedTask]] = []
        self._counter = itertools.count()

    def now(self) -> float:
        with self._lock:
            return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> DelayedTask:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        with self._lock:
            task = DelayedTask(self._now + delay, callback)
            heapq.heappush(self._queue, (task.deadline, next(self._counter), task))
        return task

    def advance(self, seconds: float = 1.0) -> int:
        """Moves time forward and runs every task now due, in deadline order.

        Returns the number of tasks that ran.
        """
        if seconds < 0:
            raise ValueError(f"Cannot move a clock backwards ({seconds}s)")
        with self._lock:
            self._now += seconds
            due = []
            while self._queue and self._queue[0][0] <= self._now:
                due.append(heapq.heappop(self._queue)[2])

        fired = 0
        for task in due:
            if task.cancelled:
                continue
            task.run()
            fired += 1
        return fired

    def pending(self) -> int:
        with self._lock:
            return sum(1 for _, _, task in self._queue if not task.cancelled)


class WallClock:
    """Real-time clock; each delayed task runs on its own daemon timer thread."""

    def now(self) -> float:
        return time.monotonic()

    def call_later(self, delay: float, callback: Callable[[], None]) -> DelayedTask:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        task = DelayedTask(self.now() + delay, callback)
        timer = threading.Timer(delay, task.run)
        timer.daemon = True
        timer.start()
        logger.debug(f"Timer thread started, fires in {delay}s")
        return task

    def advance(self, seconds: float = 1.0) -> int:
        return 0
