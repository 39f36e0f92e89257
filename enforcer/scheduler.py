"""
Timer sources and bounded retries.

Timers are the only way the enforcer suspends work. ``AsyncioScheduler``
runs them on an asyncio event loop; ``ManualScheduler`` is a virtual clock
for headless runs (management commands, tests) that only moves when told.
"""
import asyncio
import heapq
import itertools
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class TimerHandle:
    def __init__(self, cancel_callback=None):
        self._cancel_callback = cancel_callback
        self.cancelled = False

    def cancel(self):
        if not self.cancelled:
            self.cancelled = True
            if self._cancel_callback is not None:
                self._cancel_callback()


class Scheduler:
    """Interface: run a callback once after a delay in seconds."""

    def call_later(self, delay, callback) -> TimerHandle:
        raise NotImplementedError


class AsyncioScheduler(Scheduler):
    def __init__(self, loop=None):
        self.loop = loop if loop is not None else asyncio.get_running_loop()

    def call_later(self, delay, callback):
        handle = self.loop.call_later(delay, callback)
        return TimerHandle(handle.cancel)


class ManualScheduler(Scheduler):
    """
    Deterministic virtual clock.

    Callbacks fire in due-time order (ties in scheduling order) when the
    clock is advanced.
    """

    def __init__(self):
        self.now = 0.0
        self._queue = []
        self._counter = itertools.count()

    def call_later(self, delay, callback):
        handle = TimerHandle()
        heapq.heappush(self._queue, (self.now + max(delay, 0), next(self._counter), callback, handle))
        return handle

    @property
    def pending(self):
        return sum(1 for entry in self._queue if not entry[3].cancelled)

    def advance(self, seconds):
        """Move the clock forward, firing every timer that comes due."""
        deadline = self.now + seconds
        while self._queue and self._queue[0][0] <= deadline:
            due, _, callback, handle = heapq.heappop(self._queue)
            self.now = due
            if not handle.cancelled:
                handle.cancelled = True
                callback()
        self.now = deadline

    def run_until_idle(self, limit=60.0):
        """Fire timers until none are left or ``limit`` virtual seconds have passed."""
        start = self.now
        while self._queue and self._queue[0][0] - start <= limit:
            self.advance(self._queue[0][0] - self.now)
        return self.pending == 0


@dataclass(frozen=True)
class RetryPolicy:
    """Attempt n+1 waits ``base_delay * n`` seconds after attempt n failed."""
    max_attempts: int = 10
    base_delay: float = 0.1

    def delay(self, attempt):
        return self.base_delay * attempt


class ScheduledRetry:
    """
    Run ``action`` until it returns True or the attempts run out.

    The first attempt runs synchronously inside ``start()``.
    """

    def __init__(self, scheduler, policy, action, on_exhausted=None):
        self.scheduler = scheduler
        self.policy = policy
        self.action = action
        self.on_exhausted = on_exhausted
        self.attempts = 0
        self.succeeded = False
        self._timer = None

    @property
    def running(self):
        return self._timer is not None

    def start(self):
        self.attempts = 0
        self.succeeded = False
        self._attempt()
        return self

    def cancel(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _attempt(self):
        self._timer = None
        self.attempts += 1
        if self.action():
            self.succeeded = True
            return

        if self.attempts < self.policy.max_attempts:
            delay = self.policy.delay(self.attempts)
            logger.debug("Attempt %d failed, retrying in %.2fs", self.attempts, delay)
            self._timer = self.scheduler.call_later(delay, self._attempt)
        else:
            logger.info("Giving up after %d attempts", self.attempts)
            if self.on_exhausted is not None:
                self.on_exhausted()
