"""
Timers driving a GameSession.

The session only needs two things from its host:
* a repeating one-second tick it can cancel (countdown timer / play timer)
* a one-shot delayed callback (clearing the answer feedback)

Both are run on a single execution context, so the session never needs any locking.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

TICK_INTERVAL_S = 1.0

Callback = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None:
        """Stop the timer. No callback fires after this returns."""
        ...


class Scheduler(Protocol):
    """Contract between the GameSession and the host's clock."""

    def repeat_every_second(self, callback: Callback) -> TimerHandle:
        """Call `callback` once per second until the returned handle is cancelled."""
        ...

    def call_later(self, delay: float, callback: Callback) -> None:
        """Call `callback` once, after `delay` seconds. Cannot be cancelled."""
        ...


# --- Deterministic scheduler: time only moves when told to ---
@dataclass(order=True)
class _ScheduledCall:
    due: float
    seq: int
    callback: Callback = field(compare=False)
    interval: Optional[float] = field(default=None, compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Virtual clock. Callbacks fire in order of their due time while `advance` moves the clock forward.
    ----

    Used by the tests and by any host that wants to drive the session with its own game loop.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[_ScheduledCall] = []
        self._counter = itertools.count()

    def repeat_every_second(self, callback: Callback) -> TimerHandle:
        return self._push(TICK_INTERVAL_S, callback, interval=TICK_INTERVAL_S)

    def call_later(self, delay: float, callback: Callback) -> None:
        self._push(delay, callback)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing everything that becomes due on the way."""
        # small tolerance, so ten steps of 0.1s really reach a one-second tick
        deadline = self.now + seconds + 1e-9
        while self._queue and self._queue[0].due <= deadline:
            call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self.now = max(self.now, call.due)
            if call.interval is not None:
                # reschedule the same handle BEFORE running, so the callback can still cancel it
                call.due += call.interval
                call.seq = next(self._counter)
                heapq.heappush(self._queue, call)
            call.callback()
        self.now = max(self.now, deadline - 1e-9)

    def tick(self, count: int = 1) -> None:
        """Convenience method: advance the clock by whole seconds."""
        for _ in range(count):
            self.advance(TICK_INTERVAL_S)

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to fire."""
        return sum(1 for call in self._queue if not call.cancelled)

    def _push(
        self, delay: float, callback: Callback, interval: Optional[float] = None
    ) -> _ScheduledCall:
        call = _ScheduledCall(
            due=self.now + delay,
            seq=next(self._counter),
            callback=callback,
            interval=interval,
        )
        heapq.heappush(self._queue, call)
        return call


# --- Real time scheduler on top of an asyncio event loop ---
class _RepeatingTimer:
    """Re-arms itself with loop.call_later after every tick until cancelled."""

    def __init__(
        self, loop: asyncio.AbstractEventLoop, interval: float, callback: Callback
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self._cancelled = False
        self._arm()

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()

    def _arm(self) -> None:
        self._handle = self._loop.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self._arm()
        self._callback()


class AsyncioScheduler:
    """Scheduler for a host running an asyncio event loop (the loop is the single execution context)."""

    def __init__(
        self,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        interval: float = TICK_INTERVAL_S,
    ) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._interval = interval

    def repeat_every_second(self, callback: Callback) -> TimerHandle:
        return _RepeatingTimer(self._loop, self._interval, callback)

    def call_later(self, delay: float, callback: Callback) -> None:
        self._loop.call_later(delay, callback)
