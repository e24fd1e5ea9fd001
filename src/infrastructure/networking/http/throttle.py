"""
Request Throttle

Sliding-window concurrency limiter. At most ``limit`` units of work run at
once, and a slot is reused only after ``window_ms`` has elapsed since that
slot's previous admission. Waiters are admitted strictly in submission order.
"""

import asyncio
import itertools
import math
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional

import msgspec

from ...exceptions import ThrottleLimitError
from ...logging import get_logger


class ThrottleTicket(msgspec.Struct, frozen=True):
    """One admitted unit of work. Lives only while the unit runs."""
    sequence: int
    admitted_at: float
    counted: bool = True


class Throttle:
    """
    FIFO admission gate over a fixed pool of slots.

    Each free slot remembers when it was last admitted. The waiter at the
    head of the queue takes the least recently admitted free slot and
    sleeps until that slot's window has elapsed before running.
    """

    def __init__(self, limit: int = 10, window_ms: float = 1000, reject_on_limit: bool = False,
                 clock: Callable[[], float] = time.monotonic, logger=None):
        if limit < 1:
            raise ValueError(f"Throttle limit must be >= 1, got {limit}")
        if window_ms < 0:
            raise ValueError(f"Throttle window must be >= 0, got {window_ms}")

        self.limit = limit
        self.window_ms = window_ms
        self.reject_on_limit = reject_on_limit
        self._window = window_ms / 1000.0
        self._clock = clock

        self._free_slots: List[float] = [-math.inf] * limit
        self._gate = asyncio.Lock()
        self._slot_released = asyncio.Event()
        self._sequence = itertools.count(1)
        self._active: Dict[int, ThrottleTicket] = {}
        self._waiting = 0

        self.logger = logger or get_logger('infrastructure.networking.http.throttle')

    @property
    def in_flight(self) -> int:
        return len(self._active)

    @property
    def waiting(self) -> int:
        return self._waiting

    @property
    def active_tickets(self) -> List[ThrottleTicket]:
        return list(self._active.values())

    def _earliest_free_slot(self) -> int:
        return min(range(len(self._free_slots)), key=self._free_slots.__getitem__)

    def _can_admit_now(self) -> bool:
        if self._gate.locked() or not self._free_slots:
            return False
        last = self._free_slots[self._earliest_free_slot()]
        return last + self._window <= self._clock()

    async def _take_slot(self) -> float:
        while not self._free_slots:
            self._slot_released.clear()
            await self._slot_released.wait()
        return self._free_slots.pop(self._earliest_free_slot())

    def _return_slot(self, last_admission: float) -> None:
        self._free_slots.append(last_admission)
        self._slot_released.set()

    async def acquire(self, work: Callable[[], Awaitable[Any]]) -> Any:
        """
        Run ``work`` once a slot is available and return its result.

        The slot is released when ``work`` finishes, whether it returns or
        raises. With ``reject_on_limit`` a call that would have to wait
        raises ThrottleLimitError instead of queuing.
        """
        if self.reject_on_limit and not self._can_admit_now():
            self.logger.debug("Throttle limit reached, rejecting",
                              limit=self.limit, in_flight=self.in_flight, waiting=self._waiting)
            raise ThrottleLimitError(self.limit, self.in_flight, self._waiting)

        self._waiting += 1
        try:
            async with self._gate:
                last_admission = await self._take_slot()
                try:
                    delay = last_admission + self._window - self._clock()
                    if delay > 0:
                        await asyncio.sleep(delay)
                except BaseException:
                    # Cancelled before admission, slot goes back untouched
                    self._return_slot(last_admission)
                    raise
        finally:
            self._waiting -= 1

        ticket = ThrottleTicket(next(self._sequence), self._clock(), counted=self._window > 0)
        self._active[ticket.sequence] = ticket
        try:
            return await work()
        finally:
            del self._active[ticket.sequence]
            self._return_slot(ticket.admitted_at)

    def get_stats(self) -> Dict[str, Any]:
        """Get throttle statistics."""
        return {
            "limit": self.limit,
            "window_ms": self.window_ms,
            "in_flight": self.in_flight,
            "waiting": self._waiting,
            "free_slots": len(self._free_slots),
        }
