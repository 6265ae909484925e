# timers.py
from __future__ import annotations
import heapq
import itertools
import logging

from typing import Callable, List, Tuple

log = logging.getLogger(__name__)


class Timer:
    __slots__ = ('due', 'callback', 'cancelled')

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        return f"<Timer,due={self.due:.3f},cancelled={self.cancelled}>"


class Scheduler:
    """
    Single-shot timers driven by the frame clock.

    The owner advances time with tick(dt) once per frame; due callbacks run
    inside that call, on the loop's thread, so they never overlap a draw.
    """
    __slots__ = ('now', '_timers', '_seq')

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: List[Tuple[float, int, Timer]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> Timer:
        timer = Timer(self.now + max(0.0, delay), callback)
        heapq.heappush(self._timers, (timer.due, next(self._seq), timer))
        return timer

    def tick(self, dt: float) -> int:
        self.now += dt
        due: List[Timer] = []
        while self._timers and self._timers[0][0] <= self.now:
            due.append(heapq.heappop(self._timers)[2])

        # timers scheduled from these callbacks wait for the next tick
        ran = 0
        try:
            while due:
                timer = due.pop(0)
                if timer.cancelled:
                    continue
                timer.callback()
                ran += 1
        finally:
            # a raising callback leaves the rest of the batch queued
            for timer in due:
                heapq.heappush(self._timers, (timer.due, next(self._seq), timer))
        return ran

    def clear(self) -> None:
        for _, _, timer in self._timers:
            timer.cancel()
        if self._timers:
            log.debug('[scheduler] cancelled %d timer(s)', len(self._timers))
        self._timers.clear()

    @property
    def pending(self) -> int:
        return sum(1 for _, _, timer in self._timers if not timer.cancelled)
