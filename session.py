# session.py
from __future__ import annotations
import logging
import random

from typing import Optional, Tuple

from audio import SoundPool
from core import ROOT_DESTROYED
from elements import UIContainer
from timers import Scheduler, Timer
from widgets import UIDialog

log = logging.getLogger(__name__)


class DecoyBarrage:
    """
    Spawns error dialogs at random spots, each one sooner than the last.

    The gap between dialogs shrinks geometrically by `decay` down to
    `min_delay`; spawning stops after `max_count` dialogs or on cancel().
    All state lives here and is reset by start().
    """

    def __init__(self, root: UIContainer, scheduler: Scheduler, *,
                 max_count: int = 48,
                 initial_delay: float = 1.2,
                 decay: float = 0.8,
                 min_delay: float = 0.08,
                 size: Tuple[float, float] = (256, 128),
                 reserved_bottom: float = 29,
                 title: str = 'System Error',
                 text: str = 'Uh oh.',
                 rng: Optional[random.Random] = None,
                 sound: Optional[SoundPool] = None) -> None:
        self.root = root
        self.scheduler = scheduler
        self.max_count = max_count
        self.initial_delay = initial_delay
        self.decay = decay
        self.min_delay = min_delay
        self.size = size
        self.reserved_bottom = reserved_bottom
        self.title = title
        self.text = text
        self.rng = rng or random.Random()
        self.sound = sound

        self.count = 0
        self.delay = initial_delay
        self.active = False
        self._timer: Optional[Timer] = None
        root.on(ROOT_DESTROYED, self._root_destroyed)

    def start(self) -> None:
        self.cancel()
        self.count = 0
        self.delay = self.initial_delay
        self.active = True
        log.info('[barrage] starting, %d dialogs max', self.max_count)
        self._timer = self.scheduler.call_later(self.delay, self._spawn)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self.active:
            log.info('[barrage] cancelled after %d dialogs', self.count)
        self.active = False

    def _spawn(self) -> None:
        self._timer = None
        if not self.active:
            return

        width, height = self.size
        max_left = max(0.0, self.root.width - width)
        max_top = max(0.0, self.root.height - self.reserved_bottom - height)
        left = self.rng.uniform(0, max_left)
        top = self.rng.uniform(0, max_top)
        self.root.add(UIDialog(left, top, left + width, top + height, self.title, self.text))
        self.count += 1
        if self.sound is not None:
            self.sound.play()

        if self.count >= self.max_count:
            self.active = False
            log.info('[barrage] finished with %d dialogs', self.count)
            return

        self.delay = max(self.min_delay, self.delay * self.decay)
        self._timer = self.scheduler.call_later(self.delay, self._spawn)

    def _root_destroyed(self, root: UIContainer) -> None:
        self.cancel()
