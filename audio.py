# audio.py
from __future__ import annotations
import logging
import pygame

from typing import Any, Callable, List, Optional

log = logging.getLogger(__name__)


class SoundPool:
    """
    Fire-and-forget playback of one sound over a ring of mixer channels.

    Each play() takes the next channel, so a retrigger overlaps the previous
    one instead of cutting it off.
    """
    __slots__ = ('sound', 'channels', '_next')

    def __init__(self, sound: Any, voices: int = 4, first_channel: int = 0,
                 channel_factory: Optional[Callable[[int], Any]] = None) -> None:
        if voices < 1:
            raise ValueError("a sound pool needs at least one voice")
        factory = channel_factory or pygame.mixer.Channel
        self.sound = sound
        self.channels: List[Any] = [factory(first_channel + i) for i in range(voices)]
        self._next = 0

    @classmethod
    def load(cls, path: str, voices: int = 4, first_channel: int = 0) -> Optional['SoundPool']:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
            if pygame.mixer.get_num_channels() < first_channel + voices:
                pygame.mixer.set_num_channels(first_channel + voices)
            sound = pygame.mixer.Sound(path)
        except (pygame.error, FileNotFoundError) as exc:
            log.warning('[audio] %s unavailable, playing silent: %s', path, exc)
            return None
        log.info('[audio] loaded %s (%d voices)', path, voices)
        return cls(sound, voices, first_channel)

    def play(self) -> Any:
        channel = self.channels[self._next]
        self._next = (self._next + 1) % len(self.channels)
        channel.play(self.sound)
        return channel

    def stop(self) -> None:
        for channel in self.channels:
            channel.stop()
