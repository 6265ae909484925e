# bus.py
from __future__ import annotations
from enum import Enum
from dataclasses import dataclass, replace
from typing import Any, Dict, Callable, Tuple, Union

# Channels

class MouseEvent(Enum):
    PRESS = 'mousepress'
    RELEASE = 'mouserelease'
    MOVE = 'mousemove'
    DRAG = 'mousedrag'


@dataclass(frozen=True)
class CustomSignal:
    """ Named channel for widget-level signals outside the pointer set """
    name: str


Channel = Union[MouseEvent, CustomSignal]


def _noop() -> None:
    pass


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float
    movement_x: float = 0.0
    movement_y: float = 0.0
    stop_propagation: Callable[[], None] = _noop

    def translated(self, dx: float, dy: float,
                   stop_propagation: Callable[[], None]) -> 'PointerEvent':
        return replace(self, x=self.x - dx, y=self.y - dy,
                       stop_propagation=stop_propagation)


def _channel(name: Any) -> Channel:
    if isinstance(name, (MouseEvent, CustomSignal)):
        return name
    raise TypeError(f"unknown event channel {name!r}; use MouseEvent or CustomSignal")


class EventEmitter:
    __slots__ = ('_listeners', '__weakref__')

    def __init__(self) -> None:
        # dict keys act as an insertion-ordered set
        self._listeners: Dict[Channel, Dict[Callable, None]] = {}

    def on(self, name: Channel, listener: Callable) -> None:
        self._listeners.setdefault(_channel(name), {})[listener] = None

    def off(self, name: Channel, listener: Callable) -> None:
        callbacks = self._listeners.get(_channel(name))
        if callbacks is not None:
            callbacks.pop(listener, None)

    def emit(self, name: Channel, *args: Any) -> None:
        callbacks = self._listeners.get(_channel(name))
        if not callbacks:
            return
        # listeners may subscribe or unsubscribe while we fan out
        for listener in list(callbacks):
            listener(*args)

    def listeners(self, name: Channel) -> Tuple[Callable, ...]:
        return tuple(self._listeners.get(_channel(name), ()))
