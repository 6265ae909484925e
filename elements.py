# elements.py

from __future__ import annotations
import logging
import weakref
from enum import Enum

from typing import Any, List, Optional, Tuple, TYPE_CHECKING
from bus import EventEmitter, MouseEvent, PointerEvent

if TYPE_CHECKING:
    from painter import Painter

log = logging.getLogger(__name__)

# child -> weakref(parent); written only by UIContainer.add/remove
_parents: 'weakref.WeakKeyDictionary[UIContainer, weakref.ReferenceType[UIContainer]]' = \
    weakref.WeakKeyDictionary()


class NoParentError(RuntimeError):
    """ Raised when a parent-relative layout runs on a detached container """


class BorderStyle(Enum):
    NONE = 'none'
    BEVEL = 'bevel'
    INSET = 'inset'


class BaseLayout:
    """ Default strategy: bounds stay as they are """

    def apply(self, container: 'UIContainer') -> None:
        pass


# ############################################
#
# Chrome
#

SHADOW = (0, 0, 0, 0x7F)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
WINDOW = '#c3c3c3'


def draw_bevel(painter: 'Painter', background: Any, x: float, y: float, w: float, h: float) -> None:
    # shadow
    painter.fill(painter.color('bevel.dark', BLACK))
    painter.rect(x, y, w, h)

    painter.fill(background)
    painter.rect(x, y, w - 1, h - 1)

    # shiny top
    painter.fill(painter.color('bevel.high', WHITE))
    painter.rect(x + 1, y + 1, w - 2, h - 2)

    # shaded bottom
    painter.fill(painter.color('bevel.shadow', SHADOW))
    painter.rect(x + 2, y + 2, w - 3, h - 3)

    painter.fill(background)
    painter.rect(x + 2, y + 2, w - 4, h - 4)


def draw_inset(painter: 'Painter', background: Any, x: float, y: float, w: float, h: float) -> None:
    painter.fill(painter.color('bevel.shadow', SHADOW))
    painter.rect(x, y, w - 1, h - 1)

    painter.fill(painter.color('bevel.high', WHITE))
    painter.rect(x + 1, y + 1, w - 1, h - 1)

    painter.fill(background)
    painter.rect(x + 1, y + 1, w - 2, h - 2)


# ############################################
#
# Container
#

class UIContainer(EventEmitter):
    __slots__ = ('name', '_left', '_top', '_right', '_bottom', 'background',
                 'background_key', 'border_style', 'is_dirty', 'children', 'layout_strategy')

    def __init__(self, left: float, top: float, right: float, bottom: float,
                 background: Any = None, border_style: BorderStyle = BorderStyle.NONE,
                 background_key: str = 'window.bg') -> None:
        super().__init__()
        self.name = self.__class__.__name__
        # geometry, parent-local
        self._left = left
        self._top = top
        self._right = right
        self._bottom = bottom
        # style
        self.background = background
        self.background_key = background_key
        self.border_style = border_style
        # states
        self.is_dirty = False
        self.children: List[UIContainer] = []
        self.layout_strategy = BaseLayout()

        for name in MouseEvent:
            self.on(name, self._router(name))

    # Tree

    @property
    def parent(self) -> Optional['UIContainer']:
        ref = _parents.get(self)
        return ref() if ref is not None else None

    def root(self) -> 'UIContainer':
        """ Traverse up stream to obtain the top-most container """
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def add(self, child: 'UIContainer') -> bool:
        if child is self or child.parent is self:
            return False
        node = self.parent
        while node is not None:
            if node is child:
                log.warning('[%s] refusing to adopt ancestor %s', self.name, child.name)
                return False
            node = node.parent
        previous = child.parent
        if previous is not None:
            previous.remove(child)
        self.children.append(child)
        _parents[child] = weakref.ref(self)
        log.debug('[%s] parenting %s', self.name, child.name)
        child.layout()
        return True

    def remove(self, child: 'UIContainer') -> bool:
        if child not in self.children:
            return False
        self.children.remove(child)
        _parents.pop(child, None)
        log.debug('[%s] releasing %s', self.name, child.name)
        # relayout on next attach or draw, never against the old parent
        child.is_dirty = True
        return True

    def bring_to_front(self, child: 'UIContainer') -> None:
        if self.remove(child):
            self.add(child)

    # Layout & drawing

    def layout(self) -> None:
        before = self.bounds
        self.layout_strategy.apply(self)
        # moved containers stay dirty so their own children follow on draw
        if self.bounds == before:
            self.is_dirty = False

    def draw(self, painter: 'Painter') -> None:
        if self.is_dirty:
            self.layout()
            for child in self.children:
                child.layout()

        background = self.background or painter.color(self.background_key, WINDOW)
        w, h = self.width, self.height
        painter.push()
        painter.translate(self._left, self._top)
        if self.border_style is BorderStyle.BEVEL:
            draw_bevel(painter, background, 0, 0, w, h)
        elif self.border_style is BorderStyle.INSET:
            draw_inset(painter, background, 0, 0, w, h)
        else:
            painter.fill(background)
            painter.rect(0, 0, w, h)
        self.paint(painter)
        for child in list(self.children):
            child.draw(painter)
        painter.pop()

    def paint(self, painter: 'Painter') -> None:
        """ Content hook, runs in the local frame after the chrome """

    # Events

    def _router(self, name: MouseEvent):
        def route(event: PointerEvent) -> None:
            x, y = event.x - self._left, event.y - self._top
            candidates = [child for child in self.children if child.contains(x, y)]
            for child in reversed(candidates):
                stopped = False

                def stop_propagation() -> None:
                    nonlocal stopped
                    stopped = True

                child.emit(name, event.translated(self._left, self._top, stop_propagation))
                if stopped:
                    break
        return route

    # Geometry

    def contains(self, x: float, y: float) -> bool:
        return self._left <= x <= self._right and self._top <= y <= self._bottom

    def move_by(self, dx: float, dy: float) -> None:
        self.left += dx
        self.top += dy
        self.right += dx
        self.bottom += dy

    # Properties

    @property
    def left(self) -> float:
        return self._left

    @left.setter
    def left(self, value: float) -> None:
        self._left = value
        self.is_dirty = True

    @property
    def top(self) -> float:
        return self._top

    @top.setter
    def top(self, value: float) -> None:
        self._top = value
        self.is_dirty = True

    @property
    def right(self) -> float:
        return self._right

    @right.setter
    def right(self, value: float) -> None:
        self._right = value
        self.is_dirty = True

    @property
    def bottom(self) -> float:
        return self._bottom

    @bottom.setter
    def bottom(self, value: float) -> None:
        self._bottom = value
        self.is_dirty = True

    @property
    def width(self) -> float:
        return self._right - self._left

    @property
    def height(self) -> float:
        return self._bottom - self._top

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (self._left, self._top, self._right, self._bottom)

    def __repr__(self) -> str:
        return f"<{self.name},bounds={self.bounds},children={len(self.children)}>"
