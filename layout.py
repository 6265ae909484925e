# layout.py

from __future__ import annotations
from typing import Optional

from elements import BaseLayout, NoParentError, UIContainer


class MarginLayout(BaseLayout):
    """
    Places a container relative to its parent's extent.

    Each edge is an absolute position (left/top default to 0, right/bottom to
    the parent's width/height) moved inwards by its margin. The wrapped
    strategy runs first so layouts can be stacked.
    """

    def __init__(self, wrapped: Optional[BaseLayout] = None, *,
                 left: Optional[float] = None, top: Optional[float] = None,
                 right: Optional[float] = None, bottom: Optional[float] = None,
                 margin_left: float = 0, margin_top: float = 0,
                 margin_right: float = 0, margin_bottom: float = 0) -> None:
        self.wrapped = wrapped if wrapped is not None else BaseLayout()
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom
        self.margin_left = margin_left
        self.margin_top = margin_top
        self.margin_right = margin_right
        self.margin_bottom = margin_bottom

    @classmethod
    def install(cls, container: UIContainer, **config) -> 'MarginLayout':
        """ Wrap the container's current strategy and make this one current """
        strategy = cls(container.layout_strategy, **config)
        container.layout_strategy = strategy
        return strategy

    def apply(self, container: UIContainer) -> None:
        parent = container.parent
        if parent is None:
            raise NoParentError(f"{container.name} needs a parent for margin layout")
        self.wrapped.apply(container)
        container.left = (self.left if self.left is not None else 0) + self.margin_left
        container.top = (self.top if self.top is not None else 0) + self.margin_top
        container.right = (self.right if self.right is not None else parent.width) - self.margin_right
        container.bottom = (self.bottom if self.bottom is not None else parent.height) - self.margin_bottom


class DockBottomLayout(BaseLayout):
    """ Keeps a fixed height, hanging from whatever bottom edge the wrapped layout chose """

    def __init__(self, wrapped: BaseLayout, height: float) -> None:
        self.wrapped = wrapped
        self.height = height

    def apply(self, container: UIContainer) -> None:
        self.wrapped.apply(container)
        container.top = container.bottom - self.height
