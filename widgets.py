import logging
from enum import IntEnum
from typing import Any, Callable, Optional

from bus import CustomSignal, MouseEvent, PointerEvent
from elements import BorderStyle, UIContainer
from layout import DockBottomLayout, MarginLayout
from painter import Painter

log = logging.getLogger(__name__)

DIALOG_DISMISSED = CustomSignal('dialog.dismissed')

TITLEBAR_HEIGHT = 18
BORDER_WIDTH = 3


class Alignment(IntEnum):
    CENTER = 0
    LEFT = 1
    RIGHT = 2

# UIText

class UIText(UIContainer):
    def __init__(self, left: float, top: float, right: float, bottom: float, text: str = '',
                 color: Any = None, background: Any = None,
                 border_style: BorderStyle = BorderStyle.NONE,
                 text_align: Alignment = Alignment.LEFT, bold: bool = False, font_size: int = 16,
                 margin_left: float = 0, margin_right: float = 0, margin_top: float = 0,
                 color_key: str = 'text.color', background_key: str = 'window.bg'):
        super().__init__(left, top, right, bottom, background, border_style, background_key)
        self.text = text
        self.color = color
        self.color_key = color_key
        self.text_align = text_align
        self.bold = bold
        self.font_size = font_size
        self.margin_left = margin_left
        self.margin_right = margin_right
        self.margin_top = margin_top

    def paint(self, painter: Painter) -> None:
        if not self.text:
            return
        if self.text_align == Alignment.CENTER:
            x, align = self.width / 2, 'center'
        elif self.text_align == Alignment.RIGHT:
            x, align = self.width - self.margin_right, 'right'
        else:
            x, align = self.margin_left, 'left'
        painter.fill(self.color or painter.color(self.color_key, (0, 0, 0)))
        painter.select_font(self.font_size, self.bold)
        painter.text(self.text, x, self.height / 2 + self.margin_top, align, 'middle')

# UIWindow

class UIWindow(UIContainer):
    """
    Bevelled window with a title bar and a content area.

    Pressing the title bar raises the window and starts a drag that follows
    the root's drag events until the root sees a release. Every pointer event
    reaching the window is stopped so windows underneath never see it.
    """

    def __init__(self, left: float, top: float, right: float, bottom: float,
                 title: str = 'Window', background: Any = None):
        super().__init__(left, top, right, bottom, background, BorderStyle.BEVEL)
        self.title = title

        # Interaction states
        self.dragging = False
        self._drag_root: Optional[UIContainer] = None

        self.content = UIContainer(left, top, right, bottom, background)
        MarginLayout.install(self.content,
                             margin_left=BORDER_WIDTH,
                             margin_top=BORDER_WIDTH + TITLEBAR_HEIGHT,
                             margin_right=BORDER_WIDTH,
                             margin_bottom=BORDER_WIDTH)

        self.titlebar = UIText(left, top, right, bottom, title,
                               margin_left=10,
                               color_key='title.text',
                               background_key='title.bg')
        MarginLayout.install(self.titlebar,
                             margin_left=BORDER_WIDTH,
                             margin_top=BORDER_WIDTH,
                             margin_right=BORDER_WIDTH,
                             bottom=BORDER_WIDTH + TITLEBAR_HEIGHT)

        self.titlebar.on(MouseEvent.PRESS, self._begin_drag)
        for name in MouseEvent:
            self.on(name, self._swallow)

        self.add(self.content)
        self.add(self.titlebar)

    # Event Handling

    def _swallow(self, event: PointerEvent) -> None:
        event.stop_propagation()

    def _begin_drag(self, event: PointerEvent) -> None:
        parent = self.parent
        if parent is None:
            return
        parent.bring_to_front(self)
        root = self.root()
        root.on(MouseEvent.DRAG, self._drag)
        root.on(MouseEvent.RELEASE, self._end_drag)
        self._drag_root = root
        self.dragging = True

    def _drag(self, event: PointerEvent) -> None:
        if self.dragging:
            self.move_by(event.movement_x, event.movement_y)

    def _end_drag(self, event: PointerEvent) -> None:
        self.dragging = False
        if self._drag_root is not None:
            self._drag_root.off(MouseEvent.DRAG, self._drag)
            self._drag_root.off(MouseEvent.RELEASE, self._end_drag)
            self._drag_root = None

# UIButton

class UIButton(UIText):
    """ Bevelled label that shows an inset while held. Listen to RELEASE for clicks. """

    def __init__(self, left: float, top: float, right: float, bottom: float,
                 text: str = '', background: Any = None):
        super().__init__(left, top, right, bottom, text,
                         background=background,
                         border_style=BorderStyle.BEVEL,
                         text_align=Alignment.CENTER,
                         bold=True,
                         color_key='button.text')
        self._press_root: Optional[UIContainer] = None
        self.on(MouseEvent.PRESS, self._press)
        self.on(MouseEvent.RELEASE, self._release)

    @property
    def pressed(self) -> bool:
        return self.border_style is BorderStyle.INSET

    def _press(self, event: PointerEvent) -> None:
        self.border_style = BorderStyle.INSET
        # releases outside the button still have to pop it back out
        root = self.root()
        if root is not self:
            root.on(MouseEvent.RELEASE, self._release)
            self._press_root = root

    def _release(self, event: PointerEvent) -> None:
        self.border_style = BorderStyle.BEVEL
        if self._press_root is not None:
            self._press_root.off(MouseEvent.RELEASE, self._release)
            self._press_root = None

# UIDialog

class UIDialog(UIWindow):
    def __init__(self, left: float, top: float, right: float, bottom: float,
                 title: str = 'Dialog', text: str = '',
                 on_dismiss: Optional[Callable[[], None]] = None):
        super().__init__(left, top, right, bottom, title)
        self.on_dismiss = on_dismiss

        self.message = UIText(3, 3, 64, 26, text, text_align=Alignment.CENTER)
        MarginLayout.install(self.message,
                             margin_left=3,
                             margin_right=3,
                             margin_top=3,
                             margin_bottom=64)

        cw, ch = self.content.width, self.content.height
        self.button = UIButton(cw / 2 - 32, ch - 23 - 3, cw / 2 + 32, ch - 3, 'Okay')
        self.button.on(MouseEvent.RELEASE, self._dismiss)

        self.content.add(self.message)
        self.content.add(self.button)

    @classmethod
    def centered(cls, parent: UIContainer, title: str = 'Dialog', text: str = '',
                 on_dismiss: Optional[Callable[[], None]] = None,
                 width: float = 256, height: float = 128) -> 'UIDialog':
        left = parent.width / 2 - width / 2
        top = parent.height / 2 - height / 2
        return cls(left, top, left + width, top + height, title, text, on_dismiss)

    def _dismiss(self, event: PointerEvent) -> None:
        log.debug('[%s] dismissed "%s"', self.name, self.title)
        if self.on_dismiss is not None:
            self.on_dismiss()
        self.emit(DIALOG_DISMISSED, self)
        parent = self.parent
        if parent is not None:
            parent.remove(self)

# UITaskbar

class UITaskbar(UIContainer):
    def __init__(self, height: float = 29):
        # spans its parent once attached
        super().__init__(0, 0, 0, height, border_style=BorderStyle.BEVEL)
        self.layout_strategy = DockBottomLayout(MarginLayout(), height)
        self.start_button = UIButton(3, 3, 64, height - 3, 'Start')
        self.add(self.start_button)
