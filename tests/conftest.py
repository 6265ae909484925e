import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from elements import BaseLayout, UIContainer


class RecordingPainter:
    """ Painter double that records every call instead of rasterizing """

    def __init__(self, theme=None):
        self.theme = theme or {}
        self.calls = []
        self._fill = None

    def push(self):
        self.calls.append(('push',))

    def pop(self):
        self.calls.append(('pop',))

    def translate(self, dx, dy):
        self.calls.append(('translate', dx, dy))

    def rotate(self, radians):
        self.calls.append(('rotate', radians))

    def fill(self, color):
        self._fill = color

    def color(self, key, default=None):
        return self.theme.get(key, default)

    def rect(self, x, y, w, h):
        self.calls.append(('rect', self._fill, x, y, w, h))

    def select_font(self, size=16, bold=False):
        self.calls.append(('font', size, bold))

    def text(self, text, x, y, align='left', baseline='middle'):
        self.calls.append(('text', self._fill, text, x, y, align, baseline))

    def named(self, name):
        return [call[1:] for call in self.calls if call[0] == name]

    def rects(self):
        return [call[2:] for call in self.calls if call[0] == 'rect']


class CountingLayout(BaseLayout):
    def __init__(self):
        self.calls = 0

    def apply(self, container):
        self.calls += 1


@pytest.fixture
def painter():
    return RecordingPainter()


@pytest.fixture
def make_painter():
    return RecordingPainter


@pytest.fixture
def counting_layout():
    return CountingLayout


@pytest.fixture
def root():
    return UIContainer(0, 0, 800, 600)


@pytest.fixture
def center_of():
    """ Center of a container in the coordinates the root's emitter expects """
    def center(container):
        x = container.left + container.width / 2
        y = container.top + container.height / 2
        node = container.parent
        while node is not None:
            x += node.left
            y += node.top
            node = node.parent
        return x, y
    return center
