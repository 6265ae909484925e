# painter.py
from __future__ import annotations
import math
import pygame

from typing import Any, Dict, List, Mapping, Optional, Tuple

Color = Any  # anything pygame.Color accepts: name, hex string, (r, g, b[, a])


class Painter:
    """
    Immediate-mode drawing front for the container tree.

    Keeps a p5-style transform stack (translate/rotate with push/pop) over a
    pygame surface. Containers only talk to the surface through this object.
    """
    __slots__ = ('surface', 'theme', '_fill', '_state', '_stack', '_fonts', '_font')

    def __init__(self, surface: pygame.Surface, theme: Optional[Mapping[str, Any]] = None) -> None:
        self.surface = surface
        self.theme: Mapping[str, Any] = theme if theme is not None else {}
        self._fill = pygame.Color(0, 0, 0)
        # (origin x, origin y, angle in radians)
        self._state: Tuple[float, float, float] = (0.0, 0.0, 0.0)
        self._stack: List[Tuple[float, float, float]] = []
        self._fonts: Dict[Tuple[int, bool], pygame.font.Font] = {}
        self._font: Optional[pygame.font.Font] = None

    # Transform state

    def push(self) -> None:
        self._stack.append(self._state)

    def pop(self) -> None:
        self._state = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        ox, oy, angle = self._state
        cos, sin = math.cos(angle), math.sin(angle)
        self._state = (ox + dx * cos - dy * sin, oy + dx * sin + dy * cos, angle)

    def rotate(self, radians: float) -> None:
        ox, oy, angle = self._state
        self._state = (ox, oy, angle + radians)

    def to_surface(self, x: float, y: float) -> Tuple[float, float]:
        ox, oy, angle = self._state
        cos, sin = math.cos(angle), math.sin(angle)
        return (ox + x * cos - y * sin, oy + x * sin + y * cos)

    # Color

    def fill(self, color: Color) -> None:
        self._fill = pygame.Color(color)

    def color(self, key: str, default: Color = None) -> Color:
        return self.theme.get(key, default)

    @staticmethod
    def lerp_color(a: Color, b: Color, t: float) -> pygame.Color:
        return pygame.Color(a).lerp(pygame.Color(b), max(0.0, min(1.0, t)))

    # Primitives

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        if self._state[2] == 0.0:
            ox, oy, _ = self._state
            area = pygame.Rect(round(ox + x), round(oy + y), round(w), round(h))
            area.normalize()
            if area.width == 0 or area.height == 0:
                return
            if self._fill.a == 255:
                self.surface.fill(self._fill, area)
            else:
                layer = pygame.Surface(area.size, pygame.SRCALPHA)
                layer.fill(self._fill)
                self.surface.blit(layer, area.topleft)
            return

        corners = [self.to_surface(px, py) for px, py in
                   ((x, y), (x + w, y), (x + w, y + h), (x, y + h))]
        layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        pygame.draw.polygon(layer, self._fill, corners)
        self.surface.blit(layer, (0, 0))

    # Text

    def select_font(self, size: int = 16, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        font = self._fonts.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            font.set_bold(bold)
            self._fonts[key] = font
        self._font = font
        return font

    def text(self, text: str, x: float, y: float,
             align: str = 'left', baseline: str = 'middle') -> None:
        font = self._font or self.select_font()
        surf = font.render(text, True, self._fill)
        if self._fill.a != 255:
            surf.set_alpha(self._fill.a)
        if self._state[2] != 0.0:
            surf = pygame.transform.rotate(surf, -math.degrees(self._state[2]))
        w, h = surf.get_size()
        sx, sy = self.to_surface(x, y)
        if align == 'center':
            sx -= w / 2
        elif align == 'right':
            sx -= w
        if baseline == 'middle':
            sy -= h / 2
        elif baseline == 'bottom':
            sy -= h
        self.surface.blit(surf, (round(sx), round(sy)))
