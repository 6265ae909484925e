from __future__ import annotations
import logging
import pygame

from typing import Any, Dict, Mapping, Optional

from bus import CustomSignal, MouseEvent, PointerEvent
from elements import UIContainer
from painter import Painter
from timers import Scheduler

log = logging.getLogger(__name__)

ROOT_DESTROYED = CustomSignal('root.destroyed')


class UIVisuals:
    """ Theme store: colors keyed the way containers and widgets look them up """
    __slots__ = ('store',)

    def __init__(self, overrides: Optional[Mapping[str, Any]] = None) -> None:
        self.store: Dict[str, Any] = {}
        self.initialize()
        if overrides:
            self.store.update(overrides)

    def initialize(self) -> None:
        self.store['desktop.bg'] = '#008282'     # Desktop
        self.store['window.bg'] = '#c3c3c3'      # Window face, default container fill

        # Bevel
        self.store['bevel.high'] = (255, 255, 255)      # Highlight
        self.store['bevel.dark'] = (0, 0, 0)            # Outline
        self.store['bevel.shadow'] = (0, 0, 0, 0x7F)    # Shade

        # Titlebar
        self.store['title.bg'] = '#000082'
        self.store['title.text'] = '#ffffff'

        # Text
        self.store['text.color'] = '#000000'
        self.store['button.text'] = '#000000'

    def read(self, name: str) -> Any:
        return self.store.get(name)

    def write(self, name: str, value: Any) -> None:
        self.store[name] = value

    def has(self, name: str) -> bool:
        return name in self.store


class UIRoot(UIContainer):
    """
    Top of the tree and owner of the frame loop.

    Translates pygame input into pointer events on its own emitter, advances
    the scheduler and redraws the whole tree once per frame.
    """

    def __init__(self, width: int = 800, height: int = 600, fps: int = 60,
                 title: str = 'root', visuals: Optional[UIVisuals] = None):
        super().__init__(0, 0, width, height, background_key='desktop.bg')
        self.name = 'UIRoot'
        self.title = title
        self.fps = fps
        self.visuals = visuals or UIVisuals()
        self.scheduler = Scheduler()
        self.running = False
        self.clock: Optional[pygame.time.Clock] = None
        self.surface: Optional[pygame.Surface] = None
        self.painter: Optional[Painter] = None
        self.current_fps = 0.0
        self.frame_count = 0

    def open(self) -> None:
        pygame.init()
        pygame.display.set_caption(self.title)
        self.surface = pygame.display.set_mode((int(self.width), int(self.height)), 0)
        self.clock = pygame.time.Clock()
        self.painter = Painter(self.surface, self.visuals.store)
        log.info('[root] opened %dx%d at %d fps', self.width, self.height, self.fps)

    def run(self) -> None:
        if self.surface is None:
            self.open()
        self.running = True
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                dt = self.clock.tick(self.fps) / 1000.0

                # stats
                self.current_fps = self.clock.get_fps()
                self.frame_count += 1

                self.scheduler.tick(dt)
                self.render()

                pygame.display.flip()
        except KeyboardInterrupt:
            log.info('[root] interrupted...')
            self.destroy()
        except Exception:
            log.exception('[root] fatal exception')
            self.destroy()
        finally:
            log.info('[root] quit')
            pygame.quit()

    def render(self, painter: Optional[Painter] = None) -> None:
        self.draw(painter or self.painter)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            self.destroy()
            return True
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.destroy()
                return True
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.emit(MouseEvent.PRESS, PointerEvent(*event.pos))
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.emit(MouseEvent.RELEASE, PointerEvent(*event.pos))
            return True
        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            dx, dy = event.rel
            name = MouseEvent.DRAG if event.buttons[0] else MouseEvent.MOVE
            self.emit(name, PointerEvent(x, y, dx, dy))
            return True
        return False

    def destroy(self) -> None:
        self.running = False
        self.scheduler.clear()
        self.emit(ROOT_DESTROYED, self)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__},name={self.name},size={self.width}x{self.height},fps={self.fps}>"
