"""Window, game loop and the managers it drives."""

from __future__ import annotations

import logging
import os
import sys

import pygame

from samurai_engine.render_manager import RenderManager
from samurai_engine.scene_manager import SceneManager
from samurai_engine.singleton import Singleton
from samurai_engine.sound_manager import SoundManager
from samurai_engine.time_manager import TimeManager

logger = logging.getLogger(__name__)


class GameApp(Singleton):
    """Owns the window and runs update and render every frame until quit."""

    def __init__(
        self, width: int = 1920, height: int = 1080, title: str = "GDI+ Windows Project"
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.module_path = ""
        self.working_path = ""
        self.screen: pygame.Surface | None = None
        self.is_loop = True
        self._initialised = False

        self.time_manager = TimeManager()
        self.sound_manager = SoundManager()
        self.render_manager = RenderManager()
        self.scene_manager = SceneManager()

    def init(self) -> None:
        """Open the window and initialise the managers."""
        self.module_path = os.path.abspath(sys.argv[0]) if sys.argv and sys.argv[0] else ""
        logger.debug("module path: %s", self.module_path)
        self.working_path = os.getcwd()
        logger.debug("working path: %s", self.working_path)

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.title)

        self.time_manager.init()
        self.sound_manager.init()
        self.render_manager.init(self.screen, self.width, self.height)
        self._initialised = True

    def update(self) -> None:
        self.time_manager.update()
        self.scene_manager.update()

    def render(self) -> None:
        self.render_manager.draw_background()
        self.scene_manager.render()
        self.render_manager.draw_back_to_front()
        pygame.display.flip()

    def run(self, max_frames: int | None = None) -> int:
        """Run the game loop; stop on quit or after ``max_frames``. Return frames run."""
        if not self._initialised:
            raise RuntimeError("GameApp.init() must be called before run()")
        frames = 0
        while self.is_loop and (max_frames is None or frames < max_frames):
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.is_loop:
                break
            self.update()
            self.render()
            frames += 1
        return frames

    def release(self) -> None:
        """Release the managers and close the window."""
        self.sound_manager.release()
        self.time_manager.release()
        self.scene_manager.release()
        self.render_manager.release()
        self.screen = None
        self._initialised = False
        pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to a window event; subclasses extend this."""
        if event.type == pygame.QUIT:
            self.is_loop = False