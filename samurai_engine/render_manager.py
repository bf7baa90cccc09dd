"""Double-buffered 2D drawing on top of pygame surfaces."""

from __future__ import annotations

import os
from typing import Union

import pygame

from samurai_engine.singleton import Singleton
from samurai_engine.vector2 import Vector2

ColorLike = Union[pygame.Color, tuple, str]

_BLACK = pygame.Color(0, 0, 0)
_WHITE = pygame.Color(255, 255, 255)
_RED = pygame.Color(255, 0, 0)
_FONT_SIZE = 16
FLIP_LEFT = -1


class RenderManager(Singleton):
    """Draws into a back buffer and copies it to the screen once per frame."""

    def __init__(self) -> None:
        self._screen: pygame.Surface | None = None
        self._back: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self.width = 0
        self.height = 0

    def init(self, screen: pygame.Surface, width: int, height: int) -> None:
        """Attach to ``screen`` and create a back buffer of the given size."""
        self._screen = screen
        self.width = int(width)
        self.height = int(height)
        self._back = pygame.Surface((self.width, self.height))
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(None, _FONT_SIZE)

    @property
    def back_buffer(self) -> pygame.Surface:
        """The surface that draw calls write to."""
        if self._back is None:
            raise RuntimeError("RenderManager.init() must be called first")
        return self._back

    @property
    def screen(self) -> pygame.Surface | None:
        return self._screen

    def load_image(self, path: str | os.PathLike) -> pygame.Surface:
        """Load an image file into a surface."""
        return pygame.image.load(os.fspath(path))

    def copy_image(self, image: pygame.Surface) -> pygame.Surface:
        """Return an independent copy of ``image``."""
        return image.copy()

    def flip_image(self, image: pygame.Surface | None) -> pygame.Surface | None:
        """Return ``image`` mirrored left to right; ``None`` passes through."""
        if image is None:
            return None
        return pygame.transform.flip(image, True, False)

    def draw_background(self) -> None:
        """Clear the back buffer to black."""
        self.back_buffer.fill(_BLACK)

    def draw_image(
        self,
        image: pygame.Surface,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        """Draw ``image`` at (x, y), scaled to width x height when given."""
        self.back_buffer.blit(self._sized(image, width, height), (int(x), int(y)))

    def draw_image_region(
        self,
        image: pygame.Surface,
        x: float,
        y: float,
        src_x: float,
        src_y: float,
        src_w: float,
        src_h: float,
    ) -> None:
        """Draw one frame of an atlas at its original size."""
        area = pygame.Rect(int(src_x), int(src_y), int(src_w), int(src_h))
        self.back_buffer.blit(image, (int(x), int(y)), area)

    def draw_image_flipped(
        self,
        image: pygame.Surface,
        direction: int,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        """Like :meth:`draw_image`, mirrored when ``direction`` is -1."""
        sized = self._sized(image, width, height)
        if direction == FLIP_LEFT:
            sized = pygame.transform.flip(sized, True, False)
        self.back_buffer.blit(sized, (int(x), int(y)))

    def draw_image_region_flipped(
        self,
        image: pygame.Surface,
        direction: int,
        x: float,
        y: float,
        src_x: float,
        src_y: float,
        src_w: float,
        src_h: float,
    ) -> None:
        """Like :meth:`draw_image_region`, mirrored when ``direction`` is -1."""
        if direction != FLIP_LEFT:
            self.draw_image_region(image, x, y, src_x, src_y, src_w, src_h)
            return
        w, h = max(int(src_w), 0), max(int(src_h), 0)
        region = pygame.Surface((w, h), pygame.SRCALPHA, 32)
        region.blit(image, (0, 0), pygame.Rect(int(src_x), int(src_y), w, h))
        self.back_buffer.blit(pygame.transform.flip(region, True, False), (int(x), int(y)))

    def draw_text(self, text: str, x: float, y: float) -> None:
        """Draw white text with a transparent background."""
        if self._font is None:
            raise RuntimeError("RenderManager.init() must be called first")
        rendered = self._font.render(text, True, _WHITE)
        self.back_buffer.blit(rendered, (int(x), int(y)))

    def draw_rect(self, pos: Vector2, width: float, height: float, color: ColorLike) -> None:
        """Fill a rectangle, blending when the colour is translucent."""
        rgba = pygame.Color(color)
        rect = pygame.Rect(int(pos.x), int(pos.y), int(width), int(height))
        if rgba.a == 255:
            self.back_buffer.fill(rgba, rect)
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA, 32)
        overlay.fill(rgba)
        self.back_buffer.blit(overlay, rect.topleft)

    def draw_fade_rect(self, alpha: int) -> None:
        """Cover the whole back buffer with black at the given opacity (0-255)."""
        if not 0 <= alpha <= 255:
            raise ValueError("alpha must be between 0 and 255")
        self.draw_rect(Vector2(0, 0), self.width, self.height, (0, 0, 0, alpha))

    def draw_box(self, min_pos: Vector2, width: float, height: float) -> None:
        """Outline a rectangle in red, one pixel wide."""
        rect = pygame.Rect(int(min_pos.x), int(min_pos.y), int(width), int(height))
        pygame.draw.rect(self.back_buffer, _RED, rect, 1)

    def draw_back_to_front(self) -> None:
        """Copy the back buffer onto the screen."""
        if self._screen is None:
            raise RuntimeError("RenderManager.init() must be called first")
        self._screen.blit(self.back_buffer, (0, 0))

    def release(self) -> None:
        """Drop the buffers and font."""
        self._font = None
        self._back = None
        self._screen = None

    def _sized(
        self, image: pygame.Surface, width: float | None, height: float | None
    ) -> pygame.Surface:
        if width is None and height is None:
            return image
        w = int(width) if width is not None else image.get_width()
        h = int(height) if height is not None else image.get_height()
        if (w, h) == image.get_size():
            return image
        return pygame.transform.scale(image, (w, h))