import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from samurai_engine.render_manager import RenderManager
from samurai_engine.vector2 import Vector2

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)
GREEN = (0, 255, 0, 255)


@pytest.fixture
def rm():
    pygame.init()
    screen = pygame.display.set_mode((32, 32))
    manager = RenderManager()
    manager.init(screen, 32, 32)
    manager.draw_background()
    yield manager
    manager.release()
    RenderManager.clear_instance()
    pygame.quit()


def _solid(size, color):
    surf = pygame.Surface(size)
    surf.fill(color)
    return surf


def _two_tone():
    surf = pygame.Surface((4, 2))
    surf.fill(RED[:3], pygame.Rect(0, 0, 2, 2))
    surf.fill(BLUE[:3], pygame.Rect(2, 0, 2, 2))
    return surf


def test_draw_before_init_raises():
    manager = RenderManager()
    try:
        with pytest.raises(RuntimeError):
            manager.draw_background()
    finally:
        RenderManager.clear_instance()


def test_draw_background_clears_to_black(rm):
    rm.back_buffer.fill(RED[:3])
    rm.draw_background()
    assert tuple(rm.back_buffer.get_at((5, 5))) == BLACK


def test_draw_image_at_position(rm):
    rm.draw_image(_solid((4, 4), RED[:3]), 2, 3)
    assert tuple(rm.back_buffer.get_at((2, 3))) == RED
    assert tuple(rm.back_buffer.get_at((1, 3))) == BLACK
    assert tuple(rm.back_buffer.get_at((6, 3))) == BLACK


def test_draw_image_scaled(rm):
    rm.draw_image(_solid((4, 4), RED[:3]), 0, 0, 8, 8)
    assert tuple(rm.back_buffer.get_at((7, 7))) == RED
    assert tuple(rm.back_buffer.get_at((8, 8))) == BLACK


def test_draw_image_region_picks_source_area(rm):
    rm.draw_image_region(_two_tone(), 0, 0, 2, 0, 2, 2)
    assert tuple(rm.back_buffer.get_at((0, 0))) == BLUE
    assert tuple(rm.back_buffer.get_at((2, 0))) == BLACK


def test_draw_image_flipped_left_mirrors(rm):
    rm.draw_image_flipped(_two_tone(), -1, 0, 0, 4, 2)
    assert tuple(rm.back_buffer.get_at((0, 0))) == BLUE
    assert tuple(rm.back_buffer.get_at((3, 0))) == RED


def test_draw_image_flipped_right_keeps_orientation(rm):
    rm.draw_image_flipped(_two_tone(), 1, 0, 0, 4, 2)
    assert tuple(rm.back_buffer.get_at((0, 0))) == RED
    assert tuple(rm.back_buffer.get_at((3, 0))) == BLUE


def test_draw_image_region_flipped(rm):
    rm.draw_image_region_flipped(_two_tone(), -1, 0, 0, 0, 0, 4, 2)
    assert tuple(rm.back_buffer.get_at((0, 0))) == BLUE
    rm.draw_background()
    rm.draw_image_region_flipped(_two_tone(), 1, 0, 0, 0, 0, 4, 2)
    assert tuple(rm.back_buffer.get_at((0, 0))) == RED


def test_flip_image_returns_mirror_and_keeps_original(rm):
    original = _two_tone()
    flipped = rm.flip_image(original)
    assert tuple(flipped.get_at((0, 0))) == BLUE
    assert tuple(original.get_at((0, 0))) == RED
    assert rm.flip_image(None) is None


def test_copy_image_is_independent(rm):
    original = _solid((2, 2), RED[:3])
    copy = rm.copy_image(original)
    copy.fill(GREEN[:3])
    assert tuple(original.get_at((0, 0))) == RED
    assert copy.get_size() == original.get_size()


def test_load_image_round_trip(rm, tmp_path):
    path = tmp_path / "tile.png"
    pygame.image.save(_two_tone(), str(path))
    loaded = rm.load_image(path)
    assert loaded.get_size() == (4, 2)
    assert tuple(loaded.get_at((3, 1)))[:3] == BLUE[:3]


def test_draw_rect_fills_area(rm):
    rm.draw_rect(Vector2(1, 1), 3, 3, (0, 255, 0))
    assert tuple(rm.back_buffer.get_at((1, 1))) == GREEN
    assert tuple(rm.back_buffer.get_at((3, 3))) == GREEN
    assert tuple(rm.back_buffer.get_at((4, 4))) == BLACK


def test_draw_fade_rect_blends(rm):
    rm.back_buffer.fill((255, 255, 255))
    rm.draw_fade_rect(0)
    assert tuple(rm.back_buffer.get_at((0, 0)))[:3] == (255, 255, 255)
    rm.draw_fade_rect(128)
    red = rm.back_buffer.get_at((0, 0)).r
    assert 0 < red < 255
    rm.draw_fade_rect(255)
    assert tuple(rm.back_buffer.get_at((0, 0))) == BLACK


def test_draw_fade_rect_rejects_bad_alpha(rm):
    with pytest.raises(ValueError):
        rm.draw_fade_rect(300)


def test_draw_box_outlines_in_red(rm):
    rm.draw_box(Vector2(2, 2), 6, 6)
    assert tuple(rm.back_buffer.get_at((2, 2))) == RED
    assert tuple(rm.back_buffer.get_at((7, 2))) == RED
    assert tuple(rm.back_buffer.get_at((4, 4))) == BLACK


def test_draw_text_puts_pixels(rm):
    rm.draw_text("Hi", 0, 0)
    lit = [
        rm.back_buffer.get_at((x, y))
        for x in range(32)
        for y in range(16)
        if tuple(rm.back_buffer.get_at((x, y)))[:3] != (0, 0, 0)
    ]
    assert len(lit) > 0


def test_draw_back_to_front_copies(rm):
    rm.draw_rect(Vector2(0, 0), 4, 4, (0, 255, 0))
    rm.screen.fill((0, 0, 0))
    rm.draw_back_to_front()
    assert rm.screen.get_at((1, 1)) == rm.back_buffer.get_at((1, 1))


def test_release_forgets_buffers(rm):
    rm.release()
    with pytest.raises(RuntimeError):
        rm.draw_background()