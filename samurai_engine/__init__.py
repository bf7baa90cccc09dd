"""A small 2D game engine on pygame: scenes, game objects, timing, rendering, sound and audio constants."""

__version__ = "0.1.0"