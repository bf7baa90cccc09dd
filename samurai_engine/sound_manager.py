"""Background music and sound effects through pygame's mixer."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from samurai_engine.singleton import Singleton

MAX_CHANNELS = 512


class SoundManager(Singleton):
    """Plays one looping background track and one effect at a time."""

    def __init__(self) -> None:
        self._initialised = False
        self._bgm_sound: pygame.mixer.Sound | None = None
        self._sfx_sound: pygame.mixer.Sound | None = None
        self._bgm_channel: pygame.mixer.Channel | None = None
        self._sfx_channel: pygame.mixer.Channel | None = None
        self._bgm_path: str | None = None
        self._sfx_path: str | None = None

    def init(self) -> None:
        """Start the mixer."""
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.set_num_channels(MAX_CHANNELS)
        self._initialised = True

    def release(self) -> None:
        """Stop everything, drop loaded sounds and shut the mixer down."""
        if self._initialised:
            self.stop_all()
        self._bgm_sound = None
        self._sfx_sound = None
        self._bgm_channel = None
        self._sfx_channel = None
        self._bgm_path = None
        self._sfx_path = None
        if self._initialised and pygame.mixer.get_init():
            pygame.mixer.quit()
        self._initialised = False

    @property
    def bgm_path(self) -> str | None:
        """Path of the loaded background track."""
        return self._bgm_path

    @property
    def sfx_path(self) -> str | None:
        """Path of the most recently played effect."""
        return self._sfx_path

    @property
    def bgm_playing(self) -> bool:
        return self._bgm_channel is not None and self._bgm_channel.get_busy()

    @property
    def sfx_playing(self) -> bool:
        return self._sfx_channel is not None and self._sfx_channel.get_busy()

    def play_bgm(self, path: str | os.PathLike) -> None:
        """Replace the background track with ``path`` and loop it forever."""
        sound = self._load(path)
        if self._bgm_channel is not None:
            self._bgm_channel.stop()
        self._bgm_sound = sound
        self._bgm_path = os.fspath(path)
        self._bgm_channel = sound.play(loops=-1)

    def stop_bgm(self) -> None:
        if self._bgm_channel is not None:
            self._bgm_channel.stop()

    def play_sfx(self, path: str | os.PathLike) -> None:
        """Play ``path`` once, replacing the previous effect."""
        sound = self._load(path)
        self._sfx_sound = sound
        self._sfx_path = os.fspath(path)
        self._sfx_channel = sound.play()

    def stop_sfx(self) -> None:
        if self._sfx_channel is not None:
            self._sfx_channel.stop()

    def stop_all(self) -> None:
        """Stop both background music and effects."""
        self.stop_bgm()
        self.stop_sfx()

    def _load(self, path: str | os.PathLike) -> pygame.mixer.Sound:
        if not self._initialised:
            raise RuntimeError("SoundManager.init() must be called first")
        if not Path(path).is_file():
            raise FileNotFoundError(os.fspath(path))
        return pygame.mixer.Sound(os.fspath(path))