"""Holds every scene of the game and drives the current one."""

from __future__ import annotations

from typing import Callable, TypeVar

from samurai_engine.scene import Scene
from samurai_engine.singleton import Singleton

_S = TypeVar("_S", bound=Scene)


class SceneManager(Singleton):
    """Registry of scenes with deferred scene switching."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []
        self._current: Scene | None = None
        self._next: Scene | None = None

    def init(self) -> None:
        """Start the current scene, if one is set."""
        if self._current is not None:
            self._current.start()

    def update(self) -> None:
        """Apply a pending scene change, then update the current scene."""
        if self._next is not None:
            if self._current is not None:
                self._current.exit()
            self._current = self._next
            self._next = None
            self._current.start()

        if self._current is not None:
            self._current.update()

    def render(self) -> None:
        if self._current is not None:
            self._current.render()

    def release(self) -> None:
        """Drop every registered scene."""
        self._scenes.clear()
        self._current = None
        self._next = None

    def create_scene(self, factory: Callable[[], _S]) -> _S:
        """Build a scene with ``factory``, register it and return it."""
        scene = factory()
        self._scenes.append(scene)
        return scene

    def _scene_at(self, index: int) -> Scene | None:
        if 0 <= index < len(self._scenes):
            return self._scenes[index]
        return None

    def set_current_scene(self, index: int) -> None:
        """Make the scene at ``index`` current; out-of-range indices are ignored."""
        scene = self._scene_at(index)
        if scene is not None:
            self._current = scene

    def current_scene(self) -> Scene | None:
        return self._current

    def change_scene(self, index: int) -> None:
        """Switch to the scene at ``index`` on the next update; out-of-range indices are ignored."""
        scene = self._scene_at(index)
        if scene is not None:
            self._next = scene