"""A scene owns a list of game objects and drives them each frame."""

from __future__ import annotations

from typing import Callable, Iterator, TypeVar

from samurai_engine.game_object import GameObject

_O = TypeVar("_O", bound=GameObject)


class Scene:
    """A collection of game objects that start, update and render together."""

    def __init__(self) -> None:
        self._objects: list[GameObject] = []

    def create_object(self, factory: Callable[[], _O]) -> _O:
        """Build an object with ``factory``, register it and return it."""
        obj = factory()
        self._objects.append(obj)
        return obj

    def delete_object(self, obj: GameObject) -> None:
        """Remove a registered object; raise ``ValueError`` if it is absent."""
        for index, candidate in enumerate(self._objects):
            if candidate is obj:
                del self._objects[index]
                return
        raise ValueError("object is not registered in this scene")

    def clear(self) -> None:
        """Remove every object from the scene."""
        self._objects.clear()

    def start(self) -> None:
        for obj in list(self._objects):
            obj.start()

    def update(self) -> None:
        for obj in list(self._objects):
            obj.update()

    def render(self) -> None:
        for obj in list(self._objects):
            obj.render()

    def exit(self) -> None:
        """Leave the scene, dropping all of its objects."""
        self.clear()

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(list(self._objects))