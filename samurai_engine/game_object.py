"""Abstract base for everything that lives in a scene."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GameObject(ABC):
    """An entity driven by its scene through start, update and render."""

    @abstractmethod
    def start(self) -> None:
        """Called when the owning scene starts."""

    @abstractmethod
    def update(self) -> None:
        """Called once per frame to advance state."""

    @abstractmethod
    def render(self) -> None:
        """Called once per frame to draw."""