"""Base class that allows exactly one live instance per subclass."""

from __future__ import annotations

from typing import Any, TypeVar

_T = TypeVar("_T", bound="Singleton")


class Singleton:
    """Inherit from this to make a class a singleton.

    Constructing the class registers the new object as the instance;
    constructing it a second time raises ``RuntimeError``.
    """

    _instance: Singleton | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._instance = None

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls._instance is not None:
            raise RuntimeError(f"{cls.__name__} instance already created")
        instance = super().__new__(cls)
        cls._instance = instance
        return instance

    @classmethod
    def get(cls: type[_T]) -> _T:
        """Return the registered instance."""
        if cls._instance is None:
            raise RuntimeError(f"{cls.__name__} instance not created")
        return cls._instance  # type: ignore[return-value]

    @classmethod
    def clear_instance(cls) -> None:
        """Forget the registered instance so a new one may be created."""
        cls._instance = None

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")