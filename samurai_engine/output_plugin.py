"""Description and runtime state of a custom audio output plugin."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional

PLUGIN_VERSION = 5

Callback = Optional[Callable[..., Any]]


class OutputMethod(IntEnum):
    """How the plugin obtains mixed audio."""

    MIX_DIRECT = 0
    MIX_BUFFERED = 1


@dataclass
class Object3DInfo:
    """Audio and placement of one hardware 3D object."""

    buffer: list[float] = field(default_factory=list)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    gain: float = 0.0
    spread: float = 0.0
    priority: float = 0.0

    def __post_init__(self) -> None:
        self.buffer = [float(v) for v in self.buffer]
        position = tuple(float(v) for v in self.position)
        if len(position) != 3:
            raise ValueError("position must have exactly three components")
        self.position = position  # type: ignore[assignment]

    @property
    def buffer_length(self) -> int:
        """Number of samples in the buffer."""
        return len(self.buffer)


@dataclass
class OutputDescription:
    """What an output plugin is called and which callbacks it provides."""

    name: str
    version: int = 0
    method: OutputMethod = OutputMethod.MIX_DIRECT
    api_version: int = PLUGIN_VERSION
    get_num_drivers: Callback = None
    get_driver_info: Callback = None
    init: Callback = None
    start: Callback = None
    stop: Callback = None
    close: Callback = None
    update: Callback = None
    get_handle: Callback = None
    mixer: Callback = None
    object3d_get_info: Callback = None
    object3d_alloc: Callback = None
    object3d_free: Callback = None
    object3d_update: Callback = None
    open_port: Callback = None
    close_port: Callback = None
    device_list_changed: Callback = None

    def __post_init__(self) -> None:
        self.method = OutputMethod(self.method)


def _caller() -> tuple[str, int]:
    frame = inspect.currentframe()
    try:
        target = frame.f_back.f_back if frame is not None and frame.f_back else None
        if target is None:
            return "", 0
        return target.f_code.co_filename, target.f_lineno
    finally:
        del frame


@dataclass
class OutputState:
    """Services the audio system hands to a running output plugin."""

    plugin_data: Any = None
    read_from_mixer_func: Callback = None
    alloc_func: Callback = None
    free_func: Callback = None
    log_func: Callback = None
    copy_port_func: Callback = None
    request_reset_func: Callback = None

    @staticmethod
    def _require(func: Callback, name: str) -> Callable[..., Any]:
        if func is None:
            raise RuntimeError(f"no {name} callback is set")
        return func

    def read_from_mixer(self, buffer: Any, length: int) -> Any:
        """Ask the mixer to fill ``buffer`` with ``length`` samples."""
        func = self._require(self.read_from_mixer_func, "read_from_mixer")
        return func(self, buffer, length)

    def alloc(self, size: int, align: int) -> Any:
        """Allocate memory, reporting the caller's file and line."""
        func = self._require(self.alloc_func, "alloc")
        filename, line = _caller()
        return func(size, align, filename, line)

    def free(self, ptr: Any) -> Any:
        """Free memory, reporting the caller's file and line."""
        func = self._require(self.free_func, "free")
        filename, line = _caller()
        return func(ptr, filename, line)

    def log(self, level: Any, location: str, fmt: str, *args: Any) -> Any:
        """Write a log message, reporting the caller's file and line."""
        func = self._require(self.log_func, "log")
        filename, line = _caller()
        return func(level, filename, line, location, fmt, *args)

    def copy_port(self, port_id: int, buffer: Any, length: int) -> Any:
        """Copy ``length`` samples of port ``port_id`` into ``buffer``."""
        func = self._require(self.copy_port_func, "copy_port")
        return func(self, port_id, buffer, length)

    def request_reset(self) -> Any:
        """Ask the audio system to reset the output."""
        func = self._require(self.request_reset_func, "request_reset")
        return func(self)