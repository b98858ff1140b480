"""Fixed-size in-memory display for development without panel hardware."""

from __future__ import annotations

from typing import Tuple
import logging

from .base import Color, Display

WIDTH = 128
HEIGHT = 160


class MemoryDisplay(Display):
    """A 128x160 RGB surface; each pixel covers ``scale`` x ``scale`` cells.

    Opacity is ignored and writes outside the window are clipped.
    """

    def __init__(self, scale: int = 1, *, logger: logging.Logger | None = None):
        if scale < 1:
            raise ValueError("scale must be a positive integer")
        self._scale = scale
        self._logger = logger or logging.getLogger(__name__)
        self._stride = WIDTH * scale * 3
        self._pending = bytearray(self._stride * HEIGHT * scale)
        self._surface = bytes(self._pending)
        self._flushes = 0

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def surface(self) -> bytes:
        """RGB bytes as of the last :meth:`flush`, scaled rows first."""
        return self._surface

    def dimensions(self) -> Tuple[int, int]:
        return WIDTH, HEIGHT

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        if not self.contains(x, y):
            return
        rgb = bytes(color.intensities()) * self._scale
        for row in range(y * self._scale, (y + 1) * self._scale):
            start = row * self._stride + x * self._scale * 3
            self._pending[start : start + len(rgb)] = rgb

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        start = y * self._scale * self._stride + x * self._scale * 3
        red, green, blue = self._surface[start : start + 3]
        return red, green, blue

    def flush(self) -> None:
        self._surface = bytes(self._pending)
        self._flushes += 1
        self._logger.debug("Memory display flushed (%d)", self._flushes)


__all__ = ["HEIGHT", "MemoryDisplay", "WIDTH"]
