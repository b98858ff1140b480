"""Pixel display primitives used to render decoded messages."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Tuple


class PixelOutOfRange(IndexError):
    """Raised when a pixel write falls outside the display."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        super().__init__(
            f"Pixel x: {x}, y: {y} is outside the bounds of the display "
            f"(w: {width}, h: {height})"
        )


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int
    opacity: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            if not 0 <= getattr(self, name) <= 0xFF:
                raise ValueError(f"{name} intensity must be within 0..255")
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError("opacity must be within [0, 1]")

    def intensities(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue


class Display(abc.ABC):
    """Abstract base class for pixel output backends."""

    @abc.abstractmethod
    def dimensions(self) -> Tuple[int, int]:
        """Return ``(width, height)`` in pixels."""

    @abc.abstractmethod
    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Stage one pixel; nothing is visible before :meth:`flush`."""

    @abc.abstractmethod
    def flush(self) -> None:
        """Commit staged pixels to the output."""

    def contains(self, x: int, y: int) -> bool:
        width, height = self.dimensions()
        return 0 <= x < width and 0 <= y < height


__all__ = ["Color", "Display", "PixelOutOfRange"]
