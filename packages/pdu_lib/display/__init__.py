"""Display backends that render decoded messages."""

from __future__ import annotations

from .base import Color, Display, PixelOutOfRange
from .frame_buffer import Channel, FrameBufferDisplay, ScreenInfo
from .memory import MemoryDisplay

__all__ = [
    "Channel",
    "Color",
    "Display",
    "FrameBufferDisplay",
    "MemoryDisplay",
    "PixelOutOfRange",
    "ScreenInfo",
]
