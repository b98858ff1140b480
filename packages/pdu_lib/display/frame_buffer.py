"""Linux frame-buffer display backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Tuple
import fcntl
import logging
import struct

from .base import Color, Display, PixelOutOfRange

FBIOGET_VSCREENINFO = 0x4600
FBIOGET_FSCREENINFO = 0x4602

# struct fb_var_screeninfo is 40 __u32 fields.
_VAR_FORMAT = "40I"
# struct fb_fix_screeninfo, native alignment.
_FIX_FORMAT = "16sLIIIIHHHILIIHHH"
_FIX_LINE_LENGTH = 9


def _ioctl_struct(device: BinaryIO, request: int, fmt: str) -> Tuple[int, ...]:
    buffer = bytes(struct.calcsize(fmt))
    return struct.unpack(fmt, fcntl.ioctl(device, request, buffer))


@dataclass(frozen=True)
class Channel:
    offset: int
    length: int

    def pack(self, intensity: int) -> int:
        return (intensity >> (8 - self.length)) << self.offset


@dataclass(frozen=True)
class ScreenInfo:
    width: int
    height: int
    line_length: int
    bits_per_pixel: int
    red: Channel
    green: Channel
    blue: Channel

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @classmethod
    def query(cls, device: BinaryIO) -> "ScreenInfo":
        var = _ioctl_struct(device, FBIOGET_VSCREENINFO, _VAR_FORMAT)
        fix = _ioctl_struct(device, FBIOGET_FSCREENINFO, _FIX_FORMAT)
        # var[8:17] holds (offset, length, msb_right) for red, green, blue.
        return cls(
            width=var[0],
            height=var[1],
            line_length=fix[_FIX_LINE_LENGTH],
            bits_per_pixel=var[6],
            red=Channel(var[8], var[9]),
            green=Channel(var[11], var[12]),
            blue=Channel(var[14], var[15]),
        )


class FrameBufferDisplay(Display):
    """Draws into an in-memory frame and writes it to the device on flush."""

    def __init__(
        self,
        device: BinaryIO,
        screen_info: ScreenInfo,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._device = device
        self._info = screen_info
        self._logger = logger or logging.getLogger(__name__)
        self._frame = bytearray(screen_info.line_length * screen_info.height)
        self._logger.info(
            "Started screen device with properties: "
            "w:%s, h:%s, line_length:%s, bytespp:%s",
            screen_info.width,
            screen_info.height,
            screen_info.line_length,
            screen_info.bytes_per_pixel,
        )

    @classmethod
    def open(
        cls, device_path: str = "/dev/fb0", *, logger: logging.Logger | None = None
    ) -> "FrameBufferDisplay":
        device = open(device_path, "r+b", buffering=0)
        try:
            info = ScreenInfo.query(device)
        except OSError:
            device.close()
            raise
        return cls(device, info, logger=logger)

    @property
    def frame(self) -> bytes:
        return bytes(self._frame)

    def dimensions(self) -> Tuple[int, int]:
        return self._info.width, self._info.height

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        # Only fully opaque pixels reach the panel.
        if color.opacity != 1.0:
            return
        if not self.contains(x, y):
            raise PixelOutOfRange(x, y, self._info.width, self._info.height)
        red, green, blue = color.intensities()
        pixel = (
            self._info.red.pack(red)
            | self._info.green.pack(green)
            | self._info.blue.pack(blue)
        )
        index = y * self._info.line_length + x * self._info.bytes_per_pixel
        size = self._info.bytes_per_pixel
        pixel &= (1 << (8 * size)) - 1
        self._frame[index : index + size] = pixel.to_bytes(size, "little")

    def flush(self) -> None:
        self._device.seek(0)
        self._device.write(self._frame)
        self._device.flush()

    def close(self) -> None:
        self._device.close()

    def __enter__(self) -> "FrameBufferDisplay":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["Channel", "FrameBufferDisplay", "ScreenInfo"]
