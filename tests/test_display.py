"""Tests for the display backends."""

import io
import logging

import pytest

from pdu_lib.display import (
    Channel,
    Color,
    FrameBufferDisplay,
    MemoryDisplay,
    PixelOutOfRange,
    ScreenInfo,
)

# 4x2 RGB565 panel
RGB565 = ScreenInfo(
    width=4,
    height=2,
    line_length=8,
    bits_per_pixel=16,
    red=Channel(offset=11, length=5),
    green=Channel(offset=5, length=6),
    blue=Channel(offset=0, length=5),
)


@pytest.fixture
def device():
    return io.BytesIO(bytes(16))


class TestColor:
    def test_intensities(self):
        assert Color(1, 2, 3).intensities() == (1, 2, 3)

    def test_validation(self):
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color(0, 0, 0, opacity=1.5)


class TestFrameBufferDisplay:
    def test_dimensions(self, device):
        assert FrameBufferDisplay(device, RGB565).dimensions() == (4, 2)

    def test_logs_geometry(self, device, caplog):
        with caplog.at_level(logging.INFO):
            FrameBufferDisplay(device, RGB565)
        assert "w:4, h:2, line_length:8, bytespp:2" in caplog.text

    def test_packs_channels(self, device):
        display = FrameBufferDisplay(device, RGB565)
        display.write_pixel(1, 0, Color(255, 255, 255))
        display.write_pixel(0, 1, Color(255, 0, 0))
        frame = display.frame
        assert frame[2:4] == b"\xff\xff"
        assert frame[8:10] == b"\x00\xf8"

    def test_skips_translucent_pixels(self, device):
        display = FrameBufferDisplay(device, RGB565)
        display.write_pixel(0, 0, Color(255, 255, 255, opacity=0.5))
        assert display.frame == bytes(16)

    def test_flush_writes_frame(self, device):
        display = FrameBufferDisplay(device, RGB565)
        display.write_pixel(3, 1, Color(0, 0, 255))
        assert device.getvalue() == bytes(16)
        display.flush()
        assert device.getvalue() == display.frame
        assert device.getvalue()[14:16] == b"\x1f\x00"

    @pytest.mark.parametrize("x, y", [(4, 0), (0, 2), (-1, 0), (100, 100)])
    def test_out_of_range_write_is_reported(self, device, x, y):
        display = FrameBufferDisplay(device, RGB565)
        with pytest.raises(PixelOutOfRange) as excinfo:
            display.write_pixel(x, y, Color(255, 255, 255))
        assert isinstance(excinfo.value, IndexError)
        assert (excinfo.value.x, excinfo.value.y) == (x, y)

    def test_context_manager_closes_device(self, device):
        with FrameBufferDisplay(device, RGB565):
            pass
        assert device.closed


class TestMemoryDisplay:
    def test_fixed_dimensions(self):
        assert MemoryDisplay().dimensions() == (128, 160)
        assert MemoryDisplay(scale=3).dimensions() == (128, 160)

    def test_pixels_visible_after_flush(self):
        display = MemoryDisplay()
        display.write_pixel(5, 7, Color(10, 20, 30))
        assert display.pixel(5, 7) == (0, 0, 0)
        display.flush()
        assert display.pixel(5, 7) == (10, 20, 30)

    def test_ignores_opacity(self):
        display = MemoryDisplay()
        display.write_pixel(0, 0, Color(1, 2, 3, opacity=0.0))
        display.flush()
        assert display.pixel(0, 0) == (1, 2, 3)

    def test_clips_outside_window(self):
        display = MemoryDisplay()
        display.write_pixel(128, 0, Color(255, 255, 255))
        display.flush()
        assert display.surface == bytes(128 * 160 * 3)

    def test_scale_fills_block(self):
        display = MemoryDisplay(scale=2)
        display.write_pixel(1, 1, Color(9, 8, 7))
        display.flush()
        stride = 128 * 2 * 3
        surface = display.surface
        assert len(surface) == stride * 160 * 2
        for row in (2, 3):
            start = row * stride + 2 * 3
            assert surface[start : start + 6] == bytes([9, 8, 7, 9, 8, 7])
        assert surface[stride * 4 + 6 : stride * 4 + 9] == b"\x00\x00\x00"

    def test_invalid_scale(self):
        with pytest.raises(ValueError):
            MemoryDisplay(scale=0)
