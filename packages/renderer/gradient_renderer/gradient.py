"""Coordinate gradient fill for RGB pixel buffers."""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
from PIL import Image

from .models import CHANNELS, DEFAULT_HEIGHT, DEFAULT_WIDTH, Color
from .png import save_png

# 255.999 keeps 1.0 at 255 after truncation without ever reaching 256.
QUANT_SCALE = 255.999
BLUE_LEVEL = 0.25

_log = logging.getLogger("gradient.renderer")


def _check_dimensions(width: int, height: int) -> None:
    if width < 2 or height < 2:
        raise ValueError(f"Image dimensions must be at least 2x2, got {width}x{height}")


def quantize(channel: float) -> int:
    return int(math.floor(channel * QUANT_SCALE))


def gradient_color(x: int, y: int, width: int, height: int) -> Color:
    _check_dimensions(width, height)
    r = x / (width - 1)
    g = y / (height - 1)
    return Color(quantize(r), quantize(g), quantize(BLUE_LEVEL))


def new_pixel_buffer(width: int, height: int) -> np.ndarray:
    _check_dimensions(width, height)
    return np.zeros((height, width, CHANNELS), dtype=np.uint8)


def fill_gradient(buffer: np.ndarray) -> None:
    """Overwrite every pixel of ``buffer`` with its gradient color.

    ``buffer`` is indexed ``[y, x, channel]``. Red follows x, green follows y
    and blue is constant. Values match :func:`gradient_color` exactly.
    """
    if buffer.ndim != 3 or buffer.shape[2] != CHANNELS or buffer.dtype != np.uint8:
        raise ValueError(f"Expected an (H, W, 3) uint8 buffer, got {buffer.shape} {buffer.dtype}")
    height, width = buffer.shape[:2]
    _check_dimensions(width, height)

    red = np.floor(np.arange(width, dtype=np.float64) / (width - 1) * QUANT_SCALE).astype(np.uint8)
    green = np.floor(np.arange(height, dtype=np.float64) / (height - 1) * QUANT_SCALE).astype(np.uint8)

    buffer[:, :, 0] = red[np.newaxis, :]
    buffer[:, :, 1] = green[:, np.newaxis]
    buffer[:, :, 2] = quantize(BLUE_LEVEL)


class GradientRenderer:
    """Renders the coordinate gradient and persists it as PNG."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        _check_dimensions(width, height)
        self.width = width
        self.height = height

    def render(self) -> np.ndarray:
        _log.info("render started", extra={"event": "render_started"})
        buffer = new_pixel_buffer(self.width, self.height)
        fill_gradient(buffer)
        _log.info("gradient filled %dx%d", self.width, self.height, extra={"event": "render_filled"})
        return buffer

    def render_image(self) -> Image.Image:
        return Image.fromarray(self.render())

    def save(self, path: str | Path) -> Path:
        return save_png(self.render(), path)
