"""Renderer package for the coordinate gradient image."""

from .gradient import GradientRenderer, fill_gradient, gradient_color, new_pixel_buffer, quantize
from .models import DEFAULT_HEIGHT, DEFAULT_WIDTH, Color
from .png import ImageWriteError, encode_png, save_png

__all__ = [
    "Color",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "GradientRenderer",
    "ImageWriteError",
    "encode_png",
    "fill_gradient",
    "gradient_color",
    "new_pixel_buffer",
    "quantize",
    "save_png",
]
