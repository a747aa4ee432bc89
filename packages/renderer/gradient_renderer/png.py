"""PNG encoding for RGB pixel buffers."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

import numpy as np
from PIL import Image

_log = logging.getLogger("gradient.renderer")


class ImageWriteError(Exception):
    """Raised when a pixel buffer cannot be encoded or written to disk."""


def _to_image(buffer: np.ndarray) -> Image.Image:
    if buffer.ndim != 3 or buffer.shape[2] != 3 or buffer.dtype != np.uint8:
        raise ValueError(f"Expected an (H, W, 3) uint8 buffer, got {buffer.shape} {buffer.dtype}")
    return Image.fromarray(buffer)


def encode_png(buffer: np.ndarray) -> bytes:
    buf = BytesIO()
    _to_image(buffer).save(buf, format="PNG")
    return buf.getvalue()


def save_png(buffer: np.ndarray, path: str | Path) -> Path:
    """Write ``buffer`` as an 8-bit RGB PNG, replacing any existing file.

    Every failure, whether the path is unwritable or encoding fails, is
    raised as :class:`ImageWriteError` chained to the original exception.
    """
    path = Path(path)
    try:
        _to_image(buffer).save(path, format="PNG")
    except (OSError, ValueError) as exc:
        raise ImageWriteError(str(exc)) from exc
    _log.info("image saved to %s", path, extra={"event": "image_saved"})
    return path
