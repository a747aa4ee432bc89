"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WIDTH = 256
DEFAULT_HEIGHT = 256
CHANNELS = 3


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} out of range: {value}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)
