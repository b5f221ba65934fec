"""Read-only pixel grid consumed by the encoder."""
from __future__ import annotations

from typing import Iterator

import numpy as np

from .palette import Palette
from .utils import load_image_rgba, pack_rgba


class PixelGrid:
    """
    Rectangular grid of packed ``0xRRGGBBAA`` pixels, indexed ``[y, x]``.

    The grid holds a read-only view; encoding never mutates caller data.
    """

    def __init__(self, pixels) -> None:
        arr = np.asarray(pixels)
        if arr.ndim != 2:
            raise ValueError(f"pixels must have shape (H, W), got {arr.shape}")
        if arr.dtype.kind not in "ui":
            raise ValueError(f"pixels must be integers, got dtype {arr.dtype}")
        if arr.size and (int(arr.min()) < 0 or int(arr.max()) > 0xFFFFFFFF):
            raise ValueError("pixel values must fit in 32 bits (0 to 0xFFFFFFFF)")
        arr = arr.astype(np.uint32, copy=False).view()
        arr.flags.writeable = False
        self._pixels = arr

    @classmethod
    def from_rgba(cls, channels) -> "PixelGrid":
        """Build from uint8 channel data shaped (H, W), (H, W, 3) or (H, W, 4)."""
        return cls(pack_rgba(channels))

    @classmethod
    def from_file(cls, path: str) -> "PixelGrid":
        return cls.from_rgba(load_image_rgba(path))

    @classmethod
    def coerce(cls, image) -> "PixelGrid":
        if isinstance(image, cls):
            return image
        arr = np.asarray(image)
        if arr.dtype == np.uint8:
            return cls.from_rgba(arr)
        return cls(arr)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    def pixel_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        return int(self._pixels[y, x])

    def row(self, y: int) -> np.ndarray:
        return self._pixels[y]

    def rows(self) -> Iterator[np.ndarray]:
        """Yield rows top to bottom."""
        for y in range(self.height):
            yield self._pixels[y]

    def distinct_colors(self) -> frozenset[int]:
        return frozenset(np.unique(self._pixels).tolist())

    def palette(self) -> Palette:
        return Palette.from_pixels(self._pixels)

    def __repr__(self) -> str:
        return f"PixelGrid({self.width}x{self.height})"
