"""Palette of distinct colors with reverse lookup for indexed encoding."""
from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from . import color
from .constants import MAX_PALETTE_SIZE, ColorMode
from .errors import UnencodablePixel


def _check_pixel(pixel) -> int:
    if isinstance(pixel, (bool, np.bool_)) or not isinstance(pixel, (int, np.integer)):
        raise ValueError(f"Palette colors must be integers, got {pixel!r}")
    pixel = int(pixel)
    if not 0 <= pixel <= 0xFFFFFFFF:
        raise ValueError(f"Palette color {pixel} does not fit in 32 bits")
    return pixel


class Palette:
    """
    Ordered, deduplicated set of pixel values.

    The position of a color in the palette is its index in an indexed-mode
    scanline. Colors keep the order in which they were first given.
    """

    def __init__(self, colors: Iterable[int] = ()) -> None:
        seen: dict[int, int] = {}
        for pixel in colors:
            pixel = _check_pixel(pixel)
            if pixel not in seen:
                seen[pixel] = len(seen)
        self._index = seen
        self._colors = np.fromiter(seen.keys(), dtype=np.uint32, count=len(seen))
        self._order = np.argsort(self._colors, kind="stable")
        self._sorted = self._colors[self._order]

    @classmethod
    def from_pixels(cls, pixels) -> "Palette":
        """Palette of every distinct color in ``pixels``, ascending by value."""
        return cls(np.unique(np.asarray(pixels, dtype=np.uint32)).tolist())

    @property
    def colors(self) -> tuple[int, ...]:
        return tuple(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[int]:
        return iter(self._index)

    def __contains__(self, pixel) -> bool:
        return int(pixel) in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self.colors == other.colors

    def __hash__(self) -> int:
        return hash(self.colors)

    def __repr__(self) -> str:
        return f"Palette({len(self)} colors)"

    def distinct_colors(self) -> frozenset[int]:
        return frozenset(self._index)

    def index_of(self, pixel) -> int | None:
        return self._index.get(int(pixel))

    def indices(self, pixels) -> np.ndarray:
        """Palette index of every pixel, as a flat uint8 array."""
        px = np.asarray(pixels, dtype=np.uint32).reshape(-1)
        if len(self) == 0:
            if px.size:
                raise UnencodablePixel(px[0])
            return np.zeros((0,), dtype=np.uint8)
        pos = np.searchsorted(self._sorted, px)
        pos = np.minimum(pos, len(self._sorted) - 1)
        missing = self._sorted[pos] != px
        if missing.any():
            raise UnencodablePixel(px[np.argmax(missing)])
        idx = self._order[pos]
        # indexed scanlines hold one byte per pixel
        if idx.max(initial=0) >= MAX_PALETTE_SIZE:
            raise UnencodablePixel(px[np.argmax(idx >= MAX_PALETTE_SIZE)])
        return idx.astype(np.uint8)

    def is_opaque(self) -> bool:
        return bool(np.all(color.is_opaque(self._colors)))

    def is_grayscale(self) -> bool:
        return bool(np.all(color.is_achromatic(self._colors)))

    def is_indexable(self) -> bool:
        return len(self) <= MAX_PALETTE_SIZE

    def can_encode(self, colors: Iterable[int] | None = None) -> bool:
        """
        Whether an indexed scanline can be produced with this palette.

        When ``colors`` is given every one of them must have an index.
        """
        if not self.is_indexable():
            return False
        if colors is None:
            return True
        return all(int(pixel) in self._index for pixel in colors)

    def best_color_mode(self) -> ColorMode:
        """Most compact lossless color mode for the colors in this palette."""
        if len(self) == 0:
            return ColorMode.TRUECOLOR
        opaque = self.is_opaque()
        if self.is_grayscale():
            return ColorMode.GRAYSCALE if opaque else ColorMode.GRAYSCALE_ALPHA
        if opaque and self.is_indexable():
            return ColorMode.INDEXED
        return ColorMode.TRUECOLOR if opaque else ColorMode.TRUECOLOR_ALPHA
