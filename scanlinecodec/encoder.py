"""Pixel grid to filtered scanline stream (single forward pass over rows)."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterable, Iterator, Optional

import numpy as np

from . import color
from .constants import BIT_DEPTH, FILTER_ADAPTIVE, ColorMode, FilterType
from .errors import UnencodablePalette
from .filters import filter_scanline, select_filter
from .image import PixelGrid
from .palette import Palette
from .policy import EncodingChoice, coerce_options, resolve_encoding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedImage:
    """Filtered pixel stream plus what the container stage needs to frame it."""

    width: int
    height: int
    color_mode: ColorMode
    pixelstream: bytes = field(repr=False)
    palette: Optional[Palette] = None
    filter_types: tuple[FilterType, ...] = ()
    bit_depth: int = BIT_DEPTH

    @property
    def header(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "color_mode": self.color_mode,
            "bit_depth": self.bit_depth,
        }


def encode_scanline(row, choice: EncodingChoice) -> np.ndarray:
    """Raw bytes of one row of pixels, left to right."""
    return color.encode_pixels(choice.color_mode, row, choice.palette)


def iter_raw_rows(image, choice: EncodingChoice) -> Iterator[np.ndarray]:
    """Yield the raw scanline of every row, top to bottom."""
    grid = PixelGrid.coerce(image)
    for row in grid.rows():
        yield encode_scanline(row, choice)


def for_each_row(
    image, choice: EncodingChoice, visit: Callable[[np.ndarray, int], None]
) -> None:
    for y, raw in enumerate(iter_raw_rows(image, choice)):
        visit(raw, y)


def _check_encodable(grid: PixelGrid, choice: EncodingChoice) -> None:
    if choice.color_mode != ColorMode.INDEXED:
        return
    if choice.palette is None:
        raise UnencodablePalette("Indexed color mode requires a palette")
    if not choice.palette.can_encode(grid.distinct_colors()):
        raise UnencodablePalette("This palette is not suitable for encoding!")


def _filter_step(
    raw: np.ndarray, previous: np.ndarray, pixelsize: int, filter_method
) -> tuple[FilterType, np.ndarray]:
    if filter_method == FILTER_ADAPTIVE:
        filter_type, body = select_filter(raw, previous, pixelsize)
        tagged = np.concatenate([np.array([filter_type], dtype=np.uint8), body])
        return filter_type, tagged
    return filter_method, filter_scanline(filter_method, raw, previous, pixelsize)


def _filter_rows(
    raw_rows: Iterable[np.ndarray], row_bytes: int, pixelsize: int, filter_method
) -> tuple[bytes, tuple[FilterType, ...]]:
    chunks: list[bytes] = []
    chosen: list[FilterType] = []
    previous = np.zeros((row_bytes,), dtype=np.uint8)
    for raw in raw_rows:
        filter_type, filtered = _filter_step(raw, previous, pixelsize, filter_method)
        chunks.append(filtered.tobytes())
        chosen.append(filter_type)
        previous = raw
    return b"".join(chunks), tuple(chosen)


def encode_image(image, options=None, workers: int | None = None) -> EncodedImage:
    """
    Encode ``image`` into a filtered scanline stream.

    ``options`` is an EncodingOptions or a plain mapping of overrides. With
    ``workers > 1`` rows are serialized to raw bytes in a thread pool before
    the sequential filtering pass; the output does not change.
    """
    grid = PixelGrid.coerce(image)
    opts = coerce_options(options)
    choice = resolve_encoding(grid, opts)
    _check_encodable(grid, choice)

    pixelsize = choice.pixelsize
    row_bytes = grid.width * pixelsize
    if workers is not None and workers > 1 and grid.height > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            raw_rows: Iterable[np.ndarray] = list(
                pool.map(partial(encode_scanline, choice=choice), grid.rows())
            )
    else:
        raw_rows = iter_raw_rows(grid, choice)

    stream, filter_types = _filter_rows(raw_rows, row_bytes, pixelsize, opts.filter_method)

    logger.debug(
        "Encoded %dx%d image as %s: %d rows, %d bytes",
        grid.width,
        grid.height,
        choice.color_mode.name,
        grid.height,
        len(stream),
    )
    return EncodedImage(
        width=grid.width,
        height=grid.height,
        color_mode=choice.color_mode,
        pixelstream=stream,
        palette=choice.palette if choice.color_mode == ColorMode.INDEXED else None,
        filter_types=filter_types,
    )


def encode_pixelstream(image, options=None, workers: int | None = None) -> bytes:
    """Concatenated ``tag || filtered bytes`` rows for ``image``."""
    return encode_image(image, options, workers=workers).pixelstream
