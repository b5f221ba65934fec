"""
Scanline filters.

Each filter maps a raw scanline to a same-length byte row, using the raw
bytes of the scanline above as context. For byte ``i``:

* ``a`` is the byte one pixel to the left in the current row,
* ``b`` is the byte directly above,
* ``c`` is the byte one pixel to the left in the row above,

with 0 substituted where the neighbour falls outside the image. All output
arithmetic wraps modulo 256.
"""
from __future__ import annotations

from typing import Callable

import numpy as np

from .constants import FilterType
from .errors import UnknownFilterType


def _as_bytes(data) -> np.ndarray:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)
    return np.asarray(data, dtype=np.uint8).reshape(-1)


def _context(raw, previous, pixelsize: int):
    """Return raw, a, b, c as int16 arrays for vectorized arithmetic."""
    if pixelsize < 1:
        raise ValueError(f"pixelsize must be positive, got {pixelsize}")
    cur = _as_bytes(raw).astype(np.int16)
    if previous is None:
        above = np.zeros_like(cur)
    else:
        above = _as_bytes(previous).astype(np.int16)
        if above.shape != cur.shape:
            raise ValueError(
                f"Previous scanline has {above.size} bytes, expected {cur.size}"
            )
    left = np.zeros_like(cur)
    left[pixelsize:] = cur[:-pixelsize] if pixelsize < cur.size else cur[:0]
    upper_left = np.zeros_like(cur)
    upper_left[pixelsize:] = above[:-pixelsize] if pixelsize < cur.size else above[:0]
    return cur, left, above, upper_left


def _wrap(values: np.ndarray) -> np.ndarray:
    return (values & 0xFF).astype(np.uint8)


def paeth_predictor(a: int, b: int, c: int) -> int:
    """Pick whichever of left, above, upper-left is closest to a + b - c."""
    p = a + b - c
    pa = abs(p - a)
    pb = abs(p - b)
    pc = abs(p - c)
    # ties resolve a, then b, then c
    if pa <= pb and pa <= pc:
        return a
    elif pb <= pc:
        return b
    return c


def _paeth_predictors(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    p = a + b - c
    pa = np.abs(p - a)
    pb = np.abs(p - b)
    pc = np.abs(p - c)
    return np.where((pa <= pb) & (pa <= pc), a, np.where(pb <= pc, b, c))


def filter_none(raw, previous=None, pixelsize: int = 1) -> np.ndarray:
    return _as_bytes(raw).copy()


def filter_sub(raw, previous=None, pixelsize: int = 1) -> np.ndarray:
    cur, a, _, _ = _context(raw, previous, pixelsize)
    return _wrap(cur - a)


def filter_up(raw, previous=None, pixelsize: int = 1) -> np.ndarray:
    cur, _, b, _ = _context(raw, previous, pixelsize)
    return _wrap(cur - b)


def filter_average(raw, previous=None, pixelsize: int = 1) -> np.ndarray:
    cur, a, b, _ = _context(raw, previous, pixelsize)
    return _wrap(cur - ((a + b) >> 1))


def filter_paeth(raw, previous=None, pixelsize: int = 1) -> np.ndarray:
    cur, a, b, c = _context(raw, previous, pixelsize)
    return _wrap(cur - _paeth_predictors(a, b, c))


_FILTERS: dict[FilterType, Callable[..., np.ndarray]] = {
    FilterType.NONE: filter_none,
    FilterType.SUB: filter_sub,
    FilterType.UP: filter_up,
    FilterType.AVERAGE: filter_average,
    FilterType.PAETH: filter_paeth,
}


def to_filter_type(value) -> FilterType:
    if isinstance(value, FilterType):
        return value
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        try:
            return FilterType(int(value))
        except ValueError:
            pass
    raise UnknownFilterType(value)


def apply_filter(filter_type, raw, previous=None, pixelsize: int = 1) -> np.ndarray:
    """Transform ``raw`` with one filter; the tag byte is not included."""
    return _FILTERS[to_filter_type(filter_type)](raw, previous, pixelsize)


def filter_scanline(filter_type, raw, previous=None, pixelsize: int = 1) -> np.ndarray:
    """Filtered scanline prefixed with its one-byte filter tag."""
    filter_type = to_filter_type(filter_type)
    body = _FILTERS[filter_type](raw, previous, pixelsize)
    return np.concatenate([np.array([filter_type], dtype=np.uint8), body])


def _signed_cost(filtered: np.ndarray) -> int:
    signed = filtered.astype(np.int8).astype(np.int64)
    return int(np.abs(signed).sum())


def select_filter(raw, previous=None, pixelsize: int = 1) -> tuple[FilterType, np.ndarray]:
    """
    Pick the filter whose output has the smallest sum of absolute values,
    reading each output byte as a signed int8. Ties go to the lowest tag.

    Returns the chosen filter and its output (without the tag byte).
    """
    best_type = FilterType.NONE
    best_bytes = None
    best_cost = None
    for filter_type in FilterType:
        out = _FILTERS[filter_type](raw, previous, pixelsize)
        cost = _signed_cost(out)
        if best_cost is None or cost < best_cost:
            best_type, best_bytes, best_cost = filter_type, out, cost
    return best_type, best_bytes
