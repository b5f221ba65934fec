"""Reference inverse filter used to check that encoded streams round-trip."""
from __future__ import annotations

from typing import List, Sequence


def _predictor(a: int, b: int, c: int) -> int:
    p = a + b - c
    pa, pb, pc = abs(p - a), abs(p - b), abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def unfilter_scanline(
    filter_type: int, filtered: Sequence[int], previous: Sequence[int], pixelsize: int
) -> List[int]:
    recon: List[int] = []
    for i, x in enumerate(filtered):
        a = recon[i - pixelsize] if i >= pixelsize else 0
        b = previous[i]
        c = previous[i - pixelsize] if i >= pixelsize else 0
        if filter_type == 0:
            value = x
        elif filter_type == 1:
            value = x + a
        elif filter_type == 2:
            value = x + b
        elif filter_type == 3:
            value = x + (a + b) // 2
        elif filter_type == 4:
            value = x + _predictor(a, b, c)
        else:
            raise ValueError(f"Unknown filter type: {filter_type}")
        recon.append(value & 0xFF)
    return recon


def unfilter_stream(stream: bytes, row_bytes: int, height: int, pixelsize: int) -> List[List[int]]:
    """Split a pixel stream into rows and undo each row's filter."""
    rows: List[List[int]] = []
    previous = [0] * row_bytes
    offset = 0
    for _ in range(height):
        filter_type = stream[offset]
        body = stream[offset + 1 : offset + 1 + row_bytes]
        offset += 1 + row_bytes
        previous = unfilter_scanline(filter_type, body, previous, pixelsize)
        rows.append(previous)
    if offset != len(stream):
        raise ValueError(f"Stream has {len(stream) - offset} trailing bytes")
    return rows
