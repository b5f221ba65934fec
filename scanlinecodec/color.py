"""Pixel values and their byte layout under each color mode.

Pixels are packed 32-bit integers, ``0xRRGGBBAA``. Every helper here accepts
either a single Python int or a numpy array of ``uint32`` pixels.
"""
from __future__ import annotations

import numpy as np

from .constants import MAX_PALETTE_SIZE, ColorMode
from .errors import UnencodablePalette, UnencodablePixel, UnsupportedColorMode

_BYTESIZE = {
    ColorMode.GRAYSCALE: 1,
    ColorMode.GRAYSCALE_ALPHA: 2,
    ColorMode.TRUECOLOR: 3,
    ColorMode.TRUECOLOR_ALPHA: 4,
    ColorMode.INDEXED: 1,
}


def rgba(r: int, g: int, b: int, a: int = 255) -> int:
    return ((r & 0xFF) << 24) | ((g & 0xFF) << 16) | ((b & 0xFF) << 8) | (a & 0xFF)


def r(pixel):
    return (pixel >> 24) & 0xFF


def g(pixel):
    return (pixel >> 16) & 0xFF


def b(pixel):
    return (pixel >> 8) & 0xFF


def a(pixel):
    return pixel & 0xFF


def is_opaque(pixel):
    return a(pixel) == 0xFF


def is_achromatic(pixel):
    """True where red, green and blue are equal."""
    return (r(pixel) == g(pixel)) & (g(pixel) == b(pixel))


def luminance(pixel):
    """Integer Rec.601 luma; exact for achromatic pixels."""
    return (299 * r(pixel) + 587 * g(pixel) + 114 * b(pixel) + 500) // 1000


def to_color_mode(value) -> ColorMode:
    """Coerce an enum member, header number or member name to a ColorMode."""
    if isinstance(value, ColorMode):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise UnsupportedColorMode(value)
    if isinstance(value, (int, np.integer)):
        try:
            return ColorMode(int(value))
        except ValueError:
            raise UnsupportedColorMode(value) from None
    if isinstance(value, str):
        try:
            return ColorMode[value.strip().upper()]
        except KeyError:
            raise UnsupportedColorMode(value) from None
    raise UnsupportedColorMode(value)


def bytesize(mode) -> int:
    """Bytes used by one pixel in ``mode``."""
    return _BYTESIZE[to_color_mode(mode)]


def encode_pixel(mode, pixel: int, palette=None) -> bytes:
    """Encode a single pixel as the byte sequence ``mode`` prescribes."""
    mode = to_color_mode(mode)
    pixel = int(pixel)
    if mode == ColorMode.TRUECOLOR:
        return bytes((r(pixel), g(pixel), b(pixel)))
    elif mode == ColorMode.TRUECOLOR_ALPHA:
        return bytes((r(pixel), g(pixel), b(pixel), a(pixel)))
    elif mode == ColorMode.GRAYSCALE:
        return bytes((luminance(pixel),))
    elif mode == ColorMode.GRAYSCALE_ALPHA:
        return bytes((luminance(pixel), a(pixel)))
    elif mode == ColorMode.INDEXED:
        if palette is None:
            raise UnencodablePalette("Indexed color mode requires a palette")
        index = palette.index_of(pixel)
        if index is None or index >= MAX_PALETTE_SIZE:
            raise UnencodablePixel(pixel)
        return bytes((index,))
    raise UnsupportedColorMode(mode)


def encode_pixels(mode, pixels, palette=None) -> np.ndarray:
    """
    Vectorized ``encode_pixel`` over a 1-D run of pixels.

    Returns a flat uint8 array of ``len(pixels) * bytesize(mode)`` bytes,
    pixel-major, identical to concatenating ``encode_pixel`` results.
    """
    mode = to_color_mode(mode)
    px = np.asarray(pixels, dtype=np.uint32).reshape(-1)
    # big-endian view puts the channels in R, G, B, A column order
    channels = px.astype(">u4").view(np.uint8).reshape(-1, 4)
    if mode == ColorMode.TRUECOLOR:
        return np.ascontiguousarray(channels[:, :3]).reshape(-1)
    elif mode == ColorMode.TRUECOLOR_ALPHA:
        return channels.reshape(-1).copy()
    elif mode == ColorMode.GRAYSCALE:
        return luminance(px).astype(np.uint8)
    elif mode == ColorMode.GRAYSCALE_ALPHA:
        gray = luminance(px).astype(np.uint8)
        return np.stack([gray, channels[:, 3]], axis=-1).reshape(-1)
    elif mode == ColorMode.INDEXED:
        if palette is None:
            raise UnencodablePalette("Indexed color mode requires a palette")
        return palette.indices(px)
    raise UnsupportedColorMode(mode)
