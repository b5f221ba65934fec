from __future__ import annotations

import numpy as np
import pytest

from scanlinecodec import (
    ColorMode,
    Palette,
    UnencodablePalette,
    UnencodablePixel,
    UnsupportedColorMode,
)
from scanlinecodec.color import (
    a,
    b,
    bytesize,
    encode_pixel,
    encode_pixels,
    g,
    is_achromatic,
    luminance,
    r,
    rgba,
    to_color_mode,
)

ORANGE = rgba(255, 128, 0, 200)


def test_channel_accessors():
    assert ORANGE == 0xFF8000C8
    assert (r(ORANGE), g(ORANGE), b(ORANGE), a(ORANGE)) == (255, 128, 0, 200)
    assert rgba(1, 2, 3) & 0xFF == 255


@pytest.mark.parametrize(
    "mode, size",
    [
        (ColorMode.GRAYSCALE, 1),
        (ColorMode.GRAYSCALE_ALPHA, 2),
        (ColorMode.TRUECOLOR, 3),
        (ColorMode.TRUECOLOR_ALPHA, 4),
        (ColorMode.INDEXED, 1),
    ],
)
def test_bytesize(mode, size):
    assert bytesize(mode) == size
    assert bytesize(int(mode)) == size


def test_encode_pixel_per_mode():
    assert encode_pixel(ColorMode.TRUECOLOR, ORANGE) == bytes([255, 128, 0])
    assert encode_pixel(ColorMode.TRUECOLOR_ALPHA, ORANGE) == bytes([255, 128, 0, 200])
    gray = rgba(90, 90, 90, 10)
    assert encode_pixel(ColorMode.GRAYSCALE, gray) == bytes([90])
    assert encode_pixel(ColorMode.GRAYSCALE_ALPHA, gray) == bytes([90, 10])


def test_luminance_of_chromatic_pixel():
    assert luminance(rgba(255, 0, 0)) == 76
    assert luminance(rgba(0, 255, 0)) == 150
    assert luminance(rgba(255, 255, 255)) == 255
    assert is_achromatic(rgba(3, 3, 3))
    assert not is_achromatic(rgba(3, 3, 4))


def test_encode_indexed_pixel():
    palette = Palette([rgba(0, 0, 255), ORANGE])
    assert encode_pixel(ColorMode.INDEXED, ORANGE, palette) == bytes([1])
    with pytest.raises(UnencodablePixel):
        encode_pixel(ColorMode.INDEXED, rgba(1, 2, 3), palette)
    with pytest.raises(UnencodablePalette):
        encode_pixel(ColorMode.INDEXED, ORANGE)


@pytest.mark.parametrize("mode", list(ColorMode))
def test_encode_pixels_matches_scalar_encoding(mode):
    rng = np.random.default_rng(3)
    pixels = rng.integers(0, 2**32, size=17, dtype=np.uint32)
    palette = Palette(pixels.tolist())
    expected = b"".join(encode_pixel(mode, int(p), palette) for p in pixels)
    out = encode_pixels(mode, pixels, palette)
    assert out.dtype == np.uint8
    assert out.tobytes() == expected


@pytest.mark.parametrize("bad", [1, 5, 7, -2, "cmyk", None, 2.5, True])
def test_unsupported_color_mode(bad):
    with pytest.raises(UnsupportedColorMode):
        to_color_mode(bad)
    with pytest.raises(UnsupportedColorMode):
        encode_pixel(bad, ORANGE)
    with pytest.raises(UnsupportedColorMode):
        encode_pixels(bad, [ORANGE])


def test_color_mode_names():
    assert to_color_mode("truecolor_alpha") is ColorMode.TRUECOLOR_ALPHA
    assert to_color_mode(" Indexed ") is ColorMode.INDEXED
    assert to_color_mode(np.uint8(0)) is ColorMode.GRAYSCALE
