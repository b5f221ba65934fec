"""Constants for scanlinecodec color models and scanline filters."""
from __future__ import annotations

from enum import IntEnum


class ColorMode(IntEnum):
    """Color types, numbered as they appear in the image header."""

    GRAYSCALE = 0
    TRUECOLOR = 2
    INDEXED = 3
    GRAYSCALE_ALPHA = 4
    TRUECOLOR_ALPHA = 6


class FilterType(IntEnum):
    NONE = 0
    SUB = 1
    UP = 2
    AVERAGE = 3
    PAETH = 4


COLOR_GRAYSCALE = ColorMode.GRAYSCALE
COLOR_TRUECOLOR = ColorMode.TRUECOLOR
COLOR_INDEXED = ColorMode.INDEXED
COLOR_GRAYSCALE_ALPHA = ColorMode.GRAYSCALE_ALPHA
COLOR_TRUECOLOR_ALPHA = ColorMode.TRUECOLOR_ALPHA

FILTER_NONE = FilterType.NONE
FILTER_SUB = FilterType.SUB
FILTER_UP = FilterType.UP
FILTER_AVERAGE = FilterType.AVERAGE
FILTER_PAETH = FilterType.PAETH

# per-row minimum-sum-of-absolute-differences selection
FILTER_ADAPTIVE = "adaptive"
DEFAULT_FILTER = FILTER_UP

BIT_DEPTH = 8
MAX_PALETTE_SIZE = 256
