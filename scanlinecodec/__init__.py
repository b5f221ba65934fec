"""scanlinecodec: pixel grid to filtered scanline stream encoder."""
from .constants import (
    BIT_DEPTH,
    COLOR_GRAYSCALE,
    COLOR_GRAYSCALE_ALPHA,
    COLOR_INDEXED,
    COLOR_TRUECOLOR,
    COLOR_TRUECOLOR_ALPHA,
    DEFAULT_FILTER,
    FILTER_ADAPTIVE,
    FILTER_AVERAGE,
    FILTER_NONE,
    FILTER_PAETH,
    FILTER_SUB,
    FILTER_UP,
    MAX_PALETTE_SIZE,
    ColorMode,
    FilterType,
)
from .errors import (
    ScanlineCodecError,
    UnencodablePalette,
    UnencodablePixel,
    UnknownFilterType,
    UnsupportedColorMode,
)
from .color import bytesize, encode_pixel, encode_pixels, rgba
from .palette import Palette
from .image import PixelGrid
from .filters import apply_filter, filter_scanline, paeth_predictor, select_filter
from .policy import EncodingChoice, EncodingOptions, resolve_encoding
from .encoder import (
    EncodedImage,
    encode_image,
    encode_pixelstream,
    for_each_row,
    iter_raw_rows,
)
from .version import __version__

__all__ = [
    "BIT_DEPTH",
    "COLOR_GRAYSCALE",
    "COLOR_GRAYSCALE_ALPHA",
    "COLOR_INDEXED",
    "COLOR_TRUECOLOR",
    "COLOR_TRUECOLOR_ALPHA",
    "DEFAULT_FILTER",
    "FILTER_ADAPTIVE",
    "FILTER_AVERAGE",
    "FILTER_NONE",
    "FILTER_PAETH",
    "FILTER_SUB",
    "FILTER_UP",
    "MAX_PALETTE_SIZE",
    "ColorMode",
    "FilterType",
    "ScanlineCodecError",
    "UnencodablePalette",
    "UnencodablePixel",
    "UnknownFilterType",
    "UnsupportedColorMode",
    "bytesize",
    "encode_pixel",
    "encode_pixels",
    "rgba",
    "Palette",
    "PixelGrid",
    "apply_filter",
    "filter_scanline",
    "paeth_predictor",
    "select_filter",
    "EncodingChoice",
    "EncodingOptions",
    "resolve_encoding",
    "EncodedImage",
    "encode_image",
    "encode_pixelstream",
    "for_each_row",
    "iter_raw_rows",
    "__version__",
]
