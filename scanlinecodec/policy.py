"""Choose the color mode and palette used to encode an image."""
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import numpy as np

from . import color
from .constants import DEFAULT_FILTER, FILTER_ADAPTIVE, ColorMode, FilterType
from .errors import UnknownFilterType
from .filters import to_filter_type
from .image import PixelGrid
from .palette import Palette

logger = logging.getLogger(__name__)

_OPTION_ALIASES = {
    "color_mode": "color_mode",
    "colorMode": "color_mode",
    "palette": "palette",
    "filter_method": "filter_method",
    "filter": "filter_method",
}


def _to_filter_method(value):
    if isinstance(value, str):
        name = value.strip()
        if name.lower() == FILTER_ADAPTIVE:
            return FILTER_ADAPTIVE
        try:
            return FilterType[name.upper()]
        except KeyError:
            raise UnknownFilterType(value) from None
    return to_filter_type(value)


@dataclass(frozen=True)
class EncodingOptions:
    """
    Caller overrides for one encode call. ``None`` leaves a field unset.

    ``filter_method`` is a fixed FilterType applied to every row, or
    ``"adaptive"`` to pick a filter per row.
    """

    color_mode: Optional[ColorMode] = None
    palette: Optional[Palette] = None
    filter_method: Any = DEFAULT_FILTER

    def __post_init__(self) -> None:
        if self.color_mode is not None:
            object.__setattr__(self, "color_mode", color.to_color_mode(self.color_mode))
        if self.palette is not None and not isinstance(self.palette, Palette):
            object.__setattr__(self, "palette", Palette(self.palette))
        object.__setattr__(self, "filter_method", _to_filter_method(self.filter_method))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "EncodingOptions":
        """Build options from a plain mapping; unknown keys are ignored."""
        if mapping is None:
            return cls()
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            field = _OPTION_ALIASES.get(key)
            if field is None:
                logger.debug("Ignoring unrecognized encoding option %r", key)
                continue
            if value is not None:
                kwargs[field] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class EncodingChoice:
    color_mode: ColorMode
    palette: Optional[Palette]

    @property
    def pixelsize(self) -> int:
        return color.bytesize(self.color_mode)


def coerce_options(options) -> EncodingOptions:
    if options is None:
        return EncodingOptions()
    if isinstance(options, EncodingOptions):
        return options
    return EncodingOptions.from_mapping(options)


def resolve_encoding(image, options=None) -> EncodingChoice:
    """
    Resolve the color mode and palette for encoding ``image``.

    Explicit overrides are taken as-is. A missing palette is derived from the
    distinct colors of the image, and a missing color mode is the palette's
    most compact lossless mode.
    """
    grid = PixelGrid.coerce(image)
    opts = coerce_options(options)

    palette = opts.palette if opts.palette is not None else grid.palette()
    mode = opts.color_mode if opts.color_mode is not None else palette.best_color_mode()

    if mode in (ColorMode.GRAYSCALE, ColorMode.GRAYSCALE_ALPHA):
        if not np.all(color.is_achromatic(grid.pixels)):
            warnings.warn(
                f"Encoding chromatic pixels as {mode.name} discards color information"
            )
    if mode in (ColorMode.GRAYSCALE, ColorMode.TRUECOLOR):
        if not np.all(color.is_opaque(grid.pixels)):
            warnings.warn(f"Encoding translucent pixels as {mode.name} discards alpha")

    logger.debug(
        "Resolved encoding for %dx%d image: mode=%s palette=%d colors",
        grid.width,
        grid.height,
        mode.name,
        len(palette),
    )
    return EncodingChoice(color_mode=mode, palette=palette)
