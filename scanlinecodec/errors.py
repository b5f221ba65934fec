"""Exceptions raised while encoding a pixel grid."""
from __future__ import annotations


class ScanlineCodecError(ValueError):
    """Base class; an encode call that raises this produced no usable output."""


class UnsupportedColorMode(ScanlineCodecError):
    def __init__(self, mode) -> None:
        super().__init__(f"Cannot encode pixels for this color mode: {mode!r}")
        self.mode = mode


class UnencodablePalette(ScanlineCodecError):
    pass


class UnencodablePixel(ScanlineCodecError):
    def __init__(self, pixel: int) -> None:
        super().__init__(f"Pixel 0x{int(pixel):08x} has no palette index")
        self.pixel = int(pixel)


class UnknownFilterType(ScanlineCodecError):
    def __init__(self, filter_type) -> None:
        super().__init__(f"Unknown filter type: {filter_type!r}")
        self.filter_type = filter_type
