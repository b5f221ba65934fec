"""Encode an image file into a filtered scanline stream and report its size."""
from __future__ import annotations

import argparse
import zlib

from scanlinecodec import FILTER_ADAPTIVE, EncodingOptions, FilterType, PixelGrid, encode_image


def main():
    parser = argparse.ArgumentParser(description="Filtered scanline stream encoder")
    parser.add_argument("input", help="Input image path")
    parser.add_argument("output", help="Output path for the (uncompressed) pixel stream")
    parser.add_argument(
        "--color-mode",
        type=str,
        default=None,
        choices=["grayscale", "grayscale_alpha", "truecolor", "truecolor_alpha", "indexed"],
        help="Override the automatically chosen color mode",
    )
    parser.add_argument(
        "--filter",
        type=str,
        default="up",
        choices=[f.name.lower() for f in FilterType] + [FILTER_ADAPTIVE],
        help="Scanline filter applied to every row, or adaptive per-row selection",
    )
    parser.add_argument("--workers", type=int, default=None, help="Threads for row serialization")
    args = parser.parse_args()

    grid = PixelGrid.from_file(args.input)
    options = EncodingOptions.from_mapping({"color_mode": args.color_mode, "filter": args.filter})
    encoded = encode_image(grid, options, workers=args.workers)

    with open(args.output, "wb") as f:
        f.write(encoded.pixelstream)

    deflated = len(zlib.compress(encoded.pixelstream, 9))
    print(
        f"Encoded {args.input} -> {args.output}. Size={encoded.width}x{encoded.height}, "
        f"Mode={encoded.color_mode.name}, Stream={len(encoded.pixelstream)} bytes, Deflated={deflated} bytes"
    )


if __name__ == "__main__":
    main()
