"""Writing decoded images as uncompressed 24-bit BMP files."""

from __future__ import annotations

import struct
from pathlib import Path

from rawview.decode import DecodedImage, PixelFormat

_HEADER_SIZE = 14 + 40
_PIXELS_PER_METER = 3780


def encode_bmp(image: DecodedImage) -> bytes:
    """Return ``image`` as the bytes of a bottom-up 24-bit BMP file."""
    width, height = image.width, image.height
    if width <= 0 or height <= 0:
        raise ValueError("No image to save.")

    if image.pixel_format is PixelFormat.RGB888:
        step, order = 3, (2, 1, 0)
    else:
        step, order = 4, (0, 1, 2)

    row_bytes = width * 3
    stride = (row_bytes + 3) // 4 * 4
    padding = bytes(stride - row_bytes)
    rows = []
    for row in reversed(range(height)):
        line = image.pixels[row * width * step : (row + 1) * width * step]
        bgr = bytearray(row_bytes)
        for channel, source in enumerate(order):
            bgr[channel::3] = line[source::step]
        rows.append(bytes(bgr) + padding)

    image_size = stride * height
    file_header = struct.pack("<2sIHHI", b"BM", _HEADER_SIZE + image_size, 0, 0, _HEADER_SIZE)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        40,
        width,
        height,
        1,
        24,
        0,
        image_size,
        _PIXELS_PER_METER,
        _PIXELS_PER_METER,
        0,
        0,
    )
    return file_header + info_header + b"".join(rows)


def save_bmp(image: DecodedImage, path: str | Path) -> None:
    """Write ``image`` to ``path`` as a BMP file."""
    Path(path).write_bytes(encode_bmp(image))