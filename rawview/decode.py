"""Decoding of raw image buffers into displayable pixel data."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rawview.convert import (
    nv12_to_rgb,
    nv21_to_rgb,
    reverse_blocks,
    rgb10_to_rgb8,
    unpack_10bit_to_8,
    yu12_to_rgb,
    yuv422_8_to_444,
    yuv422_10_to_444,
    yuv444_10_to_8,
    yuv444_to_rgb,
    yv12_to_rgb,
)


class ColorSpace(Enum):
    """Layouts a raw buffer can be interpreted as, keyed by their labels."""

    YUV422 = "yuv422"
    YUV444 = "yuv444"
    RGB = "rgb"
    RGBA = "rgba"
    YV12 = "yuv420p(YV12)"
    YU12 = "yuv420p(YU12)"
    NV12 = "yuv420sp(NV12)"
    NV21 = "yuv420sp(NV21)"

    @classmethod
    def from_label(cls, label: str) -> ColorSpace:
        """Return the color space whose label is ``label``."""
        try:
            return cls(label.strip())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"unknown color space {label!r}; expected one of: {choices}") from None

    def depths(self) -> tuple[int, ...]:
        """Bit depths supported for this color space."""
        if self in (ColorSpace.RGBA, ColorSpace.YV12, ColorSpace.YU12):
            return (8,)
        return (8, 10)


class PixelFormat(Enum):
    """Memory layout of decoded pixels."""

    RGB888 = "rgb888"
    ARGB32 = "argb32"

    @property
    def bytes_per_pixel(self) -> int:
        return 3 if self is PixelFormat.RGB888 else 4


class InsufficientDataError(ValueError):
    """Raised when a buffer is too short for the requested resolution."""


@dataclass(frozen=True)
class DecodedImage:
    """Decoded pixels with their geometry.

    ``RGB888`` pixels are packed ``R, G, B`` bytes; ``ARGB32`` pixels are
    32-bit ``0xAARRGGBB`` words stored little-endian (``B, G, R, A`` bytes).
    """

    width: int
    height: int
    pixel_format: PixelFormat
    pixels: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * self.pixel_format.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(f"expected {expected} pixel bytes, got {len(self.pixels)}")


Step = Callable[[bytes, int, int], bytes]


def _unpack_samples(data: bytes, width: int, height: int) -> bytes:
    return unpack_10bit_to_8(data)


_BYTES_PER_PIXEL: dict[tuple[ColorSpace, int], float] = {
    (ColorSpace.RGB, 8): 3,
    (ColorSpace.RGB, 10): 4,
    (ColorSpace.RGBA, 8): 4,
    (ColorSpace.YUV444, 8): 3,
    (ColorSpace.YUV444, 10): 4,
    (ColorSpace.YUV422, 8): 2,
    (ColorSpace.YUV422, 10): 2.5,
    (ColorSpace.YU12, 8): 1.5,
    (ColorSpace.YV12, 8): 1.5,
    (ColorSpace.NV21, 8): 1.5,
    (ColorSpace.NV21, 10): 1.875,
    (ColorSpace.NV12, 8): 1.5,
    (ColorSpace.NV12, 10): 1.875,
}

# The 10-bit semi-planar paths hand the unpacked data to the converter of the
# opposite chroma order, matching the established output of this tool.
_PIPELINES: dict[tuple[ColorSpace, int], tuple[Step, ...]] = {
    (ColorSpace.RGB, 8): (),
    (ColorSpace.RGB, 10): (rgb10_to_rgb8,),
    (ColorSpace.RGBA, 8): (),
    (ColorSpace.YUV444, 8): (yuv444_to_rgb,),
    (ColorSpace.YUV444, 10): (yuv444_10_to_8, yuv444_to_rgb),
    (ColorSpace.YUV422, 8): (yuv422_8_to_444, yuv444_to_rgb),
    (ColorSpace.YUV422, 10): (yuv422_10_to_444, yuv444_to_rgb),
    (ColorSpace.YU12, 8): (yu12_to_rgb,),
    (ColorSpace.YV12, 8): (yv12_to_rgb,),
    (ColorSpace.NV21, 8): (nv21_to_rgb,),
    (ColorSpace.NV21, 10): (_unpack_samples, nv12_to_rgb),
    (ColorSpace.NV12, 8): (nv12_to_rgb,),
    (ColorSpace.NV12, 10): (_unpack_samples, nv21_to_rgb),
}


def _as_color_space(color_space: ColorSpace | str) -> ColorSpace:
    if isinstance(color_space, ColorSpace):
        return color_space
    return ColorSpace.from_label(color_space)


def bytes_per_pixel(color_space: ColorSpace | str, depth: int) -> float:
    """Number of input bytes one pixel occupies in the given layout."""
    space = _as_color_space(color_space)
    try:
        return _BYTES_PER_PIXEL[(space, depth)]
    except KeyError:
        raise ValueError(f"{space.value} does not support a depth of {depth} bits") from None


def decode(
    data: bytes,
    width: int,
    height: int,
    color_space: ColorSpace | str,
    depth: int = 8,
    reverse: bool = False,
) -> DecodedImage:
    """Interpret ``data`` as a raw image and return its decoded pixels.

    With ``reverse`` set, the bytes of every 8-byte block are reversed first.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid resolution {width}x{height}")
    space = _as_color_space(color_space)
    needed = bytes_per_pixel(space, depth)
    if width * height * needed > len(data):
        raise InsufficientDataError("No enough data.")

    data = bytes(data)
    if reverse:
        data = reverse_blocks(data, width, height, needed)
    for step in _PIPELINES[(space, depth)]:
        data = step(data, width, height)

    pixel_format = PixelFormat.ARGB32 if space is ColorSpace.RGBA else PixelFormat.RGB888
    pixels = data[: width * height * pixel_format.bytes_per_pixel]
    return DecodedImage(width, height, pixel_format, pixels)


def decode_file(
    path: str | Path,
    width: int,
    height: int,
    color_space: ColorSpace | str,
    depth: int = 8,
    reverse: bool = False,
) -> DecodedImage:
    """Read the whole file at ``path`` and decode it."""
    return decode(Path(path).read_bytes(), width, height, color_space, depth, reverse)