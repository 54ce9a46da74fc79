"""Pixel-format conversions for raw image buffers.

Every converter takes the raw bytes plus the image geometry and returns a new
``bytes`` object. Converters that yield RGB return tightly packed
``R, G, B`` triplets, row after row, ``width * height * 3`` bytes in all.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

BLOCK_SIZE = 8


def clip(value: float) -> int:
    """Truncate ``value`` toward zero and clamp it to the range 0..255."""
    return min(max(int(value), 0), 255)


def _check_dims(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"invalid resolution {width}x{height}")


def _require(data: bytes, needed: int, what: str) -> None:
    if len(data) < needed:
        raise ValueError(f"{what} needs at least {needed} bytes, got {len(data)}")


def _groups(data: bytes, size: int, count: int) -> Iterator[tuple[int, ...]]:
    """Yield ``count`` consecutive groups of ``size`` byte values."""
    return zip(*[iter(memoryview(data)[: size * count])] * size)


def reverse_blocks(data: bytes, width: int, height: int, bytes_per_pixel: float) -> bytes:
    """Reverse the byte order inside each 8-byte block covering the image.

    Only as many whole blocks as the image occupies are reversed; any bytes
    after them are left as they are.
    """
    _check_dims(width, height)
    if len(data) % BLOCK_SIZE != 0:
        raise ValueError("data size is not a multiple of 8 bytes")
    total_blocks = min(int(width * height * bytes_per_pixel / BLOCK_SIZE), len(data) // BLOCK_SIZE)
    boundary = total_blocks * BLOCK_SIZE
    out = bytearray(data)
    for start in range(0, boundary, BLOCK_SIZE):
        out[start : start + BLOCK_SIZE] = out[start : start + BLOCK_SIZE][::-1]
    return bytes(out)


def _split_32(b1: int, b2: int, b3: int, b4: int) -> tuple[int, int, int]:
    """Split a 32-bit word into three 10-bit-style fields reduced to 8 bits."""
    first = (((b1 << 4) | (b2 >> 4)) >> 2) & 0xFF
    second = ((((b2 & 0x0F) << 6) | (b3 >> 2)) >> 2) & 0xFF
    third = ((((b3 & 0x03) << 8) | b4) >> 2) & 0xFF
    return first, second, third


def _unpack_32bit_pixels(data: bytes, width: int, height: int, what: str) -> bytes:
    _check_dims(width, height)
    count = width * height
    _require(data, count * 4, what)
    out = bytearray()
    for quad in _groups(data, 4, count):
        out.extend(_split_32(*quad))
    return bytes(out)


def rgb10_to_rgb8(data: bytes, width: int, height: int) -> bytes:
    """Convert 4-byte packed 10-bit RGB pixels to 8-bit RGB."""
    return _unpack_32bit_pixels(data, width, height, "10-bit RGB")


def yuv444_10_to_8(data: bytes, width: int, height: int) -> bytes:
    """Convert 4-byte packed 10-bit YUV 4:4:4 pixels to 8-bit YUV triplets."""
    return _unpack_32bit_pixels(data, width, height, "10-bit YUV 4:4:4")


def yuv444_to_rgb(data: bytes, width: int, height: int) -> bytes:
    """Convert 8-bit YUV 4:4:4 triplets to RGB using studio-range coefficients."""
    _check_dims(width, height)
    count = width * height
    _require(data, count * 3, "YUV 4:4:4")
    out = bytearray()
    for y, u, v in _groups(data, 3, count):
        luma = 1.164 * (y - 16)
        out.append(clip(luma + 1.793 * (v - 128)))
        out.append(clip(luma - 0.534 * (v - 128) - 0.213 * (u - 128)))
        out.append(clip(luma + 2.115 * (u - 128)))
    return bytes(out)


def _last_pair_x(width: int) -> int:
    return (width - 1) // 2 * 2


def yuv422_8_to_444(data: bytes, width: int, height: int) -> bytes:
    """Expand 8-bit YUYV 4:2:2 data to YUV 4:4:4 triplets."""
    _check_dims(width, height)
    if width == 0 or height == 0:
        return b""
    _require(data, (height - 1) * width * 2 + _last_pair_x(width) * 2 + 4, "YUV 4:2:2")
    out = bytearray()
    for row in range(height):
        for x in range(0, width, 2):
            y1, u, y2, v = data[row * width * 2 + x * 2 : row * width * 2 + x * 2 + 4]
            out += bytes((y1, u, v, y2, u, v))
    return bytes(out[: width * height * 3])


def yuv422_10_to_444(data: bytes, width: int, height: int) -> bytes:
    """Expand 10-bit packed 4:2:2 data (5 bytes per pixel pair) to 8-bit YUV 4:4:4."""
    _check_dims(width, height)
    if width == 0 or height == 0:
        return b""
    _require(
        data,
        (height - 1) * width * 5 // 2 + _last_pair_x(width) * 5 // 2 + 5,
        "10-bit YUV 4:2:2",
    )
    out = bytearray()
    for row in range(height):
        for x in range(0, width, 2):
            start = row * width * 5 // 2 + x * 5 // 2
            b1, b2, b3, b4, b5 = data[start : start + 5]
            y1 = b1
            u = ((((b2 & 0x3F) << 4) | (b3 >> 4)) >> 2) & 0xFF
            y2 = ((((b3 & 0x0F) << 6) | (b4 >> 2)) >> 2) & 0xFF
            v = ((((b4 & 0x03) << 8) | b5) >> 2) & 0xFF
            out += bytes((y1, u, v, y2, u, v))
    return bytes(out[: width * height * 3])


ChromaIndex = Callable[[int, int, int, int], tuple[int, int]]


def _yuv420_to_rgb(data: bytes, width: int, height: int, chroma: ChromaIndex, what: str) -> bytes:
    _check_dims(width, height)
    if width == 0 or height == 0:
        return b""
    u_last, v_last = chroma(height - 1, width - 1, width, height)
    _require(data, max(width * height, u_last + 1, v_last + 1), what)
    out = bytearray()
    for i in range(height):
        for j in range(width):
            u_index, v_index = chroma(i, j, width, height)
            y = data[i * width + j]
            u = data[u_index]
            v = data[v_index]
            out.append(clip(y + 1.402 * (v - 128)))
            out.append(clip(y - 0.344136 * (u - 128) - 0.714136 * (v - 128)))
            out.append(clip(y + 1.772 * (u - 128)))
    return bytes(out)


def _planar_first(i: int, j: int, width: int, height: int) -> int:
    return width * height + (i // 2) * (width // 2) + (j // 2)


def _yu12_chroma(i: int, j: int, width: int, height: int) -> tuple[int, int]:
    u_index = _planar_first(i, j, width, height)
    return u_index, u_index + width * height // 4


def _yv12_chroma(i: int, j: int, width: int, height: int) -> tuple[int, int]:
    v_index = _planar_first(i, j, width, height)
    return v_index + width * height // 4, v_index


def _interleaved_first(i: int, j: int, width: int, height: int) -> int:
    return width * height + (i // 2) * width + (j // 2) * 2


def _nv12_chroma(i: int, j: int, width: int, height: int) -> tuple[int, int]:
    u_index = _interleaved_first(i, j, width, height)
    return u_index, u_index + 1


def _nv21_chroma(i: int, j: int, width: int, height: int) -> tuple[int, int]:
    v_index = _interleaved_first(i, j, width, height)
    return v_index + 1, v_index


def yu12_to_rgb(data: bytes, width: int, height: int) -> bytes:
    """Convert planar YUV 4:2:0 with the U plane first (I420) to RGB."""
    return _yuv420_to_rgb(data, width, height, _yu12_chroma, "YU12")


def yv12_to_rgb(data: bytes, width: int, height: int) -> bytes:
    """Convert planar YUV 4:2:0 with the V plane first to RGB."""
    return _yuv420_to_rgb(data, width, height, _yv12_chroma, "YV12")


def nv12_to_rgb(data: bytes, width: int, height: int) -> bytes:
    """Convert semi-planar YUV 4:2:0 with interleaved UV to RGB."""
    return _yuv420_to_rgb(data, width, height, _nv12_chroma, "NV12")


def nv21_to_rgb(data: bytes, width: int, height: int) -> bytes:
    """Convert semi-planar YUV 4:2:0 with interleaved VU to RGB."""
    return _yuv420_to_rgb(data, width, height, _nv21_chroma, "NV21")


def unpack_10bit_to_8(data: bytes) -> bytes:
    """Reduce 10-bit packed samples (four per 5 bytes) to one byte each."""
    if len(data) % 5 != 0:
        raise ValueError("input size is not a multiple of 5 bytes")
    out = bytearray()
    for b1, b2, b3, b4, b5 in _groups(data, 5, len(data) // 5):
        out.append(b1)
        out.append(((((b2 & 0x3F) << 4) | (b3 >> 4)) >> 2) & 0xFF)
        out.append(((((b3 & 0x0F) << 6) | (b4 >> 2)) >> 2) & 0xFF)
        out.append(((((b4 & 0x03) << 8) | b5) >> 2) & 0xFF)
    return bytes(out)