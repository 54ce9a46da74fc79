import pytest

from rawview.convert import reverse_blocks
from rawview.decode import (
    ColorSpace,
    DecodedImage,
    InsufficientDataError,
    PixelFormat,
    bytes_per_pixel,
    decode,
    decode_file,
)


def test_from_label_known():
    assert ColorSpace.from_label("yuv420sp(NV12)") is ColorSpace.NV12
    assert ColorSpace.from_label("rgba") is ColorSpace.RGBA


def test_from_label_unknown():
    with pytest.raises(ValueError):
        ColorSpace.from_label("cmyk")


def test_depths():
    assert ColorSpace.RGBA.depths() == (8,)
    assert ColorSpace.YV12.depths() == (8,)
    assert ColorSpace.YU12.depths() == (8,)
    assert ColorSpace.YUV422.depths() == (8, 10)
    assert ColorSpace.NV21.depths() == (8, 10)


@pytest.mark.parametrize(
    "space, depth, expected",
    [
        ("rgb", 8, 3),
        ("rgb", 10, 4),
        ("rgba", 8, 4),
        ("yuv422", 10, 2.5),
        ("yuv420p(YU12)", 8, 1.5),
        ("yuv420sp(NV21)", 10, 1.875),
    ],
)
def test_bytes_per_pixel(space, depth, expected):
    assert bytes_per_pixel(space, depth) == expected


def test_bytes_per_pixel_unsupported_depth():
    with pytest.raises(ValueError):
        bytes_per_pixel(ColorSpace.RGBA, 10)


def test_decode_rgb8_passthrough():
    data = bytes(range(2 * 2 * 3)) + b"extra"
    image = decode(data, 2, 2, ColorSpace.RGB, 8)
    assert image.pixel_format is PixelFormat.RGB888
    assert image.pixels == data[:12]
    assert (image.width, image.height) == (2, 2)


def test_decode_rgba_keeps_raw_words():
    data = bytes(range(16))
    image = decode(data, 2, 2, "rgba")
    assert image.pixel_format is PixelFormat.ARGB32
    assert image.pixels == data


def test_decode_insufficient_data():
    with pytest.raises(InsufficientDataError):
        decode(bytes(11), 2, 2, "rgb", 8)


def test_insufficient_is_value_error():
    with pytest.raises(ValueError):
        decode(bytes(5), 2, 2, "yuv420sp(NV12)", 8)


def test_decode_rejects_unsupported_depth():
    with pytest.raises(ValueError):
        decode(bytes(64), 2, 2, "yuv420p(YV12)", 10)


def test_decode_rejects_zero_resolution():
    with pytest.raises(ValueError):
        decode(bytes(64), 0, 2, "rgb", 8)


def test_decode_reverse_round_trip():
    data = bytes(range(24))
    image = decode(reverse_blocks(data, 8, 1, 3), 8, 1, "rgb", 8, reverse=True)
    assert image.pixels == data


def test_decode_reverse_requires_block_multiple():
    with pytest.raises(ValueError):
        decode(bytes(13), 2, 2, "rgb", 8, reverse=True)


def test_yuv444_black():
    image = decode(bytes([16, 128, 128]) * 4, 2, 2, "yuv444", 8)
    assert image.pixels == bytes(12)


def test_yuv444_neutral_chroma_is_gray():
    data = bytes([100, 128, 128, 200, 128, 128])
    image = decode(data, 2, 1, "yuv444", 8)
    for offset in range(0, len(image.pixels), 3):
        r, g, b = image.pixels[offset : offset + 3]
        assert r == g == b


def test_nv12_neutral_chroma_keeps_luma():
    luma = bytes([10, 60, 120, 250])
    image = decode(luma + bytes([128, 128]), 2, 2, "yuv420sp(NV12)", 8)
    assert image.pixels == b"".join(bytes([v, v, v]) for v in luma)


def test_yu12_and_yv12_differ_only_in_plane_order():
    luma = bytes([50, 90, 130, 170])
    u_plane, v_plane = bytes([40]), bytes([200])
    from_yu12 = decode(luma + u_plane + v_plane, 2, 2, "yuv420p(YU12)")
    from_yv12 = decode(luma + v_plane + u_plane, 2, 2, "yuv420p(YV12)")
    assert from_yu12.pixels == from_yv12.pixels
    assert len(from_yu12.pixels) == 12


def test_nv_10bit_requires_multiple_of_five():
    with pytest.raises(ValueError):
        decode(bytes(9), 2, 2, "yuv420sp(NV21)", 10)


def test_yuv422_10bit_output_size():
    image = decode(bytes(10), 2, 2, "yuv422", 10)
    assert len(image.pixels) == 2 * 2 * 3


def test_decoded_image_validates_length():
    with pytest.raises(ValueError):
        DecodedImage(2, 2, PixelFormat.RGB888, bytes(5))


def test_decode_file(tmp_path):
    data = bytes(range(12))
    path = tmp_path / "frame.bin"
    path.write_bytes(data)
    image = decode_file(path, 2, 2, "rgb", 8)
    assert image.pixels == data


def test_decode_file_missing(tmp_path):
    with pytest.raises(OSError):
        decode_file(tmp_path / "missing.bin", 2, 2, "rgb", 8)