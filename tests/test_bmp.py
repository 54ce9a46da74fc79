import struct

import pytest

from rawview.bmp import encode_bmp, save_bmp
from rawview.decode import DecodedImage, PixelFormat


def _header(blob):
    magic, size, _, _, offset = struct.unpack_from("<2sIHHI", blob, 0)
    fields = struct.unpack_from("<IiiHHIIiiII", blob, 14)
    return magic, size, offset, fields


def test_header_fields():
    image = DecodedImage(3, 2, PixelFormat.RGB888, bytes(range(18)))
    blob = encode_bmp(image)
    magic, size, offset, fields = _header(blob)
    assert magic == b"BM"
    assert size == len(blob)
    assert offset == 54
    header_size, width, height, planes, bits, compression = fields[:6]
    assert (header_size, width, height, planes, bits, compression) == (40, 3, 2, 1, 24, 0)
    assert fields[6] == len(blob) - 54


def test_rgb_pixel_stored_as_bgr_with_row_padding():
    image = DecodedImage(1, 1, PixelFormat.RGB888, bytes([10, 20, 30]))
    blob = encode_bmp(image)
    assert blob[54:57] == bytes([30, 20, 10])
    assert len(blob) == 58
    assert blob[57:] == b"\x00"


def test_rows_are_bottom_up():
    top, bottom = bytes([1, 2, 3]), bytes([4, 5, 6])
    image = DecodedImage(1, 2, PixelFormat.RGB888, top + bottom)
    blob = encode_bmp(image)
    assert blob[54:57] == bytes(reversed(bottom))
    assert blob[58:61] == bytes(reversed(top))


def test_argb_drops_alpha():
    pixels = bytes([1, 2, 3, 0xFF, 7, 8, 9, 0x00])
    image = DecodedImage(2, 1, PixelFormat.ARGB32, pixels)
    blob = encode_bmp(image)
    assert blob[54:60] == bytes([1, 2, 3, 7, 8, 9])


def test_row_stride_is_multiple_of_four():
    for width in range(1, 6):
        image = DecodedImage(width, 3, PixelFormat.RGB888, bytes(width * 9))
        blob = encode_bmp(image)
        assert (len(blob) - 54) % (4 * 3) == 0
        assert len(blob) - 54 >= width * 9


def test_empty_image_rejected():
    with pytest.raises(ValueError):
        encode_bmp(DecodedImage(0, 0, PixelFormat.RGB888, b""))


def test_save_bmp_writes_encoded_bytes(tmp_path):
    image = DecodedImage(2, 2, PixelFormat.RGB888, bytes(range(12)))
    target = tmp_path / "out.bmp"
    save_bmp(image, target)
    assert target.read_bytes() == encode_bmp(image)