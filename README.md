# rawview

Turn raw frame dumps, such as those from a sensor, an FPGA pipeline or a video
decoder, into RGB pixels and save them as uncompressed 24-bit BMP files. It
has no dependencies beyond the standard library.

## Supported layouts

| Colour space      | Depths | Input bytes per pixel | Notes                                   |
|-------------------|--------|-----------------------|-----------------------------------------|
| `yuv422`          | 8, 10  | 2, 2.5                | packed Y U Y V; 10-bit is 5 bytes/pair  |
| `yuv444`          | 8, 10  | 3, 4                  | 10-bit packs three samples in 32 bits   |
| `rgb`             | 8, 10  | 3, 4                  | 10-bit packs three samples in 32 bits   |
| `rgba`            | 8      | 4                     | kept as 32-bit ARGB words               |
| `yuv420p(YV12)`   | 8      | 1.5                   | planar Y, then V, then U                |
| `yuv420p(YU12)`   | 8      | 1.5                   | planar Y, then U, then V                |
| `yuv420sp(NV12)`  | 8, 10  | 1.5, 1.875            | Y plane, then interleaved U V           |
| `yuv420sp(NV21)`  | 8, 10  | 1.5, 1.875            | Y plane, then interleaved V U           |

10-bit samples are reduced to 8 bits. Packed 10-bit semi-planar data (four
samples in every 5 bytes) is unpacked first. The 10-bit NV12 and NV21 paths
then decode with the chroma order swapped relative to their 8-bit
counterparts.

`yuv422` and `yuv444` use studio-range coefficients (Y offset 16, gain
1.164) for the YUV to RGB step. The 4:2:0 layouts use full-range
coefficients.

The optional *reverse* step reverses the byte order inside every 8-byte block
that the image covers before decoding. This suits dumps written over a 64-bit
bus with the opposite byte order. The input size must then be a multiple of
8 bytes.

## Command line

```
rawview frame.yuv --width 1920 --height 1080 --color-space "yuv420sp(NV12)" --depth 8 -o frame.bmp
```

Options:

- `-W/--width`, `-H/--height`: the resolution, as decimal digits. Both are required.
- `-c/--color-space`: one of the labels in the table above. The default is `yuv422`.
- `-d/--depth`: `8` or `10`. The default is `8`.
- `-r/--reverse`: reverse the bytes within each 8-byte block first.
- `-o/--output`: the BMP file to write.

Without `-o` the command decodes the file and prints a one-line summary, for
example `640x480 yuv422 8-bit -> RGB888`. The command exits with status 1 and
prints a message to standard error in these cases:

- the file cannot be read;
- it holds fewer bytes than the resolution and layout need;
- the depth is not supported for the colour space;
- the BMP cannot be written.

## Library

```python
from rawview.decode import ColorSpace, decode_file
from rawview.bmp import save_bmp

image = decode_file("frame.yuv", 640, 480, ColorSpace.from_label("yuv422"), 10, False)
save_bmp(image, "frame.bmp")
```

### `rawview.decode`

- `decode(data, width, height, color_space, depth=8, reverse=False)` works on bytes already in memory. `color_space` may be a `ColorSpace` or its label.
- `DecodedImage` is the result. It holds `width`, `height`, a `pixel_format` and `pixels`.
  - `PixelFormat.RGB888` pixels are packed R, G, B bytes.
  - `PixelFormat.ARGB32` pixels are little-endian `0xAARRGGBB` words. Only `rgba` input gives this format.
- `ColorSpace.depths()` lists the bit depths a layout supports.
- `bytes_per_pixel(color_space, depth)` gives the input size per pixel.
- Too little input raises `InsufficientDataError`, which is a subclass of `ValueError`.
- An unknown label, an unsupported depth or a non-positive resolution raises `ValueError`.

### `rawview.bmp`

`encode_bmp(image)` returns a bottom-up 24-bit BMP as bytes. `save_bmp(image, path)` writes it to a file. For ARGB32 images the alpha channel is dropped.

### `rawview.convert`

This module holds the per-format converters:

- `rgb10_to_rgb8`
- `yuv444_10_to_8`
- `yuv444_to_rgb`
- `yuv422_8_to_444`
- `yuv422_10_to_444`
- `yu12_to_rgb`
- `yv12_to_rgb`
- `nv12_to_rgb`
- `nv21_to_rgb`
- `unpack_10bit_to_8`
- `reverse_blocks`
- `clip`

## What it does not do

rawview has no viewer window. It does not display images; it only decodes them and writes BMP files. It does not read BMP or any other image format back, and it writes no format other than 24-bit BMP.

## Tests

```
pip install -e ".[test]"
pytest
```