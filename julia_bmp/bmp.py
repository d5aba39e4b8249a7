"""
Uncompressed 24-bit BMP serialization.

Layout written by image_to_bmp (all integers little-endian):

    offset  size  field
    0       2     magic "BM"
    2       4     file size
    6       4     reserved (0)
    10      4     pixel data offset (54)
    14      4     info header size (40)
    18      4     width  (signed)
    22      4     height (signed, positive = rows stored bottom-up)
    26      2     planes (1)
    28      2     bits per pixel (24)
    30      4     compression (0 = BI_RGB)
    34      4     pixel data size
    38      4     horizontal pixels per meter
    42      4     vertical pixels per meter
    46      4     palette size (0)
    50      4     important colors (0)
    54      ...   pixel rows, BGR, each padded to a multiple of 4 bytes
"""

from __future__ import annotations

import struct
from typing import NamedTuple

import numpy as np

BMP_MAGIC = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE
BYTES_PER_PIXEL = 3
BITS_PER_PIXEL = 24
PLANES = 1
BI_RGB = 0
# ~92 dpi
PIXELS_PER_METER = 3622

_FILE_HEADER = struct.Struct("<2sIII")
_INFO_HEADER = struct.Struct("<IiiHHIIIIII")


class BMPHeader(NamedTuple):
    magic: bytes
    file_size: int
    reserved: int
    data_offset: int
    info_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    palette_size: int
    important_colors: int


def bmp_line_size(width: int) -> int:
    """Bytes per stored row, rounded up to a multiple of 4."""
    return (BYTES_PER_PIXEL * width + 3) & ~3


def bmp_file_size(width: int, height: int) -> int:
    return HEADER_SIZE + bmp_line_size(width) * height


def image_to_bmp(pixels: np.ndarray) -> bytes:
    """
    Serialize an RGB pixel grid of shape (height, width, 3) to BMP bytes.

    Row 0 of the grid is the top of the image, so it is written last.
    """
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"expected a (height, width, 3) grid, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"expected uint8 pixels, got {pixels.dtype}")

    height, width = pixels.shape[:2]
    line_size = bmp_line_size(width)
    image_size = line_size * height
    file_size = HEADER_SIZE + image_size

    out = bytearray(file_size)
    _FILE_HEADER.pack_into(out, 0, BMP_MAGIC, file_size, 0, HEADER_SIZE)
    _INFO_HEADER.pack_into(
        out, FILE_HEADER_SIZE,
        INFO_HEADER_SIZE, width, height, PLANES, BITS_PER_PIXEL, BI_RGB,
        image_size, PIXELS_PER_METER, PIXELS_PER_METER, 0, 0,
    )

    # bottom-up rows, RGB -> BGR; the padding columns stay zero
    rows = np.frombuffer(out, dtype=np.uint8, offset=HEADER_SIZE).reshape(height, line_size)
    rows[:, : width * BYTES_PER_PIXEL] = pixels[::-1, :, ::-1].reshape(height, -1)

    return bytes(out)


def read_bmp_header(data: bytes) -> BMPHeader:
    """Parse the 54-byte header written by image_to_bmp."""
    if len(data) < HEADER_SIZE:
        raise ValueError(f"BMP data too short: {len(data)} bytes")
    header = BMPHeader(
        *_FILE_HEADER.unpack_from(data, 0),
        *_INFO_HEADER.unpack_from(data, FILE_HEADER_SIZE),
    )
    if header.magic != BMP_MAGIC:
        raise ValueError(f"not a BMP file (magic {header.magic!r})")
    return header
