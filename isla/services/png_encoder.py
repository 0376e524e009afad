"""
Minimal PNG writer for RGBA8 images.

Output is always: signature, IHDR, a single IDAT, IEND. Scanlines use filter
type 0 (None) and the raster is compressed with zlib at level 9.
"""

import struct
import zlib

from services.errors import IconRenderError


PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'

BIT_DEPTH = 8
COLOR_TYPE_RGBA = 6
FILTER_NONE = 0
COMPRESSION_LEVEL = 9


def _build_crc_table():
    """CRC-32 lookup table for the reflected IEEE 802.3 polynomial."""
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = 0xEDB88320 ^ (c >> 1) if c & 1 else c >> 1
        table.append(c)
    return tuple(table)


CRC_TABLE = _build_crc_table()


def crc32(data: bytes) -> int:
    crc = 0xFFFFFFFF
    for byte in data:
        crc = CRC_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF


def png_chunk(chunk_type: bytes, data: bytes) -> bytes:
    """Frame a chunk as length + type + data + CRC (CRC covers type and data)."""
    return (
        struct.pack('>I', len(data))
        + chunk_type
        + data
        + struct.pack('>I', crc32(chunk_type + data))
    )


def build_ihdr(width: int, height: int) -> bytes:
    # width, height, bit depth, color type, compression, filter, interlace
    return struct.pack('>IIBBBBB', width, height, BIT_DEPTH, COLOR_TYPE_RGBA, 0, 0, 0)


def filter_scanlines(width: int, height: int, pixels: bytes) -> bytes:
    """Prefix every row with the None filter byte."""
    stride = width * 4
    raw = bytearray()
    for y in range(height):
        raw.append(FILTER_NONE)
        raw.extend(pixels[y * stride:(y + 1) * stride])
    return bytes(raw)


def encode_png(width: int, height: int, pixels: bytes) -> bytes:
    """
    Serialize an RGBA8 buffer as PNG.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        pixels: Row-major RGBA bytes, exactly width * height * 4 long

    Returns:
        Complete PNG file contents

    Raises:
        IconRenderError: If the buffer has the wrong length or compression fails
    """
    expected = width * height * 4
    if len(pixels) != expected:
        raise IconRenderError(
            f"Pixel buffer is {len(pixels)} bytes, expected {expected} for {width}x{height}"
        )

    raw = filter_scanlines(width, height, pixels)
    try:
        idat = zlib.compress(raw, COMPRESSION_LEVEL)
    except zlib.error as e:
        raise IconRenderError(f"Failed to compress {width}x{height} image data: {e}") from e

    return (
        PNG_SIGNATURE
        + png_chunk(b'IHDR', build_ihdr(width, height))
        + png_chunk(b'IDAT', idat)
        + png_chunk(b'IEND', b'')
    )
