"""Decoding of uncompressed 24-bit BMP images and S3TC-compressed DDS textures."""

from __future__ import annotations

import logging
import os
import struct
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = [
    "TextureError",
    "BmpImage",
    "CompressedFormat",
    "DdsMipLevel",
    "DdsTexture",
    "parse_bmp",
    "load_bmp",
    "parse_dds",
    "load_dds",
]

logger = logging.getLogger(__name__)

_BMP_HEADER_SIZE = 54
_DDS_MAGIC = b"DDS "
_DDS_HEADER_SIZE = 124


class TextureError(ValueError):
    """Raised when image data is not in a format this loader understands."""


@dataclass(frozen=True)
class BmpImage:
    """A 24 bits-per-pixel BMP image; ``pixels`` holds the raw BGR rows."""

    width: int
    height: int
    data_pos: int
    image_size: int
    pixels: bytes


class CompressedFormat(Enum):
    """S3TC compression schemes, valued by their little-endian FourCC code."""

    DXT1 = 0x31545844
    DXT3 = 0x33545844
    DXT5 = 0x35545844

    @property
    def block_size(self) -> int:
        """Bytes taken by one 4x4 block of texels."""
        return 8 if self is CompressedFormat.DXT1 else 16

    @property
    def components(self) -> int:
        """Colour components of the decoded texels."""
        return 3 if self is CompressedFormat.DXT1 else 4


@dataclass(frozen=True)
class DdsMipLevel:
    """One compressed mipmap level."""

    level: int
    width: int
    height: int
    data: bytes


@dataclass(frozen=True)
class DdsTexture:
    """A compressed texture with its mipmap chain, largest level first."""

    width: int
    height: int
    format: CompressedFormat
    mip_map_count: int
    levels: tuple[DdsMipLevel, ...]

    @property
    def components(self) -> int:
        return self.format.components


def parse_bmp(data: bytes) -> BmpImage:
    """Decode a BMP file held in memory.

    Only uncompressed 24-bit images are accepted. A zero image size or data
    offset in the header is replaced by its usual value.
    """
    if len(data) < _BMP_HEADER_SIZE:
        raise TextureError("not a correct BMP file: header is too short")
    if data[:2] != b"BM":
        raise TextureError("not a correct BMP file: missing 'BM' signature")
    if struct.unpack_from("<i", data, 0x1E)[0] != 0:
        raise TextureError("not a correct BMP file: compressed images are not supported")
    if struct.unpack_from("<i", data, 0x1C)[0] != 24:
        raise TextureError("not a correct BMP file: only 24 bits per pixel is supported")

    (data_pos,) = struct.unpack_from("<I", data, 0x0A)
    (image_size,) = struct.unpack_from("<I", data, 0x22)
    (width,) = struct.unpack_from("<i", data, 0x12)
    (height,) = struct.unpack_from("<i", data, 0x16)

    if image_size == 0:
        image_size = width * height * 3
    if data_pos == 0:
        data_pos = _BMP_HEADER_SIZE

    pixels = data[data_pos:data_pos + image_size]
    if len(pixels) < image_size:
        raise TextureError(
            f"not a correct BMP file: expected {image_size} bytes of pixels, got {len(pixels)}"
        )
    return BmpImage(width, height, data_pos, image_size, bytes(pixels))


def load_bmp(path: str | os.PathLike[str]) -> BmpImage:
    """Read and decode a BMP file."""
    logger.info("Reading image %s", path)
    return parse_bmp(Path(path).read_bytes())


def parse_dds(data: bytes) -> DdsTexture:
    """Decode a DXT1, DXT3 or DXT5 DDS file held in memory into its mip levels."""
    if data[:4] != _DDS_MAGIC:
        raise TextureError("not a DDS file: missing 'DDS ' signature")
    header = data[4:4 + _DDS_HEADER_SIZE]
    if len(header) < _DDS_HEADER_SIZE:
        raise TextureError("not a DDS file: header is too short")

    height, width, linear_size = struct.unpack_from("<3I", header, 8)
    (mip_map_count,) = struct.unpack_from("<I", header, 24)
    (four_cc,) = struct.unpack_from("<I", header, 80)

    try:
        fmt = CompressedFormat(four_cc)
    except ValueError:
        raise TextureError(f"unsupported DDS pixel format 0x{four_cc:08X}") from None

    buffer_size = linear_size * 2 if mip_map_count > 1 else linear_size
    start = 4 + _DDS_HEADER_SIZE
    buffer = data[start:start + buffer_size]

    levels = []
    offset = 0
    level_width, level_height = width, height
    for level in range(mip_map_count):
        if not (level_width or level_height):
            break
        size = ((level_width + 3) // 4) * ((level_height + 3) // 4) * fmt.block_size
        chunk = buffer[offset:offset + size]
        if len(chunk) < size:
            raise TextureError(f"DDS data is truncated at mip level {level}")
        levels.append(DdsMipLevel(level, level_width, level_height, bytes(chunk)))
        offset += size
        level_width = max(level_width // 2, 1)
        level_height = max(level_height // 2, 1)

    return DdsTexture(width, height, fmt, mip_map_count, tuple(levels))


def load_dds(path: str | os.PathLike[str]) -> DdsTexture:
    """Read and decode a DDS file."""
    logger.info("Reading image %s", path)
    return parse_dds(Path(path).read_bytes())