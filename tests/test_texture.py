import struct

import pytest

from fpsassets.texture import (
    CompressedFormat,
    TextureError,
    load_bmp,
    load_dds,
    parse_bmp,
    parse_dds,
)


def make_bmp(width, height, pixels, *, bpp=24, compression=0, image_size=None,
             data_pos=54, magic=b"BM"):
    header = bytearray(54)
    header[0:2] = magic
    struct.pack_into("<I", header, 0x0A, data_pos)
    struct.pack_into("<i", header, 0x12, width)
    struct.pack_into("<i", header, 0x16, height)
    struct.pack_into("<H", header, 0x1C, bpp)
    struct.pack_into("<I", header, 0x1E, compression)
    struct.pack_into("<I", header, 0x22, len(pixels) if image_size is None else image_size)
    return bytes(header) + pixels


def make_dds(width, height, linear_size, mip_count, four_cc, payload, magic=b"DDS "):
    header = bytearray(124)
    struct.pack_into("<3I", header, 8, height, width, linear_size)
    struct.pack_into("<I", header, 24, mip_count)
    header[80:84] = four_cc
    return magic + bytes(header) + payload


PIXELS_2X2 = bytes(range(12))


def test_bmp_round_trip():
    image = parse_bmp(make_bmp(2, 2, PIXELS_2X2))
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == PIXELS_2X2
    assert image.image_size == len(PIXELS_2X2)
    assert image.data_pos == 54


def test_bmp_zero_image_size_is_guessed():
    image = parse_bmp(make_bmp(2, 2, PIXELS_2X2, image_size=0))
    assert image.image_size == 2 * 2 * 3
    assert image.pixels == PIXELS_2X2


def test_bmp_zero_data_pos_defaults_to_header_end():
    image = parse_bmp(make_bmp(2, 2, PIXELS_2X2, data_pos=0))
    assert image.data_pos == 54
    assert image.pixels == PIXELS_2X2


def test_bmp_pixels_start_at_data_pos():
    padding = b"\xff" * 10
    image = parse_bmp(make_bmp(2, 2, padding + PIXELS_2X2, data_pos=64, image_size=12))
    assert image.pixels == PIXELS_2X2


@pytest.mark.parametrize(
    "data",
    [
        b"BM" + bytes(10),
        make_bmp(2, 2, PIXELS_2X2, magic=b"XX"),
        make_bmp(2, 2, PIXELS_2X2, bpp=32),
        make_bmp(2, 2, PIXELS_2X2, compression=1),
        make_bmp(2, 2, PIXELS_2X2[:5], image_size=12),
    ],
)
def test_bmp_rejects_bad_files(data):
    with pytest.raises(TextureError):
        parse_bmp(data)


def test_load_bmp_from_file(tmp_path):
    path = tmp_path / "image.bmp"
    path.write_bytes(make_bmp(2, 2, PIXELS_2X2))
    assert load_bmp(path).pixels == PIXELS_2X2


def test_load_bmp_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bmp(tmp_path / "absent.bmp")


@pytest.mark.parametrize(
    "four_cc, expected",
    [
        (b"DXT1", CompressedFormat.DXT1),
        (b"DXT3", CompressedFormat.DXT3),
        (b"DXT5", CompressedFormat.DXT5),
    ],
)
def test_fourcc_is_recognised_from_ascii(four_cc, expected):
    texture = parse_dds(make_dds(4, 4, 16, 1, four_cc, bytes(16)))
    assert texture.format is expected
    assert texture.format.value == int.from_bytes(four_cc, "little")


@pytest.mark.parametrize(
    "four_cc, block_size, components",
    [
        (b"DXT1", 8, 3),
        (b"DXT3", 16, 4),
        (b"DXT5", 16, 4),
    ],
)
def test_format_block_sizes_and_components(four_cc, block_size, components):
    payload = bytes(range(16))
    texture = parse_dds(make_dds(4, 4, 16, 1, four_cc, payload))
    assert texture.components == components
    assert texture.format.block_size == block_size
    assert texture.levels[0].data == payload[:block_size]


def test_dds_single_level_dxt1():
    payload = bytes(range(8))
    texture = parse_dds(make_dds(4, 4, 8, 1, b"DXT1", payload))
    assert texture.format is CompressedFormat.DXT1
    assert texture.components == 3
    assert len(texture.levels) == 1
    assert texture.levels[0].data == payload
    assert (texture.levels[0].width, texture.levels[0].height) == (4, 4)


def test_dds_mip_chain_is_contiguous_and_halving():
    payload = bytes(i % 251 for i in range(128))
    texture = parse_dds(make_dds(8, 8, 64, 4, b"DXT5", payload))
    assert len(texture.levels) == texture.mip_map_count
    joined = b"".join(level.data for level in texture.levels)
    assert payload.startswith(joined)
    for prev, cur in zip(texture.levels, texture.levels[1:]):
        assert cur.width == max(prev.width // 2, 1)
        assert cur.height == max(prev.height // 2, 1)
        assert cur.level == prev.level + 1
    assert texture.levels[-1].width == 1


def test_dds_zero_mip_count_has_no_levels():
    texture = parse_dds(make_dds(4, 4, 8, 0, b"DXT1", bytes(8)))
    assert texture.levels == ()


@pytest.mark.parametrize(
    "data",
    [
        make_dds(4, 4, 8, 1, b"DXT1", bytes(8), magic=b"PNG "),
        make_dds(4, 4, 8, 1, b"ABCD", bytes(8)),
        make_dds(4, 4, 8, 1, b"DXT1", bytes(3)),
        b"DDS " + bytes(20),
    ],
)
def test_dds_rejects_bad_files(data):
    with pytest.raises(TextureError):
        parse_dds(data)


def test_load_dds_from_file(tmp_path):
    path = tmp_path / "font.dds"
    payload = bytes(range(16))
    path.write_bytes(make_dds(4, 4, 16, 1, b"DXT5", payload))
    assert load_dds(path).levels[0].data == payload