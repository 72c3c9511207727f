import pytest

from enginecore.jpegwrite import encode_jpeg, write_jpeg

HEAD0_LEN = 25


def _gradient(width, height, channels):
    return bytes(
        (x * 17 + y * 31 + c * 53) % 256
        for y in range(height)
        for x in range(width)
        for c in range(channels)
    )


def _flip_rows(data, width, height, channels):
    row = width * channels
    return b"".join(data[y * row:(y + 1) * row] for y in range(height - 1, -1, -1))


def _sof(data):
    pos = data.index(b"\xff\xc0")
    return data[pos:pos + 19]


def test_markers_at_start_and_end():
    out = encode_jpeg(_gradient(9, 7, 3), 9, 7, 3)
    assert out[:4] == b"\xff\xd8\xff\xe0"
    assert out[6:10] == b"JFIF"
    assert out.endswith(b"\xff\xd9")


def test_frame_header_holds_dimensions():
    out = encode_jpeg(_gradient(300, 5, 3), 300, 5, 3)
    sof = _sof(out)
    assert sof[5:7] == (5).to_bytes(2, "big")
    assert sof[7:9] == (300).to_bytes(2, "big")
    assert sof[9] == 3


def test_subsampling_depends_on_quality():
    pixels = _gradient(8, 8, 3)
    assert _sof(encode_jpeg(pixels, 8, 8, 3, quality=90))[11] == 0x22
    assert _sof(encode_jpeg(pixels, 8, 8, 3, quality=91))[11] == 0x11


def test_quality_50_uses_base_tables():
    out = encode_jpeg(_gradient(8, 8, 3), 8, 8, 3, quality=50)
    assert out[HEAD0_LEN] == 16
    assert out[HEAD0_LEN + 64] == 1
    assert out[HEAD0_LEN + 65] == 17


def test_quality_100_tables_all_ones():
    out = encode_jpeg(_gradient(8, 8, 3), 8, 8, 3, quality=100)
    assert out[HEAD0_LEN:HEAD0_LEN + 64] == bytes([1] * 64)
    assert out[HEAD0_LEN + 65:HEAD0_LEN + 129] == bytes([1] * 64)


def test_quality_1_tables_clamped():
    out = encode_jpeg(_gradient(8, 8, 3), 8, 8, 3, quality=1)
    assert max(out[HEAD0_LEN:HEAD0_LEN + 64]) == 255
    assert out[HEAD0_LEN + 65 + 63] == 255


def test_quality_zero_means_ninety():
    pixels = _gradient(20, 12, 3)
    assert encode_jpeg(pixels, 20, 12, 3, quality=0) == encode_jpeg(pixels, 20, 12, 3, quality=90)


def test_huffman_segment_present():
    out = encode_jpeg(_gradient(8, 8, 1), 8, 8, 1)
    assert b"\xff\xc4\x01\xa2" in out
    assert b"\xff\xda\x00\x0c\x03" in out


def test_uniform_mid_grey_block_entropy():
    pixels = bytes([128] * (8 * 8 * 3))
    out = encode_jpeg(pixels, 8, 8, 3, quality=95)
    assert out.endswith(b"\x28\x03\xff\xd9")


@pytest.mark.parametrize("quality", [50, 95])
def test_flip_matches_reversed_rows(quality):
    pixels = _gradient(13, 11, 3)
    flipped = _flip_rows(pixels, 13, 11, 3)
    assert encode_jpeg(pixels, 13, 11, 3, quality, flip=True) == encode_jpeg(
        flipped, 13, 11, 3, quality, flip=False
    )


def test_grey_equals_rgb_with_equal_channels():
    grey = _gradient(10, 10, 1)
    rgb = bytes(v for v in grey for _ in range(3))
    assert encode_jpeg(grey, 10, 10, 1) == encode_jpeg(rgb, 10, 10, 3)


def test_alpha_is_ignored():
    rgb = _gradient(9, 9, 3)
    rgba = b"".join(rgb[i:i + 3] + bytes([i % 256]) for i in range(0, len(rgb), 3))
    assert encode_jpeg(rgba, 9, 9, 4) == encode_jpeg(rgb, 9, 9, 3)
    grey = _gradient(9, 9, 1)
    grey_alpha = bytes(b for v in grey for b in (v, 7))
    assert encode_jpeg(grey_alpha, 9, 9, 2) == encode_jpeg(grey, 9, 9, 1)


def test_different_images_encode_differently():
    a = encode_jpeg(_gradient(16, 16, 3), 16, 16, 3)
    b = encode_jpeg(bytes(16 * 16 * 3), 16, 16, 3)
    assert a != b


@pytest.mark.parametrize("channels", [0, 5])
def test_bad_channel_count_rejected(channels):
    with pytest.raises(ValueError):
        encode_jpeg(bytes(64 * 5), 8, 8, channels)


@pytest.mark.parametrize("width,height", [(0, 8), (8, 0)])
def test_empty_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        encode_jpeg(bytes(192), width, height, 3)


def test_short_buffer_rejected():
    with pytest.raises(ValueError):
        encode_jpeg(bytes(10), 8, 8, 3)


def test_write_jpeg_writes_encoded_bytes(tmp_path):
    pixels = _gradient(12, 9, 3)
    target = tmp_path / "out.jpg"
    write_jpeg(target, pixels, 12, 9, 3, 75, True)
    assert target.read_bytes() == encode_jpeg(pixels, 12, 9, 3, 75, True)