"""Uncompressed BMP and (optionally run-length encoded) TGA image encoders."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Iterator

_BMP_FILE_HEADER = 14
_BMP_INFO_HEADER = 40
_BMP_V4_HEADER = 108
_TGA_MAX_PACKET = 128


def _checked(pixels: bytes, width: int, height: int, channels: int) -> bytes:
    if channels not in (1, 2, 3, 4):
        raise ValueError(f"unsupported channel count: {channels}")
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    data = bytes(pixels)
    if len(data) < width * height * channels:
        raise ValueError("pixel buffer is too small")
    return data


def _rows(data: bytes, width: int, height: int, channels: int, top_first: bool) -> Iterator[list[bytes]]:
    """Yield rows as lists of per-pixel byte strings, bottom row first unless ``top_first``."""
    order = range(height) if top_first else range(height - 1, -1, -1)
    row_len = width * channels
    for y in order:
        row = data[y * row_len:(y + 1) * row_len]
        yield [row[x:x + channels] for x in range(0, row_len, channels)]


def _pixel(px: bytes, channels: int, write_alpha: bool, expand_mono: bool) -> bytes:
    """Encode one pixel in BGR(A) file order."""
    if channels <= 2:
        color = bytes((px[0],) * 3) if expand_mono else px[:1]
    else:
        color = bytes((px[2], px[1], px[0]))
    if write_alpha:
        return color + px[channels - 1:channels]
    return color


def encode_bmp(pixels: bytes, width: int, height: int, channels: int, flip: bool = False) -> bytes:
    """Encode 8-bit ``pixels`` (top row first) as a BMP file.

    Grey images are expanded to 24-bit colour; grey+alpha drops the alpha.
    Four-channel images are written as 32-bit BGRA with a V4 header.
    ``flip`` stores the rows in reverse order.
    """
    data = _checked(pixels, width, height, channels)
    if channels != 4:
        pad = (-width * 3) & 3
        offset = _BMP_FILE_HEADER + _BMP_INFO_HEADER
        header = struct.pack(
            "<2sIHHI", b"BM", offset + (width * 3 + pad) * height, 0, 0, offset
        ) + struct.pack(
            "<IIIHHIIIIII", _BMP_INFO_HEADER, width, height, 1, 24, 0, 0, 0, 0, 0, 0
        )
        write_alpha = False
    else:
        pad = 0
        offset = _BMP_FILE_HEADER + _BMP_V4_HEADER
        header = struct.pack(
            "<2sIHHI", b"BM", offset + width * height * 4, 0, 0, offset
        ) + struct.pack(
            "<IIIHHIIIIIIIIIII12I",
            _BMP_V4_HEADER, width, height, 1, 32, 3, 0, 0, 0, 0, 0,
            0x00FF0000, 0x0000FF00, 0x000000FF, 0xFF000000, 0,
            *([0] * 12),
        )
        write_alpha = True

    body = bytearray(header)
    for row in _rows(data, width, height, channels, top_first=flip):
        for px in row:
            body += _pixel(px, channels, write_alpha, expand_mono=True)
        body += bytes(pad)
    return bytes(body)


def _rle_row(row: list[bytes], channels: int, has_alpha: bool) -> bytes:
    out = bytearray()
    count = len(row)
    i = 0
    while i < count:
        length = 1
        differs = True
        if i < count - 1:
            length = 2
            differs = row[i] != row[i + 1]
            k = i + 2
            if differs:
                prev = i
                while k < count and length < _TGA_MAX_PACKET:
                    if row[prev] != row[k]:
                        prev += 1
                        length += 1
                    else:
                        length -= 1
                        break
                    k += 1
            else:
                while k < count and length < _TGA_MAX_PACKET and row[i] == row[k]:
                    length += 1
                    k += 1
        if differs:
            out.append(length - 1)
            for px in row[i:i + length]:
                out += _pixel(px, channels, has_alpha, expand_mono=False)
        else:
            out.append(0x80 | (length - 1))
            out += _pixel(row[i], channels, has_alpha, expand_mono=False)
        i += length
    return bytes(out)


def encode_tga(
    pixels: bytes,
    width: int,
    height: int,
    channels: int,
    flip: bool = False,
    rle: bool = True,
) -> bytes:
    """Encode 8-bit ``pixels`` (top row first) as a TGA file.

    Grey images use the grey image type; colour images are stored as BGR(A).
    ``rle`` selects run-length encoded packets. ``flip`` stores the rows in
    reverse order.
    """
    data = _checked(pixels, width, height, channels)
    has_alpha = channels in (2, 4)
    color_bytes = channels - 1 if has_alpha else channels
    image_type = 3 if color_bytes < 2 else 2
    if rle:
        image_type += 8
    header = struct.pack(
        "<BBBHHBHHHHBB",
        0, 0, image_type,
        0, 0, 0,
        0, 0, width & 0xFFFF, height & 0xFFFF,
        (color_bytes + has_alpha) * 8, has_alpha * 8,
    )
    body = bytearray(header)
    for row in _rows(data, width, height, channels, top_first=flip):
        if rle:
            body += _rle_row(row, channels, has_alpha)
        else:
            for px in row:
                body += _pixel(px, channels, has_alpha, expand_mono=False)
    return bytes(body)


def write_bmp(
    path: str | Path,
    pixels: bytes,
    width: int,
    height: int,
    channels: int,
    flip: bool = False,
) -> None:
    """Encode ``pixels`` as BMP and write it to ``path``."""
    Path(path).write_bytes(encode_bmp(pixels, width, height, channels, flip))


def write_tga(
    path: str | Path,
    pixels: bytes,
    width: int,
    height: int,
    channels: int,
    flip: bool = False,
    rle: bool = True,
) -> None:
    """Encode ``pixels`` as TGA and write it to ``path``."""
    Path(path).write_bytes(encode_tga(pixels, width, height, channels, flip, rle))