"""Radiance RGBE (.hdr) encoder with per-component run-length scanlines."""

from __future__ import annotations

import math
import struct
from pathlib import Path
from typing import Sequence

HDR_HEADER = b"#?RADIANCE\n# Written by enginecore\nFORMAT=32-bit_rle_rgbe\n"
HDR_EXPOSURE = b"EXPOSURE=          1.0000000000000\n\n"

_MIN_RLE_WIDTH = 8
_MAX_RLE_WIDTH = 32768
_MAX_DUMP = 128
_MAX_RUN = 127


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _to_rgbe(red: float, green: float, blue: float) -> bytes:
    """Convert one linear colour to shared-exponent RGBE bytes."""
    maxcomp = max(red, green, blue)
    if maxcomp < 1e-32:
        return bytes(4)
    mantissa, exponent = math.frexp(maxcomp)
    normalize = _f32(_f32(mantissa) * 256.0 / maxcomp)
    return bytes((
        int(_f32(red * normalize)) & 0xFF,
        int(_f32(green * normalize)) & 0xFF,
        int(_f32(blue * normalize)) & 0xFF,
        (exponent + 128) & 0xFF,
    ))


def _pixel_rgbe(row: Sequence[float], x: int, channels: int) -> bytes:
    base = x * channels
    if channels >= 3:
        return _to_rgbe(row[base], row[base + 1], row[base + 2])
    grey = row[base]
    return _to_rgbe(grey, grey, grey)


def _rle_component(comp: bytes) -> bytes:
    out = bytearray()
    width = len(comp)
    x = 0
    while x < width:
        r = x
        while r + 2 < width:
            if comp[r] == comp[r + 1] == comp[r + 2]:
                break
            r += 1
        if r + 2 >= width:
            r = width
        while x < r:
            length = min(r - x, _MAX_DUMP)
            out.append(length)
            out += comp[x:x + length]
            x += length
        if r + 2 < width:
            while r < width and comp[r] == comp[x]:
                r += 1
            while x < r:
                length = min(r - x, _MAX_RUN)
                out.append(length + 128)
                out.append(comp[x])
                x += length
    return bytes(out)


def _scanline(row: Sequence[float], width: int, channels: int) -> bytes:
    pixels = [_pixel_rgbe(row, x, channels) for x in range(width)]
    if width < _MIN_RLE_WIDTH or width >= _MAX_RLE_WIDTH:
        return b"".join(pixels)
    out = bytearray((2, 2, (width >> 8) & 0xFF, width & 0xFF))
    for c in range(4):
        out += _rle_component(bytes(px[c] for px in pixels))
    return bytes(out)


def encode_hdr(
    values: Sequence[float],
    width: int,
    height: int,
    channels: int,
    flip: bool = False,
) -> bytes:
    """Encode linear float ``values`` (top row first) as a Radiance HDR file.

    One or two channels are treated as grey; with four channels the alpha is
    dropped. ``flip`` stores the rows in reverse order.
    """
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if channels not in (1, 2, 3, 4):
        raise ValueError(f"unsupported channel count: {channels}")
    data = [float(v) for v in values]
    row_len = width * channels
    if len(data) < row_len * height:
        raise ValueError("value buffer is too small")
    out = bytearray(HDR_HEADER)
    out += HDR_EXPOSURE
    out += f"-Y {height} +X {width}\n".encode("ascii")
    for i in range(height):
        y = height - 1 - i if flip else i
        out += _scanline(data[y * row_len:(y + 1) * row_len], width, channels)
    return bytes(out)


def write_hdr(
    path: str | Path,
    values: Sequence[float],
    width: int,
    height: int,
    channels: int,
    flip: bool = False,
) -> None:
    """Encode ``values`` as HDR and write it to ``path``."""
    Path(path).write_bytes(encode_hdr(values, width, height, channels, flip))