"""PNG encoder with a built-in fixed-Huffman deflate compressor."""

from __future__ import annotations

import struct
import zlib as _zlib
from pathlib import Path
from typing import Optional

PNG_SIGNATURE = bytes((137, 80, 78, 71, 13, 10, 26, 10))
DEFAULT_COMPRESSION_LEVEL = 8

_HASH_SIZE = 16384
_COLOR_TYPES = {1: 0, 2: 4, 3: 2, 4: 6}

_LENGTH_BASE = (3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 15, 17, 19, 23, 27, 31, 35, 43, 51,
                59, 67, 83, 99, 115, 131, 163, 195, 227, 258, 259)
_LENGTH_EXTRA = (0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 4, 4, 4,
                 4, 5, 5, 5, 5, 0)
_DIST_BASE = (1, 2, 3, 4, 5, 7, 9, 13, 17, 25, 33, 49, 65, 97, 129, 193, 257, 385,
              513, 769, 1025, 1537, 2049, 3073, 4097, 6145, 8193, 12289, 16385,
              24577, 32768)
_DIST_EXTRA = (0, 0, 0, 0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8, 9, 9, 10,
               10, 11, 11, 12, 12, 13, 13)


def crc32(data: bytes) -> int:
    """Return the CRC-32 used by PNG chunks."""
    return _zlib.crc32(bytes(data)) & 0xFFFFFFFF


def _bitrev(code: int, bits: int) -> int:
    result = 0
    for _ in range(bits):
        result = (result << 1) | (code & 1)
        code >>= 1
    return result


class _BitWriter:
    def __init__(self, out: bytearray) -> None:
        self.out = out
        self.buffer = 0
        self.count = 0

    def add(self, code: int, bits: int) -> None:
        self.buffer |= code << self.count
        self.count += bits
        while self.count >= 8:
            self.out.append(self.buffer & 0xFF)
            self.buffer >>= 8
            self.count -= 8

    def huff_raw(self, code: int, bits: int) -> None:
        self.add(_bitrev(code, bits), bits)

    def huff(self, n: int) -> None:
        if n <= 143:
            self.huff_raw(0x30 + n, 8)
        elif n <= 255:
            self.huff_raw(0x190 + n - 144, 9)
        elif n <= 279:
            self.huff_raw(n - 256, 7)
        else:
            self.huff_raw(0xC0 + n - 280, 8)

    def literal(self, n: int) -> None:
        if n <= 143:
            self.huff_raw(0x30 + n, 8)
        else:
            self.huff_raw(0x190 + n - 144, 9)


def _zhash(data: bytes, i: int) -> int:
    mask = 0xFFFFFFFF
    h = data[i] + (data[i + 1] << 8) + (data[i + 2] << 16)
    h ^= (h << 3) & mask
    h = (h + (h >> 5)) & mask
    h ^= (h << 4) & mask
    h = (h + (h >> 17)) & mask
    h ^= (h << 25) & mask
    h = (h + (h >> 6)) & mask
    return h


def _match_len(data: bytes, a: int, b: int, limit: int) -> int:
    limit = min(limit, 258)
    k = 0
    while k < limit and data[a + k] == data[b + k]:
        k += 1
    return k


def zlib_compress(data: bytes, quality: int = DEFAULT_COMPRESSION_LEVEL) -> bytes:
    """Compress ``data`` into a zlib stream using fixed Huffman codes.

    ``quality`` bounds the hash-chain length (minimum 5). If the result would
    be larger than stored blocks, stored blocks are emitted instead.
    """
    data = bytes(data)
    n = len(data)
    quality = max(quality, 5)
    out = bytearray((0x78, 0x5E))
    bits = _BitWriter(out)
    bits.add(1, 1)
    bits.add(1, 2)

    table: dict[int, list[int]] = {}
    i = 0
    while i < n - 3:
        h = _zhash(data, i) & (_HASH_SIZE - 1)
        best = 3
        best_loc: Optional[int] = None
        chain = table.setdefault(h, [])
        for pos in chain:
            if pos > i - 32768:
                d = _match_len(data, pos, i, n - i)
                if d >= best:
                    best = d
                    best_loc = pos
        if len(chain) == 2 * quality:
            del chain[:quality]
        chain.append(i)

        if best_loc is not None:
            h2 = _zhash(data, i + 1) & (_HASH_SIZE - 1)
            for pos in table.get(h2, ()):
                if pos > i - 32767:
                    if _match_len(data, pos, i + 1, n - i - 1) > best:
                        best_loc = None
                        break

        if best_loc is not None:
            dist = i - best_loc
            j = 0
            while best > _LENGTH_BASE[j + 1] - 1:
                j += 1
            bits.huff(j + 257)
            if _LENGTH_EXTRA[j]:
                bits.add(best - _LENGTH_BASE[j], _LENGTH_EXTRA[j])
            j = 0
            while dist > _DIST_BASE[j + 1] - 1:
                j += 1
            bits.add(_bitrev(j, 5), 5)
            if _DIST_EXTRA[j]:
                bits.add(dist - _DIST_BASE[j], _DIST_EXTRA[j])
            i += best
        else:
            bits.literal(data[i])
            i += 1

    for byte in data[i:]:
        bits.literal(byte)
    bits.huff(256)
    while bits.count:
        bits.add(0, 1)

    if len(out) > n + 2 + ((n + 32766) // 32767) * 5:
        del out[2:]
        j = 0
        while j < n:
            block_len = min(n - j, 32767)
            out.append(1 if n - j == block_len else 0)
            out.append(block_len & 0xFF)
            out.append((block_len >> 8) & 0xFF)
            out.append((~block_len) & 0xFF)
            out.append(((~block_len) >> 8) & 0xFF)
            out += data[j:j + block_len]
            j += block_len

    out += struct.pack(">I", _zlib.adler32(data) & 0xFFFFFFFF)
    return bytes(out)


def _paeth(a: int, b: int, c: int) -> int:
    p = a + b - c
    pa, pb, pc = abs(p - a), abs(p - b), abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def _filter_line(row: bytes, prev: Optional[bytes], n: int, kind: int) -> bytes:
    if kind == 0:
        return bytes(row)
    out = bytearray(len(row))
    for i, value in enumerate(row):
        first = i < n
        left = 0 if first else row[i - n]
        up = prev[i] if prev is not None else 0
        up_left = 0 if first or prev is None else prev[i - n]
        if kind == 1:
            pred = left
        elif kind == 2:
            pred = up
        elif kind == 3:
            pred = (left + up) >> 1
        elif kind == 4:
            pred = _paeth(left, up, up_left)
        elif kind == 5:
            pred = left >> 1
        else:
            pred = _paeth(left, 0, 0)
        out[i] = (value - pred) & 0xFF
    return bytes(out)


def _cost(line: bytes) -> int:
    return sum(b if b < 128 else 256 - b for b in line)


def _chunk(tag: bytes, body: bytes) -> bytes:
    return struct.pack(">I", len(body)) + tag + body + struct.pack(">I", crc32(tag + body))


def encode_png(
    pixels: bytes,
    width: int,
    height: int,
    channels: int,
    stride: int = 0,
    flip: bool = False,
    force_filter: int = -1,
) -> bytes:
    """Encode 8-bit ``pixels`` (1=Y, 2=YA, 3=RGB, 4=RGBA) as PNG bytes.

    ``stride`` is the byte distance between rows (0 means tightly packed).
    ``flip`` writes the rows bottom-up. ``force_filter`` 0..4 picks a PNG
    filter for every row; any other value chooses the cheapest per row.
    """
    if channels not in _COLOR_TYPES:
        raise ValueError(f"unsupported channel count: {channels}")
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    row_len = width * channels
    if stride == 0:
        stride = row_len
    if stride < row_len:
        raise ValueError("stride is shorter than a row")
    data = bytes(pixels)
    if height and len(data) < stride * (height - 1) + row_len:
        raise ValueError("pixel buffer is too small")
    if force_filter >= 5:
        force_filter = -1

    def row_at(y: int) -> bytes:
        r = height - 1 - y if flip else y
        return data[r * stride:r * stride + row_len]

    filtered = bytearray()
    previous: Optional[bytes] = None
    for y in range(height):
        row = row_at(y)
        mapping = (0, 1, 2, 3, 4) if y != 0 else (0, 1, 0, 5, 6)
        if force_filter > -1:
            filter_type = force_filter
            line = _filter_line(row, previous, channels, mapping[filter_type])
        else:
            filter_type, line = 0, b""
            best_cost = None
            for candidate in range(5):
                attempt = _filter_line(row, previous, channels, mapping[candidate])
                cost = _cost(attempt)
                if best_cost is None or cost < best_cost:
                    best_cost, filter_type, line = cost, candidate, attempt
        filtered.append(filter_type)
        filtered += line
        previous = row

    compressed = zlib_compress(bytes(filtered), DEFAULT_COMPRESSION_LEVEL)
    header = struct.pack(">II", width & 0xFFFFFFFF, height & 0xFFFFFFFF) + bytes(
        (8, _COLOR_TYPES[channels], 0, 0, 0)
    )
    return (
        PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", compressed)
        + _chunk(b"IEND", b"")
    )


def write_png(
    path: str | Path,
    pixels: bytes,
    width: int,
    height: int,
    channels: int,
    stride: int = 0,
    flip: bool = False,
) -> None:
    """Encode ``pixels`` as PNG and write it to ``path``."""
    png = encode_png(pixels, width, height, channels, stride, flip)
    Path(path).write_bytes(png)


def save_image_png(pixels: bytes, path: str | Path, width: int, height: int, channels: int) -> None:
    """Save a bottom-up pixel buffer (as read back from a framebuffer) as PNG."""
    write_png(path, pixels, width, height, channels, width * channels, True)