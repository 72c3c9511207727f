# enginecore

Pure-Python building blocks for a small game engine. The package has no
runtime dependencies.

## What is included

- `enginecore.sysfunc`: small helpers.
  - `start_with(line, text)` and `is_full(text, symbol)` check strings.
  - `conv_range(value, val_min, val_max, new_min, new_max)` maps a value linearly from one range onto another.
  - `get_random(low, high)` returns an integer in `[low, high]`.
  - `get_random_float(low, high)` returns a float in `[low, high)`.
  - Both raise `ValueError` when `low > high`.
  - `quick_sort(items)` returns a new sorted list.
  - `to_utf8` and `from_utf8` convert between text and UTF-8 bytes.
- `enginecore.stopwatch.Stopwatch`: `stop()` returns the milliseconds since construction or the last `start()`. It does not reset the measurement.
- `enginecore.timer.Timer`: a countdown.
  - `start(duration)` arms it.
  - `update(delta)` advances it and calls the callback once the time runs out.
  - `RuntimeError` is raised if it expires with no callback set.
- `enginecore.commands.CommandManager`: a registry of named commands.
  - `add_command` keeps the first registration for a name.
  - `call_command` returns `False` for unknown names.
  - `get_description` returns `""` for unknown names.
  - `get_commands` lists names in sorted order.
- `enginecore.ini`: sectioned `name=value` settings files.
  - Subclass `IniRegion` (`parse`, `get_str_data`) for each `[section]`.
  - Register the regions in an `IniData`.
  - `load_ini(path, data, is_write)` reads entries into the regions. It writes every region, in name order, when `is_write` is true or when the file cannot be read.
  - Lines starting with `#` are skipped, and text after a `#` is dropped.
- `enginecore.objloader`: `parse_obj(lines)` and `load_obj(path)` read Wavefront OBJ data with triangular `v/vt/vn` faces.
  - They return an `ObjMesh` with flat per-corner `vertex_coords`, `normal_coords`, `texture_coords` and `indices`.
  - Malformed lines and out-of-range indices raise `ValueError`.
- Image writers. All take 8-bit interleaved pixels, except HDR, which takes floats.
  - `enginecore.pngwrite`
    - `encode_png` and `write_png` write PNG, with optional row stride, vertical flip and forced filter.
    - `save_image_png` writes a bottom-up buffer, as read back from a framebuffer.
    - `crc32` and `zlib_compress` are the chunk checksum and the built-in fixed-Huffman deflate.
  - `enginecore.rasterwrite`
    - `encode_bmp` and `write_bmp` write BMP (24-bit, or 32-bit with a V4 header for RGBA).
    - `encode_tga` and `write_tga` write TGA, raw or run-length encoded.
  - `enginecore.hdrwrite`: `encode_hdr` and `write_hdr` write Radiance RGBE files with run-length encoded scanlines.
  - `enginecore.jpegwrite`: `encode_jpeg` and `write_jpeg` write baseline JPEG. At quality 90 and below the chroma is subsampled 2x2.

## What it does not do

- There is no logging facility.
- There are no GUI widgets, windowing, rendering or sound.
- The image modules only write images. They do not read them.
- No command-line program is installed.

## Install

```
pip install .
```

## Examples

Write a 2×2 RGB image as PNG:

```python
from enginecore.pngwrite import write_png

pixels = bytes([255, 0, 0,  0, 255, 0,
                0, 0, 255,  255, 255, 255])
write_png("out.png", pixels, 2, 2, 3)
```

Fire a callback after half a second of simulated time:

```python
from enginecore.timer import Timer

timer = Timer()
timer.set_callback(lambda: print("done"))
timer.start(0.5)
timer.update(0.3)
timer.update(0.3)   # prints "done"
```

Register and call a command:

```python
from enginecore.commands import CommandManager

commands = CommandManager()
commands.add_command("echo", "print its arguments", lambda args: print(*args))
commands.call_command("echo", ["hello", "world"])
print(commands.get_commands())   # ['echo']
```

## Running the tests

```
pip install .[test]
pytest
```