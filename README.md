# scenic_local

Building blocks for a local scene renderer. The package keeps images that
arrive as messages and converts their pixels to RGBA. It also has the small
helpers a glyph cache needs: incremental UTF-8 decoding, an integer hash and
an exponential blur for glyph bitmaps. It also includes 32-bit bit tricks and
a stable merge sort.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Modules

- `scenic_local.images`
  - `ImageFormat` is an enum of the pixel formats: `FILE`, `GRAY`,
    `GRAY_ALPHA`, `RGB` and `RGBA`.
  - `convert_pixels(data, width, height, fmt)` returns RGBA bytes. `FILE` data
    is decoded with Pillow and must have the given size.
  - `ImageStore` keeps `Image` records by id. The id may be bytes or a str.
    Its methods are `get`, `put`, `put_message`, `remove` and `reset`. Each
    image owns a texture in an `ImageOps` backend, and the default backend
    keeps the textures in memory.
  - `put_message(payload)` reads a message body. The body starts with id
    length, blob size, width, height and format as native unsigned 32-bit
    integers, followed by the id and then the pixel data.
  - Errors raise `ImageError`: unknown formats, data that is too short or
    cannot be decoded, a size mismatch, and any attempt to change the size of
    an existing image.
- `scenic_local.utf8`
  - `Utf8Decoder` is a byte-at-a-time, table-driven decoder.
  - `decode(data)` yields code points. After an invalid sequence it yields
    nothing more.
- `scenic_local.raster`
  - `hashint(a)` is a bijective 32-bit integer hash.
  - `blur(data, offset, width, height, stride, radius)` blurs a region of a
    `bytearray` in place. It leaves the border of the region at zero.
- `scenic_local.bits`
  - `ilog2_u32`, `ctz_u32`, `roundup_pow2_u32` and `haszero_u32` work on
    unsigned 32-bit values. They raise `ValueError` for out-of-range input.
    `ilog2_u32` and `ctz_u32` also raise it for zero.
- `scenic_local.chain`
  - `mergesort(items, cmp)` is a stable sort built from power-of-two buckets.
    `cmp` is a three-way comparator.
  - `merge` and `merge_degenerated` are the steps it is made from.

## Example

```python
from scenic_local.images import ImageFormat, ImageStore
from scenic_local.utf8 import decode

store = ImageStore()
store.put(b"dot", 1, 1, ImageFormat.GRAY, bytes([0x80]))
print(store.get(b"dot").pixels)  # bytearray(b'\x80\x80\x80\xff')

print(list(decode("h\u00e9".encode())))  # [104, 233]
```

## What it does not do

This package does not:

- pack glyphs into a texture atlas, load TrueType fonts or lay out text;
- keep a store of fonts;
- draw anything or open a window;
- provide a command to run.

`ImageStore` hands pixels to an `ImageOps` backend. Rendering them is up to
that backend.