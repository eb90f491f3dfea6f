"""Pixel helpers for the glyph cache: integer hashing and exponential blur."""

import math
import struct

_U32_MASK = 0xFFFFFFFF

_ALPHA_PRECISION = 16
_Z_PRECISION = 7


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def hashint(a: int) -> int:
    """Mix the bits of an unsigned 32-bit integer.

    The mapping is a bijection on 32-bit values.
    """
    if not 0 <= a <= _U32_MASK:
        raise ValueError(f"value {a!r} is not an unsigned 32-bit integer")
    a = (a + (~(a << 15) & _U32_MASK)) & _U32_MASK
    a ^= a >> 10
    a = (a + (a << 3)) & _U32_MASK
    a ^= a >> 6
    a = (a + (~(a << 11) & _U32_MASK)) & _U32_MASK
    a ^= a >> 16
    return a


def _step(z: int, value: int, alpha: int) -> int:
    return z + ((alpha * ((value << _Z_PRECISION) - z)) >> _ALPHA_PRECISION)


def _blur_horizontal(
    data: bytearray, offset: int, width: int, height: int, stride: int, alpha: int
) -> None:
    for row in range(height):
        base = offset + row * stride
        z = 0
        for pos in range(base + 1, base + width):
            z = _step(z, data[pos], alpha)
            data[pos] = (z >> _Z_PRECISION) & 0xFF
        data[base + width - 1] = 0
        z = 0
        for pos in range(base + width - 2, base - 1, -1):
            z = _step(z, data[pos], alpha)
            data[pos] = (z >> _Z_PRECISION) & 0xFF
        data[base] = 0


def _blur_vertical(
    data: bytearray, offset: int, width: int, height: int, stride: int, alpha: int
) -> None:
    for column in range(width):
        base = offset + column
        z = 0
        for pos in range(base + stride, base + height * stride, stride):
            z = _step(z, data[pos], alpha)
            data[pos] = (z >> _Z_PRECISION) & 0xFF
        data[base + (height - 1) * stride] = 0
        z = 0
        for pos in range(base + (height - 2) * stride, base - 1, -stride):
            z = _step(z, data[pos], alpha)
            data[pos] = (z >> _Z_PRECISION) & 0xFF
        data[base] = 0


def blur(
    data: bytearray, offset: int, width: int, height: int, stride: int, radius: int
) -> None:
    """Blur a ``width`` x ``height`` region of ``data`` in place.

    The region starts at ``offset`` and its rows are ``stride`` bytes apart.
    A radius below 1 leaves the data untouched; the region border ends up zero.
    """
    if radius < 1:
        return
    if width < 1 or height < 1:
        raise ValueError("blur region must be at least 1x1")
    last = offset + (height - 1) * stride + width - 1
    if offset < 0 or last >= len(data):
        raise ValueError("blur region lies outside the buffer")
    # alpha chosen so that 90% of the kernel lies within the radius
    sigma = _f32(radius * _f32(0.57735))
    falloff = _f32(1.0 - _f32(math.exp(_f32(-2.3 / _f32(sigma + 1.0)))))
    alpha = int((1 << _ALPHA_PRECISION) * falloff)
    for _ in range(2):
        _blur_vertical(data, offset, width, height, stride, alpha)
        _blur_horizontal(data, offset, width, height, stride, alpha)