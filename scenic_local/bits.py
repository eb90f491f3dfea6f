"""Bit helpers on unsigned 32-bit integers."""

_U32_MASK = 0xFFFFFFFF


def _check_u32(value: int) -> int:
    if not 0 <= value <= _U32_MASK:
        raise ValueError(f"value {value!r} is not an unsigned 32-bit integer")
    return value


def ilog2_u32(value: int) -> int:
    """Return the index of the most significant set bit of ``value``.

    Raises ValueError for zero, where the result is undefined.
    """
    _check_u32(value)
    if value == 0:
        raise ValueError("ilog2 of zero is undefined")
    return value.bit_length() - 1


def ctz_u32(value: int) -> int:
    """Return the number of trailing zero bits of ``value``.

    Raises ValueError for zero, where the result is undefined.
    """
    _check_u32(value)
    if value == 0:
        raise ValueError("trailing zero count of zero is undefined")
    return (value & -value).bit_length() - 1


def roundup_pow2_u32(value: int) -> int:
    """Return the smallest power of two not less than ``value``.

    Arithmetic wraps at 32 bits, so zero and values above 2**31 give 0.
    """
    _check_u32(value)
    value = (value - 1) & _U32_MASK
    for shift in (1, 2, 4, 8, 16):
        value |= value >> shift
    return (value + 1) & _U32_MASK


def haszero_u32(value: int) -> bool:
    """Return True if any of the four bytes of ``value`` is zero."""
    _check_u32(value)
    return ((value - 0x01010101) & ~value & 0x80808080 & _U32_MASK) != 0