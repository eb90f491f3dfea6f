"""Incremental UTF-8 decoding driven by a small state machine.

Once the decoder hits an invalid sequence it stays in the reject state.
Every later byte is then ignored until :meth:`Utf8Decoder.reset` is called.
"""

from collections.abc import Iterable, Iterator

UTF8_ACCEPT = 0
UTF8_REJECT = 12


def _build_classes() -> bytes:
    ranges = (
        (0x00, 0x7F, 0),
        (0x80, 0x8F, 1),
        (0x90, 0x9F, 9),
        (0xA0, 0xBF, 7),
        (0xC0, 0xC1, 8),
        (0xC2, 0xDF, 2),
        (0xE0, 0xE0, 10),
        (0xE1, 0xEC, 3),
        (0xED, 0xED, 4),
        (0xEE, 0xEF, 3),
        (0xF0, 0xF0, 11),
        (0xF1, 0xF3, 6),
        (0xF4, 0xF4, 5),
        (0xF5, 0xFF, 8),
    )
    table = bytearray(256)
    for low, high, cls in ranges:
        table[low : high + 1] = bytes([cls]) * (high - low + 1)
    return bytes(table)


_CLASSES = _build_classes()

# Rows are states (multiples of 12), columns are byte classes.
_TRANSITIONS = (
    (0, 12, 24, 36, 60, 96, 84, 12, 12, 12, 48, 72),
    (12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12),
    (12, 0, 12, 12, 12, 12, 12, 0, 12, 0, 12, 12),
    (12, 24, 12, 12, 12, 12, 12, 24, 12, 24, 12, 12),
    (12, 12, 12, 12, 12, 12, 12, 24, 12, 12, 12, 12),
    (12, 24, 12, 12, 12, 12, 12, 12, 12, 24, 12, 12),
    (12, 12, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12),
    (12, 36, 12, 12, 12, 12, 12, 36, 12, 36, 12, 12),
    (12, 36, 12, 12, 12, 12, 12, 12, 12, 12, 12, 12),
)


class Utf8Decoder:
    """Byte-at-a-time UTF-8 decoder.

    After :meth:`feed` returns :data:`UTF8_ACCEPT`, :attr:`codepoint` holds
    the completed code point.
    """

    def __init__(self) -> None:
        self.state = UTF8_ACCEPT
        self.codepoint = 0

    def reset(self) -> None:
        """Return the decoder to its initial state."""
        self.state = UTF8_ACCEPT
        self.codepoint = 0

    @property
    def rejected(self) -> bool:
        """True once an invalid sequence has been seen."""
        return self.state == UTF8_REJECT

    def feed(self, byte: int) -> int:
        """Consume one byte and return the new state."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte {byte!r} is out of range")
        cls = _CLASSES[byte]
        if self.state != UTF8_ACCEPT:
            self.codepoint = ((byte & 0x3F) | (self.codepoint << 6)) & 0xFFFFFFFF
        else:
            self.codepoint = (0xFF >> cls) & byte
        self.state = _TRANSITIONS[self.state // 12][cls]
        return self.state


def decode(data: Iterable[int]) -> Iterator[int]:
    """Yield the code points decoded from a sequence of bytes.

    Bytes that do not complete a code point are skipped; after an invalid
    sequence nothing more is yielded.
    """
    decoder = Utf8Decoder()
    for byte in data:
        if decoder.feed(byte) == UTF8_ACCEPT:
            yield decoder.codepoint