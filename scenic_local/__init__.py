"""Image store, UTF-8 decoding, glyph blur and bit helpers for a local scene renderer."""

__version__ = "0.1.0"