"""Image records kept by id, with pixels converted to RGBA for a texture backend."""

from __future__ import annotations

import enum
import io
import itertools
import struct
from collections.abc import Iterator
from dataclasses import dataclass

import PIL.Image

_HEADER = struct.Struct("=5I")

ImageId = bytes | bytearray | str


class ImageFormat(enum.IntEnum):
    FILE = 0
    GRAY = 1
    GRAY_ALPHA = 2
    RGB = 3
    RGBA = 4


class ImageError(Exception):
    """Raised when image data cannot be decoded or stored."""


class ImageOps:
    """Texture backend; this default keeps RGBA textures in memory."""

    def __init__(self) -> None:
        self.textures: dict[int, bytes] = {}
        self._ids = itertools.count(1)

    def create(self, width: int, height: int, pixels: bytes) -> int:
        image_id = next(self._ids)
        self.textures[image_id] = bytes(pixels)
        return image_id

    def update(self, image_id: int, pixels: bytes) -> None:
        self.textures[image_id] = bytes(pixels)

    def delete(self, image_id: int) -> None:
        self.textures.pop(image_id, None)


@dataclass
class Image:
    id: bytes
    image_id: int
    width: int
    height: int
    format: ImageFormat
    pixels: bytearray


def _format(fmt: int) -> ImageFormat:
    try:
        return ImageFormat(fmt)
    except ValueError as exc:
        raise ImageError(f"unknown image format {fmt!r}") from exc


def _require(data: bytes, needed: int) -> None:
    if len(data) < needed:
        raise ImageError(f"pixel data too short: need {needed} bytes, got {len(data)}")


def _decode_file(data: bytes, width: int, height: int) -> bytearray:
    try:
        with PIL.Image.open(io.BytesIO(data)) as decoded:
            rgba = decoded.convert("RGBA")
    except (OSError, ValueError, PIL.Image.DecompressionBombError) as exc:
        raise ImageError(f"unable to decode image: {exc}") from exc
    if rgba.size != (width, height):
        raise ImageError("image size mismatch")
    return bytearray(rgba.tobytes())


def convert_pixels(data: bytes, width: int, height: int, fmt: int) -> bytearray:
    """Convert ``data`` in format ``fmt`` to ``width`` x ``height`` RGBA pixels."""
    fmt = _format(fmt)
    data = bytes(data)
    count = width * height
    if fmt is ImageFormat.FILE:
        return _decode_file(data, width, height)
    if fmt is ImageFormat.RGBA:
        _require(data, count * 4)
        return bytearray(data[: count * 4])

    out = bytearray(count * 4)
    if fmt is ImageFormat.GRAY:
        _require(data, count)
        gray = data[:count]
        out[0::4] = gray
        out[1::4] = gray
        out[2::4] = gray
        out[3::4] = b"\xff" * count
    elif fmt is ImageFormat.GRAY_ALPHA:
        _require(data, count * 2)
        gray = data[0 : count * 2 : 2]
        out[0::4] = gray
        out[1::4] = gray
        out[2::4] = gray
        out[3::4] = data[1 : count * 2 : 2]
    else:
        _require(data, count * 3)
        out[0::4] = data[0 : count * 3 : 3]
        out[1::4] = data[1 : count * 3 : 3]
        out[2::4] = data[2 : count * 3 : 3]
        out[3::4] = b"\xff" * count
    return out


def _key(image_id: ImageId) -> bytes:
    return image_id.encode("utf-8") if isinstance(image_id, str) else bytes(image_id)


class ImageStore:
    """Images keyed by id; each owns a texture in the backend."""

    def __init__(self, ops: ImageOps | None = None) -> None:
        self.ops = ops if ops is not None else ImageOps()
        self._images: dict[bytes, Image] = {}

    def __len__(self) -> int:
        return len(self._images)

    def __contains__(self, image_id: object) -> bool:
        if not isinstance(image_id, (bytes, bytearray, str)):
            return False
        return _key(image_id) in self._images

    def __iter__(self) -> Iterator[bytes]:
        return iter(list(self._images))

    def get(self, image_id: ImageId) -> Image | None:
        """Return the image stored under ``image_id``, or None."""
        return self._images.get(_key(image_id))

    def put(
        self, image_id: ImageId, width: int, height: int, fmt: int, data: bytes
    ) -> Image:
        """Create an image or replace the pixels of an existing one.

        An existing image cannot change its size.
        """
        key = _key(image_id)
        existing = self._images.get(key)
        if existing is not None and (width, height) != (
            existing.width,
            existing.height,
        ):
            raise ImageError("cannot change image size")
        pixels = convert_pixels(data, width, height, fmt)
        if existing is None:
            image = Image(
                id=key,
                image_id=self.ops.create(width, height, pixels),
                width=width,
                height=height,
                format=_format(fmt),
                pixels=pixels,
            )
            self._images[key] = image
            return image
        existing.pixels[:] = pixels
        self.ops.update(existing.image_id, existing.pixels)
        return existing

    def put_message(self, payload: bytes) -> Image:
        """Store an image from a put-image message body.

        The body holds id length, blob size, width, height and format as
        native unsigned 32-bit integers, then the id, then the pixel data.
        """
        payload = bytes(payload)
        if len(payload) < _HEADER.size:
            raise ImageError("truncated image header")
        id_length, _blob_size, width, height, fmt = _HEADER.unpack_from(payload)
        start = _HEADER.size
        end = start + id_length
        if len(payload) < end:
            raise ImageError("truncated image id")
        return self.put(payload[start:end], width, height, fmt, payload[end:])

    def remove(self, image_id: ImageId) -> bool:
        """Delete an image and its texture; False if there was none."""
        image = self._images.pop(_key(image_id), None)
        if image is None:
            return False
        self.ops.delete(image.image_id)
        return True

    def reset(self) -> None:
        """Delete every image and its texture."""
        for image in list(self._images.values()):
            self.ops.delete(image.image_id)
        self._images.clear()