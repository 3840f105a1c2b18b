"""Reading and writing uncompressed 24-bit BMP images."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from typing import ClassVar, Union

import numpy as np

BMP_SIGNATURE = 0x4D42
PIXEL_DATA_OFFSET = 54

PathType = Union[str, "PathLike[str]"]


class BMPError(Exception):
    """Raised when a BMP file cannot be read or written."""


def _row_size(width: int) -> int:
    """Bytes per stored row: three bytes a pixel, padded to four bytes."""
    return (width * 3 + 3) & ~3


@dataclass
class BitmapFileHeader:
    """The 14-byte BITMAPFILEHEADER at the start of a BMP file."""

    type: int = BMP_SIGNATURE
    size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    off_bits: int = PIXEL_DATA_OFFSET

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<HIHHI")

    def pack(self) -> bytes:
        """Return the header as little-endian bytes."""
        try:
            return self.FORMAT.pack(
                self.type, self.size, self.reserved1, self.reserved2, self.off_bits
            )
        except struct.error as exc:
            raise BMPError(f"Cannot encode file header: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> BitmapFileHeader:
        """Parse a header from the first bytes of ``data``."""
        if len(data) < cls.FORMAT.size:
            raise BMPError("Error reading file header.")
        return cls(*cls.FORMAT.unpack_from(data))


@dataclass
class BitmapInfoHeader:
    """The 40-byte BITMAPINFOHEADER that follows the file header."""

    size: int = 40
    width: int = 0
    height: int = 0
    planes: int = 1
    bit_count: int = 24
    compression: int = 0
    size_image: int = 0
    x_pels_per_meter: int = 0
    y_pels_per_meter: int = 0
    clr_used: int = 0
    clr_important: int = 0

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<IiiHHIIiiII")

    def pack(self) -> bytes:
        """Return the header as little-endian bytes."""
        try:
            return self.FORMAT.pack(
                self.size,
                self.width,
                self.height,
                self.planes,
                self.bit_count,
                self.compression,
                self.size_image,
                self.x_pels_per_meter,
                self.y_pels_per_meter,
                self.clr_used,
                self.clr_important,
            )
        except struct.error as exc:
            raise BMPError(f"Cannot encode info header: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> BitmapInfoHeader:
        """Parse a header from the first bytes of ``data``."""
        if len(data) < cls.FORMAT.size:
            raise BMPError("Error reading info header.")
        return cls(*cls.FORMAT.unpack_from(data))


@dataclass(eq=False)
class BMPImage:
    """An RGB image with its BMP headers.

    ``pixels`` is a ``(height, width, 3)`` array of ``uint8`` in red, green,
    blue order, with row 0 at the top of the picture.
    """

    pixels: np.ndarray
    file_header: BitmapFileHeader = field(default_factory=BitmapFileHeader)
    info_header: BitmapInfoHeader = field(default_factory=BitmapInfoHeader)

    def __post_init__(self) -> None:
        pixels = np.asarray(self.pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(
                f"pixels must have shape (height, width, 3), got {pixels.shape}"
            )
        self.pixels = pixels

    @classmethod
    def new(cls, pixels) -> BMPImage:
        """Build an image with fresh 24-bit bottom-up headers."""
        image = cls(pixels)
        image.info_header = BitmapInfoHeader(width=image.width, height=image.height)
        return image

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


def read_bmp(path: PathType) -> BMPImage:
    """Read a 24-bit uncompressed BMP file."""
    try:
        with open(path, "rb") as fp:
            data = fp.read()
    except OSError as exc:
        raise BMPError(f"Error opening file {path}") from exc

    file_header = BitmapFileHeader.unpack(data)
    if file_header.type != BMP_SIGNATURE:
        raise BMPError("Not a valid BMP file.")
    info_header = BitmapInfoHeader.unpack(data[BitmapFileHeader.FORMAT.size :])

    width = info_header.width
    height = abs(info_header.height)
    if width < 0:
        raise BMPError(f"Invalid image width {width}.")

    row_size = _row_size(width)
    stride = width * 3
    offset = file_header.off_bits
    if height and stride:
        needed = offset + (height - 1) * row_size + stride
        if len(data) < needed:
            raise BMPError("Error reading pixel data.")

    raw = data[offset : offset + height * row_size].ljust(height * row_size, b"\0")
    rows = np.frombuffer(raw, dtype=np.uint8).reshape(height, row_size)
    pixels = rows[:, :stride].reshape(height, width, 3)[:, :, ::-1]
    if info_header.height > 0:
        pixels = pixels[::-1]

    return BMPImage(pixels.copy(), file_header, info_header)


def save_bmp(path: PathType, image: BMPImage) -> None:
    """Write ``image`` as a 24-bit uncompressed BMP file.

    The size fields of the image's headers are updated to match the data.
    """
    width, height = image.width, image.height
    row_size = _row_size(width)
    image.info_header.size_image = row_size * height
    image.file_header.size = image.file_header.off_bits + image.info_header.size_image

    rows = image.pixels[:, :, ::-1]
    if image.info_header.height > 0:
        rows = rows[::-1]
    body = np.zeros((height, row_size), dtype=np.uint8)
    body[:, : width * 3] = rows.reshape(height, width * 3)

    headers = image.file_header.pack() + image.info_header.pack()
    try:
        with open(path, "wb") as fp:
            fp.write(headers)
            fp.write(body.tobytes())
    except OSError as exc:
        raise BMPError(f"Error opening output file {path}") from exc