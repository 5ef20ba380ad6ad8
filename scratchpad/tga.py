"""Writing uncompressed true-colour TGA images."""

from __future__ import annotations

import argparse
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Sequence

Pixel = tuple[int, int, int]

_HEADER_FORMAT = "<BBBHHBHHHHBB"
UNCOMPRESSED_TRUE_COLOR = 2
GREEN: Pixel = (0, 255, 0)


@dataclass(frozen=True)
class TgaHeader:
    """The 18-byte TGA file header."""

    width: int
    height: int
    id_length: int = 0
    color_map_type: int = 0
    image_type: int = UNCOMPRESSED_TRUE_COLOR
    first_entry_index: int = 0
    color_map_length: int = 0
    color_map_entry_size: int = 0
    x_origin: int = 0
    y_origin: int = 0
    pixel_depth: int = 24
    image_descriptor: int = 0

    def to_bytes(self) -> bytes:
        """Return the header in its little-endian on-disk form."""
        try:
            return struct.pack(
                _HEADER_FORMAT,
                self.id_length,
                self.color_map_type,
                self.image_type,
                self.first_entry_index,
                self.color_map_length,
                self.color_map_entry_size,
                self.x_origin,
                self.y_origin,
                self.width,
                self.height,
                self.pixel_depth,
                self.image_descriptor,
            )
        except struct.error as exc:
            raise ValueError(f"header field out of range: {exc}") from None


@dataclass
class TgaImage:
    """A header together with RGB pixels in row order."""

    header: TgaHeader
    pixels: list[Pixel] = field(default_factory=list)
    image_id: bytes = b""
    color_map: bytes = b""

    def to_bytes(self) -> bytes:
        """Return the complete file contents; pixels are stored as BGR."""
        header = self.header
        if len(self.image_id) != header.id_length:
            raise ValueError("image id length does not match the header")
        if len(self.color_map) != header.color_map_length:
            raise ValueError("colour map length does not match the header")
        expected = header.width * header.height
        if len(self.pixels) != expected:
            raise ValueError(f"expected {expected} pixels, got {len(self.pixels)}")
        data = bytearray(header.to_bytes())
        data += self.image_id
        data += self.color_map
        for red, green, blue in self.pixels:
            data += bytes((blue, green, red))
        return bytes(data)

    def write(self, stream: BinaryIO) -> None:
        stream.write(self.to_bytes())


def make_header(width: int, height: int) -> TgaHeader:
    """Return a header for an uncompressed 24-bit image without id or colour map."""
    for name, value in (("width", width), ("height", height)):
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"{name} must be between 0 and 65535")
    return TgaHeader(width=width, height=height)


def solid_image(width: int, height: int, color: Pixel = GREEN) -> TgaImage:
    """Return an image of the given size filled with one RGB colour."""
    if len(color) != 3 or not all(0 <= c <= 255 for c in color):
        raise ValueError("colour must be three values between 0 and 255")
    header = make_header(width, height)
    return TgaImage(header, [tuple(color)] * (width * height))


def main(argv: Sequence[str] | None = None) -> int:
    """Write a solid green image to a TGA file."""
    parser = argparse.ArgumentParser(description="Write a solid green TGA image.")
    parser.add_argument("--output", default="testfile.tga")
    parser.add_argument("--width", type=int, default=400)
    parser.add_argument("--height", type=int, default=400)
    args = parser.parse_args(argv)
    try:
        image = solid_image(args.width, args.height)
    except ValueError as exc:
        parser.error(str(exc))
    with open(args.output, "wb") as handle:
        image.write(handle)
    return 0