"""A grid of pixels that can be written out as a PPM image."""

from __future__ import annotations

import math
import os
from enum import Enum
from pathlib import Path
from typing import Iterator

from raytracer.colors import Pixel
from raytracer.tuples import Color


class PpmFormat(Enum):
    """The PPM flavours: plain text (P3) or binary (P6)."""

    P3 = "P3"
    P6 = "P6"


class Canvas:
    """A ``width`` x ``height`` image addressed by ``(row, col)``."""

    __slots__ = ("_width", "_height", "_max_color", "_pixels")

    def __init__(self, width: int, height: int, max_color: int = 255) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, not {width}x{height}")
        if not 0 <= max_color <= 255:
            raise ValueError(f"max_color {max_color} outside 0..255")
        self._width = width
        self._height = height
        self._max_color = max_color
        black = Pixel.black()
        self._pixels = [[black] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def max_color(self) -> int:
        return self._max_color

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"pixel ({row}, {col}) outside a canvas of {self._height} rows "
                f"and {self._width} columns"
            )

    def __getitem__(self, key: tuple[int, int]) -> Pixel:
        row, col = key
        self._check(row, col)
        return self._pixels[row][col]

    def __setitem__(self, key: tuple[int, int], pixel: Pixel) -> None:
        row, col = key
        self._check(row, col)
        self._pixels[row][col] = pixel

    def __iter__(self) -> Iterator[list[Pixel]]:
        """Iterate over copies of the rows, top to bottom."""
        return (list(row) for row in self._pixels)

    def _channel(self, value: float) -> int:
        if math.isnan(value):
            return 0
        clamped = min(max(value * self._max_color, 0.0), float(self._max_color))
        return math.floor(clamped + 0.5)

    def write_pixel(self, color: Color, row: int, col: int) -> None:
        """Store ``color`` at ``(row, col)``, scaled and clamped to the colour range."""
        self[row, col] = Pixel(
            self._channel(color.r), self._channel(color.g), self._channel(color.b)
        )

    def to_bytes(self) -> bytes:
        """Return the raw RGB bytes of all pixels in row-major order."""
        return bytes(
            channel
            for row in self._pixels
            for pixel in row
            for channel in (pixel.r, pixel.g, pixel.b)
        )

    def to_ppm(self, fmt: PpmFormat = PpmFormat.P6) -> bytes:
        """Return the whole image encoded as PPM."""
        header = f"{fmt.value}\n{self._width} {self._height}\n{self._max_color}\n"
        if fmt is PpmFormat.P6:
            return header.encode("ascii") + self.to_bytes()
        body = "".join(
            "".join(f"{pixel} " for pixel in row) + "\n" for row in self._pixels
        )
        return (header + body + "\n").encode("ascii")

    def write_ppm(
        self, path: str | os.PathLike[str], fmt: PpmFormat = PpmFormat.P6
    ) -> None:
        """Write the image to ``path`` as PPM."""
        Path(path).write_bytes(self.to_ppm(fmt))