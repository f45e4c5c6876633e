"""Eight-bit RGB pixels as stored on a canvas."""

from __future__ import annotations

from dataclasses import dataclass

_CHANNEL_MAX = 255


@dataclass(frozen=True)
class Pixel:
    """A pixel with integer channels in the range 0..255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= _CHANNEL_MAX:
                raise ValueError(f"channel value {channel} outside 0..{_CHANNEL_MAX}")

    @classmethod
    def red(cls) -> Pixel:
        return cls(255, 0, 0)

    @classmethod
    def green(cls) -> Pixel:
        return cls(0, 255, 0)

    @classmethod
    def blue(cls) -> Pixel:
        return cls(0, 0, 255)

    @classmethod
    def black(cls) -> Pixel:
        return cls(0, 0, 0)

    @classmethod
    def white(cls) -> Pixel:
        return cls(255, 255, 255)

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b}"