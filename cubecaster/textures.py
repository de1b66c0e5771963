"""Wall textures: loading images and reading their pixels."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence, Union

from PIL import Image

from cubecaster.grid import CubError

PathLike = Union[str, "os.PathLike[str]"]


class TextureError(CubError):
    """Raised when a texture cannot be loaded or is malformed."""


@dataclass(frozen=True)
class Texture:
    """An image of ``width`` by ``height`` pixels stored row by row as 0xRRGGBB."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise TextureError("texture dimensions must be positive")
        pixels = tuple(self.pixels)
        if len(pixels) != self.width * self.height:
            raise TextureError(
                f"expected {self.width * self.height} pixels, got {len(pixels)}"
            )
        object.__setattr__(self, "pixels", pixels)

    def pixel(self, x: int, y: int) -> int:
        """The colour at column ``x`` and row ``y``; 0 outside the image."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return self.pixels[y * self.width + x]

    @classmethod
    def from_file(cls, path: PathLike) -> "Texture":
        """Load any image file Pillow can read."""
        try:
            with Image.open(path) as image:
                rgb = image.convert("RGB")
                width, height = rgb.size
                raw = rgb.tobytes()
        except (OSError, ValueError) as exc:
            raise TextureError(f"Bad Texture: {os.fspath(path)}") from exc
        pixels = tuple(
            (r << 16) | (g << 8) | b
            for r, g, b in zip(raw[0::3], raw[1::3], raw[2::3])
        )
        return cls(width, height, pixels)


def load_textures(
    east: PathLike, south: PathLike, west: PathLike, north: PathLike
) -> tuple[Texture, Texture, Texture, Texture]:
    """Load the four wall textures, indexed by the side a ray hits (E, S, W, N)."""
    return tuple(Texture.from_file(path) for path in (east, south, west, north))