"""Ray casting renderer: background fill, wall columns and the frame buffer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from PIL import Image

from cubecaster.grid import MapInfo, Player
from cubecaster.textures import Texture

FOV = 45 * math.pi / 180
_TWO_PI = 2 * math.pi
_INT_MAX = 2**31 - 1
_NO_CROSSING = 10000.0


class FrameBuffer:
    """A width by height grid of 0xRRGGBB colours, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x`` and row ``y``."""
        self.pixels[self._index(x, y)] = color

    def get(self, x: int, y: int) -> int:
        """The pixel at column ``x`` and row ``y``."""
        return self.pixels[self._index(x, y)]

    def to_image(self) -> Image.Image:
        """The frame as an RGB Pillow image."""
        data = b"".join((c & 0xFFFFFF).to_bytes(3, "big") for c in self.pixels)
        return Image.frombytes("RGB", (self.width, self.height), data)


def _wrap(angle: float) -> float:
    if angle > _TWO_PI:
        return angle - _TWO_PI
    if angle < 0:
        return angle + _TWO_PI
    return angle


@dataclass
class Ray:
    """The state of one cast ray once it has stopped on a wall or left the map.

    ``side`` is 0, 1, 2 or 3 for a wall faced from the west, north, east or
    south, matching the texture order east, south, west, north.
    """

    sinangle: float
    cosa: float
    sina: float
    delta_x: float
    delta_y: float
    prog_x: float
    prog_y: float
    curr_x: float
    curr_y: float
    map_x: int
    map_y: int
    side: int = 0
    tex_x: int = 0

    def _advance(self, rows: Sequence[str], info: MapInfo) -> bool:
        step_x = (self.cosa > 0) - (self.cosa < 0)
        step_y = (self.sina < 0) - (self.sina > 0)
        if self.prog_x <= self.prog_y:
            self.map_x += step_x
            if step_x == 1:
                self.side = 0
            elif step_x == -1:
                self.side = 2
            self.prog_x += self.delta_x
            self.curr_y += self.sina * self.delta_x
        else:
            self.map_y += step_y
            if step_y == 1:
                self.side = 1
            elif step_y == -1:
                self.side = 3
            self.prog_y += self.delta_y
            self.curr_x += self.cosa * self.delta_y
        if not 0 <= self.map_y < info.size_y:
            return True
        if self.map_x < 0 or self.map_x > info.size_x:
            return True
        row = rows[self.map_y]
        return self.map_x < len(row) and row[self.map_x] == "1"

    def texture_x(self, player: Player, width: int) -> int:
        """The texture column, from 0 to ``width - 1``, where the ray meets the wall."""
        if self.side in (0, 2):
            wall = player.y - (self.curr_y - self.sina * self.delta_x)
        else:
            wall = player.x + (self.curr_x - self.cosa * self.delta_y)
        wall -= int(wall)
        return int(abs(wall) * width)


def cast_ray(
    rows: Sequence[str],
    info: MapInfo,
    player: Player,
    column: int,
    width: int,
    fov: float = FOV,
) -> Ray:
    """Cast the ray for screen ``column`` of ``width`` until it hits a wall or leaves the map."""
    if width <= 0:
        raise ValueError("screen width must be positive")
    angle = _wrap((width - column) / width * fov + player.camera_x)
    sinangle = _wrap(angle - fov / 2)
    cosa = math.cos(sinangle)
    sina = math.sin(sinangle)
    if cosa in (1.0, -1.0):
        sina = 0.0
    if sina in (1.0, -1.0):
        cosa = 0.0

    delta_x = _NO_CROSSING if cosa == 0 else abs(1 / cosa)
    delta_y = _NO_CROSSING if sina == 0 else abs(1 / sina)

    frac_x = player.x - int(player.x)
    frac_y = player.y - int(player.y)
    first_x = 1.0
    if cosa > 0:
        first_x = 1 - frac_x
    elif cosa < 0:
        first_x = frac_x
    first_y = 1.0
    if sina > 0:
        first_y = frac_y
    elif sina < 0:
        first_y = 1 - frac_y
    prog_x = abs(delta_x * first_x)
    prog_y = abs(delta_y * first_y)

    ray = Ray(
        sinangle=sinangle,
        cosa=cosa,
        sina=sina,
        delta_x=delta_x,
        delta_y=delta_y,
        prog_x=prog_x,
        prog_y=prog_y,
        curr_x=cosa * prog_y,
        curr_y=sina * prog_x,
        map_x=int(player.x),
        map_y=int(player.y),
    )
    while not ray._advance(rows, info):
        pass
    return ray


def _clamp(value: int, height: int) -> int:
    if value < 0:
        return 0
    if value >= height:
        return height - 1
    return value


def wall_span(ray: Ray, player: Player, height: int) -> tuple[int, int, int]:
    """The wall's ``(line_height, start, end)`` on a screen ``height`` rows tall.

    The distance is corrected for the fish-eye effect; start and end are
    clamped to the screen.
    """
    correction = math.cos(ray.sinangle - player.camera_x)
    if ray.side % 2 == 0:
        distance = (ray.prog_x - ray.delta_x) * correction
    else:
        distance = (ray.prog_y - ray.delta_y) * correction
    if distance <= 0:
        line_height = _INT_MAX
    else:
        line_height = min(int(height / distance), _INT_MAX)
    half_screen = height // 2
    half_line = line_height // 2
    start = _clamp(half_screen - half_line, height)
    end = _clamp(half_screen + half_line, height)
    return line_height, start, end


def fill_background(frame: FrameBuffer, ceiling: int, floor: int) -> None:
    """Paint the upper half of ``frame`` with ``ceiling`` and the rest with ``floor``."""
    split = frame.height // 2 * frame.width
    frame.pixels[:split] = [ceiling] * split
    frame.pixels[split:] = [floor] * (len(frame.pixels) - split)


def draw_column(
    frame: FrameBuffer,
    ray: Ray,
    span: tuple[int, int, int],
    texture: Texture,
    x: int,
) -> None:
    """Draw the textured wall slice of ``span`` into column ``x``, using ``ray.tex_x``."""
    line_height, start, end = span
    if line_height <= 0:
        return
    top, bottom = sorted((start, end))
    step = texture.height / line_height
    tex_pos = (top - frame.height // 2 + line_height // 2) * step
    for y in range(top, bottom):
        tex_y = int(tex_pos) & (texture.height - 1)
        frame.put(x, y, texture.pixel(ray.tex_x, tex_y))
        tex_pos += step


def render(
    frame: FrameBuffer,
    rows: Sequence[str],
    info: MapInfo,
    player: Player,
    textures: Sequence[Texture],
    ceiling: int,
    floor: int,
) -> None:
    """Draw a full view from ``player`` into ``frame``."""
    fill_background(frame, ceiling, floor)
    for column in range(frame.width):
        ray = cast_ray(rows, info, player, column, frame.width)
        span = wall_span(ray, player, frame.height)
        texture = textures[ray.side]
        ray.tex_x = ray.texture_x(player, texture.width)
        draw_column(frame, ray, span, texture, column)