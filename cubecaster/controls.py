"""Keyboard controls: walking, strafing and turning the player."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional, Union

from cubecaster.grid import Player

ROTATION_STEP = math.pi / 12


class Key(IntEnum):
    """X11 key codes the game reacts to."""

    ESCAPE = 65307
    LEFT = 65361
    RIGHT = 65363
    W = 119
    A = 97
    S = 115
    D = 100


KeyLike = Union[Key, int]

_MOVEMENT_KEYS = (Key.W, Key.A, Key.S, Key.D)


def _as_key(key: KeyLike) -> Optional[Key]:
    try:
        return Key(key)
    except ValueError:
        return None


def move_ratio(axis: float) -> float:
    """Share of a step, from -50 to 50, taken along a camera angle in radians."""
    ratio = abs(math.fmod(abs(axis), 2 * math.pi) - math.pi)
    return ratio * (100 / math.pi) - 50


def move(player: Player, key: KeyLike) -> None:
    """Walk forward or back (W, S) or strafe (A, D); other keys do nothing."""
    k = _as_key(key)
    if k is Key.W:
        player.x += move_ratio(player.camera_x) / 100
        player.y -= move_ratio(player.camera_y) / 100
    elif k is Key.S:
        player.x -= move_ratio(player.camera_x) / 100
        player.y += move_ratio(player.camera_y) / 100
    elif k is Key.D:
        player.x += move_ratio(player.camera_y) / 100
        player.y += move_ratio(player.camera_x) / 100
    elif k is Key.A:
        player.x -= move_ratio(player.camera_y) / 100
        player.y -= move_ratio(player.camera_x) / 100


def rotate(player: Player, key: KeyLike) -> None:
    """Turn left or right by a twelfth of a half turn; other keys do nothing."""
    k = _as_key(key)
    if k is Key.LEFT:
        player.camera_x += ROTATION_STEP
        player.camera_y += ROTATION_STEP
    elif k is Key.RIGHT:
        player.camera_x -= ROTATION_STEP
        player.camera_y -= ROTATION_STEP


def handle_key(player: Player, key: KeyLike) -> bool:
    """Apply a key press to the player.

    Returns False when the key asks to close the game, True otherwise.
    Unknown keys leave the player as it is.
    """
    k = _as_key(key)
    if k is Key.ESCAPE:
        return False
    if k in (Key.LEFT, Key.RIGHT):
        rotate(player, k)
    elif k in _MOVEMENT_KEYS:
        move(player, k)
    return True