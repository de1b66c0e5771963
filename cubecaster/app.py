"""Game setup: command-line checks, initial state and key handling."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cubecaster.controls import KeyLike, handle_key
from cubecaster.grid import CubError, Player, build_cells, count_points, find_player, is_cub_file
from cubecaster.render import FrameBuffer, render
from cubecaster.textures import Texture

WINDOW_WIDTH = 500
WINDOW_HEIGHT = 500


class ArgumentError(CubError):
    """Raised when the command line does not name a usable .cub file."""


def check_arguments(argv: Optional[Sequence[str]] = None) -> str:
    """Check that the arguments hold exactly one readable ``.cub`` file and return its path.

    ``argv`` excludes the program name; None means the process arguments.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        raise ArgumentError("Only one argument allowed")
    path = args[0]
    try:
        if not is_cub_file(path):
            raise ArgumentError("Not .cub file")
    except ArgumentError:
        raise
    except CubError as exc:
        raise ArgumentError(str(exc)) from exc
    try:
        with open(path, "r+b"):
            pass
    except OSError as exc:
        raise ArgumentError("Invalid file") from exc
    return path


class Game:
    """A running view of a map: the player, the textures and the last frame drawn."""

    def __init__(
        self,
        rows: Sequence[str],
        textures: Sequence[Texture],
        ceiling: int,
        floor: int,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        title: str = "cub3D",
    ) -> None:
        if len(textures) != 4:
            raise ValueError(f"expected 4 textures, got {len(textures)}")
        self.rows = list(rows)
        self.textures = tuple(textures)
        self.ceiling = ceiling
        self.floor = floor
        self.title = title
        self.info = count_points(self.rows)
        player = find_player(build_cells(self.rows))
        if player is None:
            raise CubError("the map has no player start position")
        self.player: Player = player
        self.frame = FrameBuffer(width, height)
        self.running = True
        self.redraw()

    def redraw(self) -> FrameBuffer:
        """Draw the current view into a fresh frame and return it."""
        frame = FrameBuffer(self.frame.width, self.frame.height)
        render(
            frame,
            self.rows,
            self.info,
            self.player,
            self.textures,
            self.ceiling,
            self.floor,
        )
        self.frame = frame
        return frame

    def press(self, key: KeyLike) -> bool:
        """Apply a key press and redraw; returns False once the game is closed."""
        if not self.running:
            return False
        if not handle_key(self.player, key):
            self.running = False
            return False
        self.redraw()
        return True