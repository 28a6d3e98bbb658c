"""Core gameplay logic — tilts the board, merges tiles, and checks game over."""

from __future__ import annotations

import logging
from collections.abc import Callable

from backend.config import MAX_PIECE
from backend.engine.gameplay.rules import is_game_over
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction, Tile

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    *on_change*, when given, is called with the game after every operation
    that mutates it: :meth:`clear`, :meth:`add_tile` and any :meth:`tilt`
    that moved a tile.
    """

    def __init__(
        self,
        size: int,
        *,
        max_piece: int = MAX_PIECE,
        on_change: Callable[[GamePlay], None] | None = None,
    ) -> None:
        self.max_piece = max_piece
        self.state = GameState(Board(size))
        self._on_change = on_change

    @classmethod
    def from_values(
        cls,
        values: list[list[int]],
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
        *,
        max_piece: int = MAX_PIECE,
        on_change: Callable[[GamePlay], None] | None = None,
    ) -> "GamePlay":
        """Create a game from ``values[row][col]`` (row 0 at the bottom).

        The given score, max score and game-over flag are taken as-is.
        """
        obj = object.__new__(cls)
        obj.max_piece = max_piece
        obj.state = GameState(Board.from_values(values), score, max_score, game_over)
        obj._on_change = on_change
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def max_score(self) -> int:
        return self.state.max_score

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def moves(self) -> int:
        return self.state.moves

    def tile(self, col: int, row: int) -> Tile | None:
        return self.state.board.tile(col, row)

    # -- mutation -------------------------------------------------------------

    def clear(self) -> None:
        """Empty the board and reset the score."""
        self.state.reset()
        self._notify()

    def add_tile(self, tile: Tile) -> None:
        """Add *tile* to the board.  Its cell must be empty."""
        self.state.board.add_tile(tile)
        self._check_game_over()
        self._notify()

    def tilt(self, direction: Direction) -> bool:
        """Slide every tile toward *direction*.  Returns True if the board changed.

        Two tiles of equal value that meet merge into one of twice the
        value, and the new value is added to the score.  A tile takes part
        in at most one merge per tilt, so of three equal tiles in a line
        only the two nearest the destination edge merge.
        """
        direction = Direction(direction)
        board = self.state.board
        size = board.size
        merged = [[False] * size for _ in range(size)]
        changed = False

        with board.viewing(direction):
            for col in range(size):
                for row in range(size - 1, -1, -1):
                    tile = board.view(col, row)
                    if tile is None:
                        continue
                    landing = self._landing_row(board, col, row, tile, merged)
                    if landing == row:
                        continue
                    if board.move(col, landing, tile):
                        self.state.add_score(board.view(col, landing).value)
                    changed = True

        self._check_game_over()
        logger.debug(
            "tilt %s changed=%s score=%d", direction.value, changed, self.score
        )
        if changed:
            self.state.increment_moves()
            self._notify()
        return changed

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        board = self.state.board
        lines = ["", "["]
        for row in range(board.size - 1, -1, -1):
            cells = []
            for col in range(board.size):
                t = board.tile(col, row)
                cells.append("|    " if t is None else f"|{t.value:4d}")
            lines.append("".join(cells) + "|")
        over = "over" if self.game_over else "not over"
        lines.append(f"] {self.score} (max: {self.max_score}) (game is {over}) ")
        return "\n".join(lines) + "\n"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _landing_row(
        board: Board, col: int, row: int, tile: Tile, merged: list[list[bool]]
    ) -> int:
        """Return the logical row *tile* at ``(col, row)`` slides up to.

        Marks the destination in *merged* when the tile will merge there.
        """
        size = board.size
        if row >= size - 1:
            return row
        for i in range(row + 1, size):
            other = board.view(col, i)
            if other is None:
                continue
            if other.value != tile.value or merged[col][i]:
                return i - 1
            merged[col][i] = True
            return i
        return size - 1

    def _check_game_over(self) -> None:
        self.state.update_game_over(is_game_over(self.state.board, self.max_piece))

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)
