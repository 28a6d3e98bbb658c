"""Board model for the 2048 game."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Tile:
    """A numbered tile at physical board coordinates.

    Tiles are values: moving or merging one produces a new ``Tile``.
    """

    value: int
    col: int
    row: int

    def __post_init__(self) -> None:
        if self.value < 2 or self.value & (self.value - 1):
            raise ValueError(
                f"Tile value must be a power of two >= 2, got {self.value}."
            )

    def at(self, col: int, row: int) -> Tile:
        return replace(self, col=col, row=row)

    def doubled(self, col: int, row: int) -> Tile:
        return Tile(self.value * 2, col, row)


_TRANSFORMS: dict[Direction, Callable[[int, int, int], tuple[int, int]]] = {
    Direction.UP: lambda col, row, last: (col, row),
    Direction.DOWN: lambda col, row, last: (last - col, last - row),
    Direction.RIGHT: lambda col, row, last: (row, last - col),
    Direction.LEFT: lambda col, row, last: (last - row, col),
}


def to_physical(
    direction: Direction, col: int, row: int, size: int
) -> tuple[int, int]:
    """Map logical ``(col, row)`` seen from *direction* to physical storage.

    Every mapping turns "towards *direction*" into "towards increasing
    logical row", so sliding code only ever has to move tiles upward.
    Viewing from ``LEFT`` undoes ``RIGHT`` (and vice versa) and ``DOWN``
    undoes itself.
    """
    return _TRANSFORMS[Direction(direction)](col, row, size - 1)


class Board:
    """Square grid of optional tiles, origin at the bottom-left corner.

    Physical storage is indexed ``(col, row)``.  The viewing perspective
    only affects :meth:`view` and :meth:`move`; :meth:`tile` always reads
    physical coordinates.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}.")
        self.size = size
        self.perspective = Direction.UP
        self._grid: list[list[Tile | None]] = [
            [None] * size for _ in range(size)
        ]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_values(cls, values: list[list[int]]) -> Board:
        """Create a board from ``values[row][col]``, row 0 at the bottom.

        ``0`` marks an empty cell.  Example::

            Board.from_values([[2, 2], [0, 0]])  # two 2s on the bottom row
        """
        if not values or any(len(row) != len(values) for row in values):
            raise ValueError("Board values must be a non-empty square grid.")
        board = cls(len(values))
        for r, row in enumerate(values):
            for c, v in enumerate(row):
                if v:
                    board.add_tile(Tile(v, c, r))
        return board

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major list starting at the bottom row."""
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} cells for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_values(
            [flat[r * size : (r + 1) * size] for r in range(size)]
        )

    # -- queries --------------------------------------------------------------

    def tile(self, col: int, row: int) -> Tile | None:
        self._check_bounds(col, row)
        return self._grid[col][row]

    def view(self, col: int, row: int) -> Tile | None:
        """Return the tile at logical ``(col, row)`` under the current perspective."""
        self._check_bounds(col, row)
        return self.tile(*to_physical(self.perspective, col, row, self.size))

    def tiles(self) -> Iterator[Tile]:
        for column in self._grid:
            for t in column:
                if t is not None:
                    yield t

    def empty_cells(self) -> list[tuple[int, int]]:
        return [
            (c, r)
            for c in range(self.size)
            for r in range(self.size)
            if self._grid[c][r] is None
        ]

    def values(self) -> list[list[int]]:
        """Snapshot as ``values[row][col]`` with 0 for empty cells."""
        return [
            [0 if self._grid[c][r] is None else self._grid[c][r].value
             for c in range(self.size)]
            for r in range(self.size)
        ]

    def copy(self) -> Board:
        board = Board(self.size)
        board._grid = [column[:] for column in self._grid]
        board.perspective = self.perspective
        return board

    # -- perspective ----------------------------------------------------------

    def set_viewing_perspective(self, direction: Direction) -> None:
        self.perspective = Direction(direction)

    @contextmanager
    def viewing(self, direction: Direction) -> Iterator[Board]:
        """Adopt *direction*'s perspective, restoring ``UP`` on exit."""
        self.set_viewing_perspective(direction)
        try:
            yield self
        finally:
            self.set_viewing_perspective(Direction.UP)

    # -- mutation -------------------------------------------------------------

    def add_tile(self, tile: Tile) -> None:
        """Place *tile* at its own coordinates.  The slot must be empty."""
        if self.tile(tile.col, tile.row) is not None:
            raise ValueError(
                f"Cell ({tile.col}, {tile.row}) is already occupied."
            )
        self._grid[tile.col][tile.row] = tile

    def clear(self) -> None:
        for column in self._grid:
            for r in range(self.size):
                column[r] = None
        self.perspective = Direction.UP

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """Move *tile* to logical ``(col, row)``.

        Returns True if it merged with an equal tile already there.  A
        destination holding a different value is a caller error.
        """
        self._check_bounds(col, row)
        dest_col, dest_row = to_physical(self.perspective, col, row, self.size)
        if self.tile(tile.col, tile.row) != tile:
            raise ValueError(f"{tile!r} is not on the board.")
        if (dest_col, dest_row) == (tile.col, tile.row):
            return False
        occupant = self._grid[dest_col][dest_row]
        if occupant is not None and occupant.value != tile.value:
            raise ValueError(
                f"Cannot merge {tile.value} into {occupant.value} "
                f"at ({dest_col}, {dest_row})."
            )

        self._grid[tile.col][tile.row] = None
        if occupant is None:
            self._grid[dest_col][dest_row] = tile.at(dest_col, dest_row)
            return False
        self._grid[dest_col][dest_row] = tile.doubled(dest_col, dest_row)
        return True

    # -- helpers --------------------------------------------------------------

    def _check_bounds(self, col: int, row: int) -> None:
        if not (0 <= col < self.size and 0 <= row < self.size):
            raise IndexError(
                f"({col}, {row}) is outside a {self.size}×{self.size} board."
            )
