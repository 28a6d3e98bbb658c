"""Terminal-state predicates.

All checks read physical coordinates, so they do not depend on the
board's current viewing perspective.
"""

from __future__ import annotations

from backend.config import MAX_PIECE
from backend.models.board import Board


def empty_space_exists(board: Board) -> bool:
    return any(
        board.tile(c, r) is None
        for r in range(board.size)
        for c in range(board.size)
    )


def max_tile_exists(board: Board, max_piece: int = MAX_PIECE) -> bool:
    return any(t.value == max_piece for t in board.tiles())


def same_value_neighbor_exists(board: Board) -> bool:
    """Return True if two orthogonally adjacent tiles share a value.

    Only the right and upper neighbours are compared; together they cover
    every adjacent pair once.
    """
    n = board.size
    for c in range(n):
        for r in range(n):
            t = board.tile(c, r)
            if t is None:
                continue
            if c + 1 < n:
                right = board.tile(c + 1, r)
                if right is not None and right.value == t.value:
                    return True
            if r + 1 < n:
                above = board.tile(c, r + 1)
                if above is not None and above.value == t.value:
                    return True
    return False


def at_least_one_move_exists(board: Board) -> bool:
    return empty_space_exists(board) or same_value_neighbor_exists(board)


def is_game_over(board: Board, max_piece: int = MAX_PIECE) -> bool:
    """The game ends on reaching *max_piece* or when nothing can move."""
    return max_tile_exists(board, max_piece) or not at_least_one_move_exists(board)
