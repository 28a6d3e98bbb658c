"""Spawns the random tiles that appear between moves."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from backend.config import SPAWN_FOUR_PROBABILITY, START_TILES
from backend.models.board import Board, Tile

if TYPE_CHECKING:
    from backend.engine.gameplay import GamePlay

logger = logging.getLogger(__name__)


class TileGenerator:
    """Places 2s (or, less often, 4s) on random empty cells.

    Pass *seed* for a reproducible sequence of spawns.
    """

    def __init__(
        self,
        seed: int | None = None,
        four_probability: float = SPAWN_FOUR_PROBABILITY,
    ) -> None:
        if not 0.0 <= four_probability <= 1.0:
            raise ValueError(
                f"four_probability must be within [0, 1], got {four_probability}."
            )
        self.four_probability = four_probability
        self._rng = random.Random(seed)

    def spawn(self, board: Board) -> Tile | None:
        """Return a new tile for a random empty cell, or ``None`` if the board is full.

        The board itself is left untouched.
        """
        empty = board.empty_cells()
        if not empty:
            return None
        col, row = self._rng.choice(empty)
        value = 4 if self._rng.random() < self.four_probability else 2
        return Tile(value, col, row)

    def add_random_tile(self, game: GamePlay) -> Tile | None:
        tile = self.spawn(game.board)
        if tile is not None:
            logger.debug("spawn %d at (%d, %d)", tile.value, tile.col, tile.row)
            game.add_tile(tile)
        return tile

    def start(self, game: GamePlay) -> None:
        """Clear *game* and drop the opening tiles."""
        game.clear()
        for _ in range(START_TILES):
            self.add_random_tile(game)
