"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import logging

from backend.models.board import Board

logger = logging.getLogger(__name__)


class GameState:
    """Holds the current board, score, high-water mark, and move counter."""

    def __init__(
        self,
        board: Board,
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
    ) -> None:
        if score < 0 or max_score < 0:
            raise ValueError("Scores must be non-negative.")
        self.board = board
        self.score: int = score
        self.max_score: int = max_score
        self.game_over: bool = game_over
        self.moves: int = 0

    # -- scoring --------------------------------------------------------------

    def add_score(self, points: int) -> None:
        self.score += points

    def update_game_over(self, over: bool) -> None:
        """Record the game-over flag, raising ``max_score`` when the game ends."""
        if over and not self.game_over:
            logger.info(
                "Game over with score %d (previous max %d)",
                self.score,
                self.max_score,
            )
            self.max_score = max(self.score, self.max_score)
        self.game_over = over

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def reset(self) -> None:
        """Empty the board and start over, keeping ``max_score``."""
        self.board.clear()
        self.score = 0
        self.moves = 0
        self.game_over = False
