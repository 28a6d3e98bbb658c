from backend.models.board import Board, Direction, Tile, to_physical

__all__ = ["Board", "Direction", "Tile", "to_physical"]
