from backend.engine.gamegenerator.generator import TileGenerator

__all__ = ["TileGenerator"]
