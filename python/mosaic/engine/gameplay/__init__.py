from mosaic.engine.gameplay.game import GamePlay, MoveResult

__all__ = ["GamePlay", "MoveResult"]
