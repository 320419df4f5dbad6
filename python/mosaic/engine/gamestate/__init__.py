from mosaic.engine.gamestate.state import History, HistoryEntry

__all__ = ["History", "HistoryEntry"]
