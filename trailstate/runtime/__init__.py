"""
Runtime package holding per-instance mutable bookkeeping.

Currently the undo/redo transition history.
"""

from .history import HistorySnapshot, TransitionHistory

__all__ = ["HistorySnapshot", "TransitionHistory"]
