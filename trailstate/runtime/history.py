"""Append-only transition history with a movable undo/redo cursor."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# Placeholder for "no state" seeding both sequences.
SENTINEL = None


@dataclass(frozen=True)
class HistorySnapshot:
    """Read-only copy of the history sequences and cursor."""

    back: Tuple[Optional[str], ...]
    forward: Tuple[Optional[str], ...]
    cursor: int


class TransitionHistory:
    """
    Records every state change as a (from, to) pair in two parallel sequences.

    Undo walks backward through the origin states, redo walks forward through
    the destination states. Entries are only ever appended; moving the cursor
    never removes anything, and a new change made after an undo does not drop
    the entries that redo could still reach.
    """

    def __init__(self) -> None:
        self._back: List[Optional[str]] = [SENTINEL]
        self._forward: List[Optional[str]] = [SENTINEL]
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._back)

    def record(self, source: str, target: str) -> None:
        """
        Append a state change and point the cursor at it.

        :param source: The state being left.
        :param target: The state being entered.
        """
        self._back.append(source)
        self._forward.append(target)
        self._cursor = len(self._back) - 1

    def step_back(self) -> Optional[str]:
        """
        Move the cursor one change back and return the state to restore.

        Returns None when history is exhausted. The cursor is decremented even
        then, but never below -1.
        """
        entry = self._entry(self._back, self._cursor)
        self._cursor = max(self._cursor - 1, -1)
        return entry

    def step_forward(self) -> Optional[str]:
        """
        Return the state to re-enter and advance the cursor, or None if there
        is nothing to redo (the cursor is left alone in that case).
        """
        entry = self._entry(self._forward, self._cursor + 1)
        if entry is SENTINEL:
            return SENTINEL
        self._cursor += 1
        return entry

    def peek_back(self) -> Optional[str]:
        return self._entry(self._back, self._cursor)

    def peek_forward(self) -> Optional[str]:
        return self._entry(self._forward, self._cursor + 1)

    def clear(self) -> None:
        """Drop all recorded changes. The cursor is recomputed on the next record."""
        logger.debug(f"Clearing {len(self._back) - 1} history entries")
        self._back = [SENTINEL]
        self._forward = [SENTINEL]

    def snapshot(self) -> HistorySnapshot:
        return HistorySnapshot(back=tuple(self._back), forward=tuple(self._forward), cursor=self._cursor)

    @staticmethod
    def _entry(sequence: List[Optional[str]], index: int) -> Optional[str]:
        # Negative or stale indices read as the sentinel, never wrap around.
        if 0 <= index < len(sequence):
            return sequence[index]
        return SENTINEL
