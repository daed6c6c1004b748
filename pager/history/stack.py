"""Linear undo/redo history over full page snapshots.

Every mutating edit pushes the pre-edit pages onto the undo stack and
drops the redo stack, so there is never a branch to redo into after a
fresh edit. Snapshots are whole copies of the page list; memory grows with
edit count times document size.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Sequence

EditState = List[str]


class EditHistory:
    def __init__(self) -> None:
        self._undo: List[EditState] = []
        # front of the deque is the most recently undone state
        self._redo: Deque[EditState] = deque()

    def record(self, previous_state: Sequence[str]) -> None:
        """Push the state as it was before a mutation and invalidate redo."""
        self._undo.append(list(previous_state))
        self._redo.clear()

    def undo(self, current_state: Sequence[str]) -> Optional[EditState]:
        """Step back one edit.

        Doxygen:
        - @param current_state: Pages as they are now; moved to the redo stack.
        - @return: Pages to restore, or None when there is nothing to undo.
        """
        if not self._undo:
            return None
        previous = self._undo.pop()
        self._redo.appendleft(list(current_state))
        return list(previous)

    def redo(self, current_state: Sequence[str]) -> Optional[EditState]:
        """Re-apply the most recently undone edit, or return None."""
        if not self._redo:
            return None
        following = self._redo.popleft()
        self._undo.append(list(current_state))
        return list(following)

    def reset(self) -> None:
        self._undo.clear()
        self._redo.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)
