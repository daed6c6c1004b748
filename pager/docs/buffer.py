from __future__ import annotations

import os
import time
from typing import List, Optional

DEFAULT_KEEP = 10


class BufferManager:
    """Per-session directory holding auto-saved copies of the document.

    Layout: <root>/config/buffer/<YYYYmmdd-HHMMSS>/<n>-<name>.txt
    Snapshots persist after the session ends; only the newest ``keep`` are retained.
    """

    def __init__(self, project_root: Optional[str] = None, keep: int = DEFAULT_KEEP) -> None:
        if keep < 1:
            raise ValueError("Buffer must keep at least one snapshot.")
        self.keep = int(keep)
        root = project_root or os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
        self.session_dir = os.path.join(root, "config", "buffer", time.strftime("%Y%m%d-%H%M%S"))
        os.makedirs(self.session_dir, exist_ok=True)
        self._counter = 0

    def next_snapshot_path(self, filename: str) -> str:
        self._counter += 1
        return os.path.join(self.session_dir, f"{self._counter:04d}-{filename}")

    def snapshots(self) -> List[str]:
        """Snapshot paths, oldest first."""
        if not os.path.isdir(self.session_dir):
            return []
        names = sorted(os.listdir(self.session_dir))
        return [os.path.join(self.session_dir, n) for n in names]

    def prune(self) -> List[str]:
        """Delete all but the newest ``keep`` snapshots and return the removed paths."""
        stale = self.snapshots()[:-self.keep]
        for path in stale:
            os.remove(path)
        return stale
