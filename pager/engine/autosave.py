"""Periodic auto-save driven by an external clock.

The host calls ``tick(now)`` from its own timer; the saver decides whether
the interval has elapsed and, if so, writes ``engine.export_text()`` into the
session buffer. It only reads from the engine.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from pager.docs import BufferManager, write_txt

from .editor import DocumentEngine

logger = logging.getLogger(__name__)


class AutoSaver:
    def __init__(
        self,
        engine: DocumentEngine,
        buffer: BufferManager,
        interval: float = 5.0,
        enabled: bool = False,
    ) -> None:
        if interval <= 0:
            raise ValueError("Auto-save interval must be positive.")
        self.engine = engine
        self.buffer = buffer
        self.interval = float(interval)
        self.enabled = bool(enabled)
        self.last_saved: Optional[str] = None
        self._last: Optional[float] = None

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = bool(enabled)
        # restart the interval from the next tick
        self._last = None

    def tick(self, now: Optional[float] = None) -> Optional[str]:
        """Save if enabled and the interval has elapsed since the last save.

        The first tick after enabling only starts the clock.

        Doxygen:
        - @param now: Monotonic timestamp in seconds; defaults to time.monotonic().
        - @return: Path of the written snapshot, or None if nothing was saved.
        """
        if not self.enabled:
            return None
        now = time.monotonic() if now is None else now
        if self._last is None:
            self._last = now
            return None
        if now - self._last < self.interval:
            return None
        self._last = now
        return self.save_now()

    def save_now(self) -> str:
        out_path = self.buffer.next_snapshot_path(self.engine.export_filename)
        write_txt(self.engine.export_text(), out_path)
        self.last_saved = out_path
        for stale in self.buffer.prune():
            logger.debug("Dropped old snapshot %s", stale)
        logger.info("Auto-saved %s", out_path)
        return out_path
