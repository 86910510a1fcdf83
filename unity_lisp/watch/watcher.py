"""Polling file watcher.

Scans a root path at a fixed interval and hands every source file whose
modification time changed since the previous scan to a callback. The first
scan reports every file.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from unity_lisp.config import get_extensions, get_out_dir, get_poll_interval
from unity_lisp.watch.paths import has_extension, is_hidden

logger = logging.getLogger(__name__)


class FileWatcher:
    def __init__(
        self,
        root: str | Path,
        on_change: Callable[[list[Path]], object],
        interval: float | None = None,
        extensions: list[str] | None = None,
        out_dir: str | None = None,
    ):
        self.root = Path(root)
        self.on_change = on_change
        self.interval = get_poll_interval() if interval is None else interval
        self.extensions = extensions or get_extensions()
        self.out_dir = out_dir or get_out_dir()
        self._mtimes: dict[Path, int] = {}
        self._stop = threading.Event()

    def _candidates(self):
        if self.root.is_file():
            yield self.root
            return
        for p in self.root.rglob('*'):
            rel = p.relative_to(self.root)
            # Generated output is never fed back in
            if self.out_dir in rel.parts[:-1] or is_hidden(rel):
                continue
            yield p

    def scan(self) -> dict[Path, int]:
        found: dict[Path, int] = {}
        for p in self._candidates():
            if not has_extension(p, self.extensions):
                continue
            try:
                if p.is_file():
                    found[p] = p.stat().st_mtime_ns
            except FileNotFoundError:
                # Deleted between listing and stat
                continue
        return found

    def poll(self) -> list[Path]:
        """One scan; calls `on_change` with the changed files (sorted) if there are any."""
        current = self.scan()
        changed = sorted(p for p, mtime in current.items() if self._mtimes.get(p) != mtime)
        self._mtimes = current
        if changed:
            logger.debug("%d changed file(s)", len(changed))
            self.on_change(changed)
        return changed

    def run(self) -> None:
        logger.info("Started watching %s", self.root)
        while not self._stop.is_set():
            self.poll()
            self._stop.wait(self.interval)

    def stop(self) -> None:
        self._stop.set()
