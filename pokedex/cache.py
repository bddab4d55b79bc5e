"""A thread-safe in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class _Entry:
    value: bytes
    created_at: float = field(default_factory=time.monotonic)


class Cache:
    """Maps keys to byte payloads; a background thread drops stale entries.

    Every ``interval`` seconds, entries older than ``interval`` are removed.
    Times are measured with :func:`time.monotonic`.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        with self._lock:
            self._entries[key] = _Entry(bytes(value))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or ``None`` if absent."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def reap(self, now: float) -> None:
        """Remove entries created more than one interval before ``now``."""
        cutoff = now - self.interval
        with self._lock:
            stale = [k for k, e in self._entries.items() if e.created_at < cutoff]
            for key in stale:
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper. Stored entries are kept."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.reap(time.monotonic())