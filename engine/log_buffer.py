from __future__ import annotations

from collections import deque
import threading


DEFAULT_LOG_CAPACITY = 1000


class LogBuffer:
    """Bounded, lock-guarded line store shared by the UI loop and background producers.

    Only ``append`` and ``snapshot`` touch the storage; both hold the lock for
    the whole call so readers never observe a partially applied append.
    """

    def __init__(self, capacity: int = DEFAULT_LOG_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"LogBuffer capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._lines: deque[str] = deque()
        self._revision = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def revision(self) -> int:
        with self._lock:
            return self._revision

    def append(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)
            if len(self._lines) > self._capacity:
                self._lines.popleft()
            self._revision += 1

    def snapshot(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._lines)

    def versioned_snapshot(self) -> tuple[int, tuple[str, ...]]:
        with self._lock:
            return self._revision, tuple(self._lines)

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)
