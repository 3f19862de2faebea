"""In-memory store for analysis sessions, keyed by session id."""

from __future__ import annotations

import logging
import os
import threading
import time
from typing import Callable, Generic, Optional, TypeVar

_logger = logging.getLogger("itinerary-analyzer.session")

_DEFAULT_TTL = 1800.0
_MAX_SESSIONS = 1000

T = TypeVar("T")


class SessionStore(Generic[T]):
    """Thread-safe in-memory session store with TTL and a size cap."""

    def __init__(self, ttl: float = _DEFAULT_TTL, max_sessions: int = _MAX_SESSIONS):
        self._store: dict[str, tuple[T, float]] = {}
        self._ttl = ttl
        self._max_sessions = max_sessions
        self._lock = threading.Lock()

    def get(self, session_id: str) -> Optional[T]:
        with self._lock:
            return self._touch(session_id)

    def get_or_create(self, session_id: str, factory: Callable[[], T]) -> T:
        """Return the live session, creating it atomically on first use."""
        with self._lock:
            existing = self._touch(session_id)
            if existing is not None:
                return existing
            created = factory()
            self._insert(session_id, created)
            return created

    def save(self, session_id: str, state: T) -> None:
        with self._lock:
            self._insert(session_id, state)

    @property
    def active_count(self) -> int:
        now = time.time()
        with self._lock:
            return sum(1 for _, (_, exp) in self._store.items() if now <= exp)

    # caller holds self._lock
    def _touch(self, session_id: str) -> Optional[T]:
        entry = self._store.get(session_id)
        if entry is None:
            return None
        data, expire_at = entry
        if time.time() > expire_at:
            del self._store[session_id]
            return None
        self._store[session_id] = (data, time.time() + self._ttl)
        return data

    # caller holds self._lock
    def _insert(self, session_id: str, state: T) -> None:
        if session_id not in self._store and len(self._store) >= self._max_sessions:
            self._cleanup_expired()
            if len(self._store) >= self._max_sessions:
                oldest = min(self._store, key=lambda k: self._store[k][1])
                del self._store[oldest]
                _logger.info("Session store full, evicted %s", oldest)
        self._store[session_id] = (state, time.time() + self._ttl)

    def _cleanup_expired(self) -> None:
        now = time.time()
        expired = [k for k, (_, exp) in self._store.items() if now > exp]
        for key in expired:
            del self._store[key]


def build_session_store() -> SessionStore:
    ttl = float(os.getenv("SESSION_TTL_SECONDS", str(_DEFAULT_TTL)))
    max_sessions = int(os.getenv("SESSION_MAX_SESSIONS", str(_MAX_SESSIONS)))
    return SessionStore(ttl=ttl, max_sessions=max_sessions)
