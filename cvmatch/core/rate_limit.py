from __future__ import annotations

import logging
import os
import sqlite3
import threading
import time

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from cvmatch.core.config import settings
from cvmatch.core.errors import RateLimitExceeded

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)


def rate_limit():
    if settings.rate_limit_enabled:
        return limiter.limit(settings.rate_limit)

    def decorator(func):
        return func

    return decorator


def client_key(request: Request) -> str:
    if settings.trust_x_forwarded_for:
        forwarded_for = request.headers.get("x-forwarded-for", "").strip()
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip", "").strip()
        if real_ip:
            return real_ip
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


class SlidingWindowRateLimiter:
    """Per-client request counter over a sliding window, stored in SQLite.

    Events older than the window are purged on every check, so the table only
    holds the requests that still count. WAL mode lets several worker
    processes share one database file.
    """

    def __init__(self, db_path: str, limit: int, window_seconds: int):
        if limit < 1 or window_seconds < 1:
            raise ValueError("limit and window_seconds must be positive")
        self.db_path = db_path
        self.limit = limit
        self.window_seconds = window_seconds
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn

        if self.db_path != ":memory:":
            directory = os.path.dirname(self.db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

        conn = sqlite3.connect(
            self.db_path,
            check_same_thread=False,
            timeout=5,
            isolation_level=None,
        )
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA synchronous=NORMAL;")
        conn.execute("PRAGMA busy_timeout=5000;")
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS analysis_rate_limit_events (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                client_key TEXT NOT NULL,
                route_key TEXT NOT NULL,
                created_at REAL NOT NULL
            );
            """
        )
        conn.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_analysis_rate_limit_lookup
            ON analysis_rate_limit_events (client_key, route_key, created_at);
            """
        )
        self._conn = conn
        return conn

    def check(self, client_key: str, route_key: str, *, now: float | None = None) -> int:
        """Record one request and return how many remain in the window.

        Raises ``RateLimitExceeded`` without recording anything once the
        client already has ``limit`` requests inside the window.
        """
        now = time.time() if now is None else now
        cutoff = now - self.window_seconds

        with self._lock:
            conn = self._connection()
            cursor = conn.cursor()
            cursor.execute("BEGIN IMMEDIATE")
            try:
                cursor.execute("DELETE FROM analysis_rate_limit_events WHERE created_at <= ?", (cutoff,))
                cursor.execute(
                    """
                    SELECT COUNT(1)
                    FROM analysis_rate_limit_events
                    WHERE client_key = ? AND route_key = ? AND created_at > ?
                    """,
                    (client_key, route_key, cutoff),
                )
                count = int(cursor.fetchone()[0] or 0)
                if count >= self.limit:
                    cursor.execute("ROLLBACK")
                    logger.info("analysis_rate_limited client=%s route=%s count=%s", client_key, route_key, count)
                    raise RateLimitExceeded()

                cursor.execute(
                    """
                    INSERT INTO analysis_rate_limit_events (client_key, route_key, created_at)
                    VALUES (?, ?, ?)
                    """,
                    (client_key, route_key, now),
                )
                cursor.execute("COMMIT")
            except RateLimitExceeded:
                raise
            except Exception:
                if conn.in_transaction:
                    cursor.execute("ROLLBACK")
                raise
        return self.limit - count - 1

    def clear(self) -> None:
        with self._lock:
            conn = self._connection()
            conn.execute("DELETE FROM analysis_rate_limit_events")

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


_default_limiter: SlidingWindowRateLimiter | None = None
_default_lock = threading.Lock()


def get_analysis_rate_limiter() -> SlidingWindowRateLimiter:
    """FastAPI dependency returning the process-wide analysis limiter."""
    global _default_limiter
    with _default_lock:
        if _default_limiter is None:
            _default_limiter = SlidingWindowRateLimiter(
                db_path=settings.analysis_rate_limit_db_path,
                limit=settings.analysis_rate_limit_requests,
                window_seconds=settings.analysis_rate_limit_window_seconds,
            )
        return _default_limiter
