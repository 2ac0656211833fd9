"""
Thread-local requests.Session storage for HTTPClient.

requests.Session is not thread-safe, so every thread that uses a client
gets its own session, created lazily by the client's factory.
"""
import threading
import weakref
from typing import Callable, List

import requests


class ThreadSafeSessionManager:
    """
    Hands out one requests.Session per thread and closes them all on demand.

    Example:
        >>> manager = ThreadSafeSessionManager(requests.Session)
        >>> session = manager.get_session()
        >>> manager.close_all()
    """

    def __init__(self, session_factory: Callable[[], requests.Session]):
        self._session_factory = session_factory
        self._local = threading.local()
        # Weak references so sessions of finished threads can be collected
        self._sessions: "weakref.WeakSet[requests.Session]" = weakref.WeakSet()
        self._lock = threading.Lock()

    def get_session(self) -> requests.Session:
        """Session of the current thread, created on first access."""
        session = getattr(self._local, 'session', None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
            with self._lock:
                self._sessions.add(session)
        return session

    def close_all(self) -> None:
        """Close sessions of all threads. Safe to call multiple times."""
        self._local.session = None

        with self._lock:
            sessions: List[requests.Session] = list(self._sessions)
            self._sessions.clear()

        for session in sessions:
            session.close()

    def active_sessions(self) -> int:
        """Number of sessions that are still alive."""
        with self._lock:
            return len(self._sessions)
