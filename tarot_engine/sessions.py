"""
sessions.py — in-memory Session Store.

Keeps an append-only reading history per session id. Appends are serialized
with a lock; nothing is persisted across process restarts.
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .tarot_core import Reading

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """One querent's history. readings only ever grows."""
    created: float = field(default_factory=time.time)
    readings: List[Reading] = field(default_factory=list)


class SessionStore:
    """Thread-safe map of session id -> Session."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: Dict[str, Session] = {}

    def create_session(self) -> str:
        sid = str(uuid.uuid4())
        with self._lock:
            self._sessions[sid] = Session()
        return sid

    def append_reading(self, session_id: str, reading: Reading) -> None:
        """Append a reading; an unknown session id opens a new session."""
        with self._lock:
            session = self._sessions.setdefault(session_id, Session())
            session.readings.append(reading)
            count = len(session.readings)
        logger.debug("Session %s now holds %d readings", session_id, count)

    def get_history(self, session_id: str) -> Optional[List[Reading]]:
        """Snapshot of a session's readings in append order, or None if unknown."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            return list(session.readings)


default_session_store = SessionStore()
