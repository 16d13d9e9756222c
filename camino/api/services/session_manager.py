# camino/api/services/session_manager.py
"""Session lifecycle management for real-time map viewers."""

import logging
import threading
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from camino.api.config import get_session_config
from camino.api.services.location_service import EventStream, LocationTracker
from camino.api.services.map_service import MapDisplay

logger = logging.getLogger(__name__)


class MapSession:
    """Represents one connected map viewer."""

    def __init__(self, session_id: str, display: MapDisplay, user_ip: Optional[str] = None):
        self.session_id = session_id
        self.user_ip = user_ip

        # Timestamps
        self.created_at = datetime.now()
        self.last_activity = datetime.now()

        # Components
        self.display = display
        self.location_events = EventStream(name=f"location:{session_id}")
        self.tracker = LocationTracker(self.location_events)

        # Stats
        self.refresh_count = 0
        self.location_count = 0

    def touch(self) -> None:
        self.last_activity = datetime.now()

    def close(self) -> None:
        self.display.cancel()
        self.tracker.stop()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "created_at": self.created_at.isoformat(),
            "last_activity": self.last_activity.isoformat(),
            "focused_day": self.display.focused_day,
            "refresh_count": self.refresh_count,
            "location_count": self.location_count,
        }


class SessionManager:
    """Manages concurrent map sessions keyed by Socket.IO sid."""

    def __init__(self, display_factory: Callable[[], MapDisplay], config: Optional[dict] = None,
                 start_cleanup: bool = True):
        self.config = config or get_session_config()
        self.display_factory = display_factory
        self.sessions: Dict[str, MapSession] = {}

        # Thread safety
        self.lock = threading.Lock()
        self._stop = threading.Event()

        self.cleanup_thread: Optional[threading.Thread] = None
        if start_cleanup:
            self.cleanup_thread = threading.Thread(target=self._cleanup_loop, daemon=True)
            self.cleanup_thread.start()

        logger.info("SessionManager initialized")

    def create_session(self, session_id: str, user_ip: Optional[str] = None) -> Optional[MapSession]:
        """Create a map session, or return the existing one for ``session_id``.

        Returns:
            MapSession object or None if the concurrent session limit is reached
        """
        with self.lock:
            existing = self.sessions.get(session_id)
            if existing:
                existing.touch()
                return existing

            if len(self.sessions) >= self.config["max_concurrent_sessions"]:
                logger.warning("Maximum concurrent map sessions reached")
                return None

            session = MapSession(session_id, self.display_factory(), user_ip)
            self.sessions[session_id] = session

        logger.info(f"Created map session {session_id} for IP {user_ip}")
        return session

    def get_session(self, session_id: str) -> Optional[MapSession]:
        with self.lock:
            session = self.sessions.get(session_id)
            if session:
                session.touch()
            return session

    def remove_session(self, session_id: str, reason: str = "manual") -> bool:
        with self.lock:
            session = self.sessions.pop(session_id, None)
        if session is None:
            return False

        session.close()
        duration = (datetime.now() - session.created_at).total_seconds()
        logger.info(
            f"Removed map session {session_id} - "
            f"Reason: {reason}, Duration: {duration:.1f}s, "
            f"Refreshes: {session.refresh_count}, Locations: {session.location_count}"
        )
        return True

    def get_stats(self) -> Dict[str, Any]:
        with self.lock:
            return {
                "total_sessions": len(self.sessions),
                "total_refreshes": sum(s.refresh_count for s in self.sessions.values()),
                "sessions": [s.to_dict() for s in self.sessions.values()],
                "config": {
                    "max_concurrent": self.config["max_concurrent_sessions"],
                    "timeout_seconds": self.config["session_timeout_seconds"],
                },
            }

    def cleanup_expired_sessions(self, now: Optional[datetime] = None) -> int:
        """Remove sessions idle for longer than the configured timeout."""
        now = now or datetime.now()
        cutoff_time = now - timedelta(seconds=self.config["session_timeout_seconds"])

        with self.lock:
            expired = [sid for sid, s in self.sessions.items() if s.last_activity < cutoff_time]

        for sid in expired:
            self.remove_session(sid, "timeout")

        if expired:
            logger.info(f"Cleaned up {len(expired)} expired map sessions")
        return len(expired)

    def shutdown(self) -> None:
        self._stop.set()
        for sid in list(self.sessions):
            self.remove_session(sid, "shutdown")

    def _cleanup_loop(self):
        """Background thread to clean up expired sessions."""
        interval = self.config["cleanup_interval_seconds"]
        while not self._stop.wait(interval):
            try:
                self.cleanup_expired_sessions()
            except Exception as e:
                logger.error(f"Error in cleanup loop: {e}")


__all__ = ["MapSession", "SessionManager"]
