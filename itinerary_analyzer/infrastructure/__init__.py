"""Infrastructure implementations (logging, session storage)."""

from itinerary_analyzer.infrastructure.logging import StructuredLogger
from itinerary_analyzer.infrastructure.session_store import SessionStore, build_session_store

__all__ = ["SessionStore", "StructuredLogger", "build_session_store"]
