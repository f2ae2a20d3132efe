"""
Top-level services package

Structure:
- form_telemetry.services.sessions (in-memory session registry)
- form_telemetry.services.events (applies page events to a session)
"""

from .interfaces import SessionStore
from .sessions import InMemorySessionStore, make_session_id
from .events import EventReducer

__all__ = [
    'SessionStore',
    'InMemorySessionStore',
    'make_session_id',
    'EventReducer',
]
