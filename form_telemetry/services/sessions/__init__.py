"""
Session Services

In-memory registry of the sessions created for each load of the form.
"""

from .session_store import InMemorySessionStore, make_session_id

__all__ = [
    'InMemorySessionStore',
    'make_session_id',
]
