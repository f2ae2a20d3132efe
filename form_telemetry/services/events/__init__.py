"""
Event Services

Applies page events posted by the form to the session they belong to.
"""

from .event_reducer import EventReducer

__all__ = [
    'EventReducer',
]
