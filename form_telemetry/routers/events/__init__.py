"""
Events Router Module - REST API for page interaction events
"""
from .events import router as events_router

__all__ = [
    "events_router",
]
