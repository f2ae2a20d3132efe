"""
Service Interfaces - Abstract Base Classes for core services

These interfaces define the contracts for key services, enabling:
- Easy mocking and testing
- Swapping implementations (e.g., in-memory vs shared cache)
- Cleaner dependency injection patterns
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.interaction import SessionEntry


class SessionStore(ABC):
    """
    Registry of live form sessions keyed by an opaque session id.

    Implementations must be safe to call from many request threads at once.
    """

    @abstractmethod
    def new_session(self) -> SessionEntry:
        """Create and register a session with a fresh random id.

        Raises:
            SessionIdGenerationError: The entropy source failed.
        """
        pass

    @abstractmethod
    def find(self, session_id: str) -> Optional[SessionEntry]:
        """Return the live session for ``session_id``, or None."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Retire a session. Unknown ids are ignored."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of live sessions."""
        pass
