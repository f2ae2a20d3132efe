import base64
import secrets
from threading import Lock
from typing import Dict, Optional

from ...core.errors import SessionIdGenerationError
from ...models.interaction import InteractionRecord, SessionEntry
from ...utils.logging_config import get_logger
from ..interfaces import SessionStore


SESSION_ID_BYTES = 64


def make_session_id(num_bytes: int = SESSION_ID_BYTES) -> str:
    """Generate a random URL-safe session id from ``num_bytes`` of OS entropy."""
    try:
        key = secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as e:
        raise SessionIdGenerationError(details={"error": str(e)}) from e
    return base64.urlsafe_b64encode(key).decode("ascii")


class InMemorySessionStore(SessionStore):
    """In-memory, thread-safe session store.

    The store lock guards only the dict itself. Record updates are
    serialized by each entry's own lock, so the store lock is never held
    while a record is being changed.

    Deleting a session unlinks it: a caller that already holds the entry
    from ``find`` can keep using it, it just can no longer be looked up.
    """

    def __init__(self):
        self._lock = Lock()
        self._sessions: Dict[str, SessionEntry] = {}
        self.logger = get_logger(__name__)

    def new_session(self) -> SessionEntry:
        session_id = make_session_id()
        entry = SessionEntry(InteractionRecord(session_id=session_id))

        with self._lock:
            self._sessions[session_id] = entry
            count = len(self._sessions)

        self.logger.info("Created session", extra={"session_count": count})
        return entry

    def find(self, session_id: str) -> Optional[SessionEntry]:
        with self._lock:
            return self._sessions.get(session_id)

    def delete(self, session_id: str) -> None:
        with self._lock:
            removed = self._sessions.pop(session_id, None)

        if removed is not None:
            self.logger.info("Retired session")
        else:
            self.logger.debug("Delete ignored for unknown session")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
