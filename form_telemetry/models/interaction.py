"""Interaction data captured for a single visit to the form."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Set

from ..utils.fingerprint import hash_string


@dataclass(frozen=True)
class Dimension:
    """Page size in pixels."""

    width: int = 0
    height: int = 0

    def __str__(self) -> str:
        return f"({self.width},{self.height})"


@dataclass
class InteractionRecord:
    """Accumulated interaction data for one session.

    Attributes:
        session_id: Assigned once at creation.
        website_url: Last URL reported by any applied event.
        resize_from: Page size before the most recent resize.
        resize_to: Page size after the most recent resize.
        copy_paste_fields: Form controls that have had a paste observed.
        form_completion_seconds: Time taken to complete the form.
    """

    session_id: str
    website_url: str = ""
    resize_from: Dimension = field(default_factory=Dimension)
    resize_to: Dimension = field(default_factory=Dimension)
    copy_paste_fields: Set[str] = field(default_factory=set)
    form_completion_seconds: int = 0

    def snapshot(self) -> "InteractionRecord":
        """Return a copy that does not share the mutable field set."""
        return replace(self, copy_paste_fields=set(self.copy_paste_fields))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "websiteUrl": self.website_url,
            "resizeFrom": {"width": self.resize_from.width, "height": self.resize_from.height},
            "resizeTo": {"width": self.resize_to.width, "height": self.resize_to.height},
            "copyAndPaste": sorted(self.copy_paste_fields),
            "formCompletionTime": self.form_completion_seconds,
        }

    def describe_update(self, event_type: str) -> str:
        """Render the diagnostic block written after an event is applied."""
        controls = "".join(f" {control}" for control in sorted(self.copy_paste_fields))
        lines = [
            f"User Data Updated: {event_type}",
            f"  WebsiteURL: {self.website_url}",
            f"  SessionID: {self.session_id}",
            f"  ResizeFrom: {self.resize_from}",
            f"  ResizeTo: {self.resize_to}",
            f"  copyAndPaste controls:{controls}",
            f"  FormCompletionTime: {self.form_completion_seconds} seconds",
            f"  websiteURLHashCode: {hash_string(self.website_url)}",
        ]
        return "\n".join(lines) + "\n"


@dataclass(eq=False)
class SessionEntry:
    """A store slot: one record and the lock that serializes its updates.

    The lock is per record so that events for different sessions never
    wait on each other.
    """

    record: InteractionRecord
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def session_id(self) -> str:
        return self.record.session_id
