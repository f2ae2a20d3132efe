"""
Event Reducer - applies one page event to one session record.
"""

from threading import Lock
from typing import FrozenSet, Iterable, Optional, TextIO

from ...core.errors import InvalidFieldError, UnrecognizedEventError
from ...models.events import CopyAndPasteEvent, PageEvent, ResizeEvent, TimeTakenEvent
from ...models.interaction import Dimension, InteractionRecord, SessionEntry
from ...utils.logging_config import get_logger


class EventReducer:
    """
    State machine over a session's interaction record.

    The record's fields are the state and the event kind selects the
    transition:

    - ``resize`` overwrites both dimension pairs.
    - ``copyAndPaste`` adds a recognized form control to the pasted set.
    - ``timeTaken`` overwrites the completion time.
    - anything else is rejected without touching the record.

    ``website_url`` is only written when a transition succeeds. After each
    successful transition a diagnostic block is written to ``out`` when one
    is supplied.
    """

    def __init__(self, recognized_controls: Iterable[str], out: Optional[TextIO] = None):
        self.recognized_controls: FrozenSet[str] = frozenset(recognized_controls)
        self.out = out
        self._out_lock = Lock()
        self.logger = get_logger(__name__)

    def apply(self, entry: SessionEntry, event: PageEvent) -> InteractionRecord:
        """
        Apply ``event`` to ``entry`` under the entry's lock.

        Args:
            entry: Session obtained from the session store
            event: Typed page event

        Returns:
            A snapshot of the record taken after the update

        Raises:
            InvalidFieldError: Copy/paste on a control outside the allow-list
            UnrecognizedEventError: Event kind has no transition
        """
        with entry.lock:
            # changes are staged on a copy and committed once the diagnostics render
            record = entry.record.snapshot()

            if isinstance(event, ResizeEvent):
                record.resize_from = Dimension(event.old_width, event.old_height)
                record.resize_to = Dimension(event.new_width, event.new_height)

            elif isinstance(event, CopyAndPasteEvent):
                if event.form_id not in self.recognized_controls:
                    self.logger.warning(
                        "Rejected copy/paste on unrecognized control",
                        extra={"form_id": event.form_id},
                    )
                    raise InvalidFieldError(event.form_id)
                record.copy_paste_fields.add(event.form_id)

            elif isinstance(event, TimeTakenEvent):
                record.form_completion_seconds = event.time

            else:
                event_type = getattr(event, "event_type", None)
                self.logger.warning("Rejected unrecognized event", extra={"event_type": event_type})
                raise UnrecognizedEventError(event_type)

            record.website_url = event.website_url
            diagnostics = record.describe_update(event.event_type) if self.out is not None else None
            entry.record = record
            self._write_diagnostics(diagnostics)
            snapshot = record.snapshot()

        self.logger.debug("Applied event", extra={"event_type": event.event_type})
        return snapshot

    def _write_diagnostics(self, text: Optional[str]) -> None:
        # Called with the entry lock held so blocks for one session keep event order
        if self.out is None or text is None:
            return
        with self._out_lock:
            self.out.write(text)
            self.out.flush()
