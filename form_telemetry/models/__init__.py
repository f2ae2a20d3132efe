from .interaction import Dimension, InteractionRecord, SessionEntry
from .events import (
    CopyAndPasteEvent,
    PageEvent,
    ResizeEvent,
    TimeTakenEvent,
    parse_page_event,
)

__all__ = [
    "CopyAndPasteEvent",
    "Dimension",
    "InteractionRecord",
    "PageEvent",
    "ResizeEvent",
    "SessionEntry",
    "TimeTakenEvent",
    "parse_page_event",
]
