"""
Events Router - page interaction events posted by the form's script
"""
import json
from typing import Any

from fastapi import APIRouter, Depends, Request

from ...core.dependencies import get_error_handler, get_event_reducer, get_session_store
from ...core.errors import ApplicationError, ErrorHandler, SessionNotFoundError, ValidationError
from ...models.api_models import EventAcceptedResponse
from ...models.events import event_summary, parse_page_event
from ...services.events.event_reducer import EventReducer
from ...services.interfaces import SessionStore
from ...utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["events"])

_decoder = json.JSONDecoder()


async def read_event_payload(request: Request) -> Any:
    """
    Decode the first JSON value in the request body.

    Bytes after that value are ignored, so a client that appends stray
    characters to an otherwise valid event is still served.
    """
    body = await request.body()
    try:
        payload, _ = _decoder.raw_decode(body.decode("utf-8").lstrip())
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError("Request body is not valid JSON", details={"error": str(e)}) from e
    return payload


@router.post("", response_model=EventAcceptedResponse)
def post_event(
    payload: Any = Depends(read_event_payload),
    session_store: SessionStore = Depends(get_session_store),
    event_reducer: EventReducer = Depends(get_event_reducer),
    error_handler: ErrorHandler = Depends(get_error_handler),
):
    """
    Apply one page event to its session.

    Unknown sessions are refused with 403; malformed events, unknown event
    types and unrecognized form controls with 400.
    """
    event = parse_page_event(payload)
    logger.debug("API called", extra=event_summary(event))

    entry = session_store.find(event.session_id)
    if entry is None:
        raise SessionNotFoundError(event.session_id)

    try:
        record = event_reducer.apply(entry, event)
    except ApplicationError:
        raise
    except Exception as e:
        error_handler.raise_internal("apply page event", e, extra={"event_type": event.event_type})

    return EventAcceptedResponse(
        status="ok",
        event_type=event.event_type,
        session=record.to_dict(),
    )
