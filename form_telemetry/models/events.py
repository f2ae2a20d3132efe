"""
Page events posted by the form's client script.

Each kind of event is its own model, selected by ``eventType``. The wire
format uses the client's camelCase names; the capitalised
``websiteURL``/``sessionID`` spellings are accepted too.
"""

from typing import Any, Dict, Literal, Type, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import UnrecognizedEventError, ValidationError


def _is_utf8(value: str) -> bool:
    # lone surrogates survive JSON decoding but cannot be hashed or echoed back
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class BaseEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    website_url: str = Field(
        "",
        validation_alias=AliasChoices("websiteUrl", "websiteURL", "website_url"),
    )
    session_id: str = Field(
        "",
        validation_alias=AliasChoices("sessionId", "sessionID", "session_id"),
    )

    @field_validator("website_url", "session_id")
    @classmethod
    def _require_utf8(cls, value: str) -> str:
        if not _is_utf8(value):
            raise ValueError("must be valid UTF-8 text")
        return value


class ResizeEvent(BaseEvent):
    event_type: Literal["resize"] = Field("resize", validation_alias=AliasChoices("eventType", "event_type"))
    old_width: int = Field(0, ge=0, validation_alias=AliasChoices("oldWidth", "old_width"))
    old_height: int = Field(0, ge=0, validation_alias=AliasChoices("oldHeight", "old_height"))
    new_width: int = Field(0, ge=0, validation_alias=AliasChoices("newWidth", "new_width"))
    new_height: int = Field(0, ge=0, validation_alias=AliasChoices("newHeight", "new_height"))


class CopyAndPasteEvent(BaseEvent):
    event_type: Literal["copyAndPaste"] = Field(
        "copyAndPaste", validation_alias=AliasChoices("eventType", "event_type")
    )
    form_id: str = Field("", validation_alias=AliasChoices("formId", "form_id"))
    # true when the paste happened, false for a copy; both mark the control
    pasted: bool = False

    @field_validator("form_id")
    @classmethod
    def _require_utf8_form_id(cls, value: str) -> str:
        if not _is_utf8(value):
            raise ValueError("must be valid UTF-8 text")
        return value


class TimeTakenEvent(BaseEvent):
    event_type: Literal["timeTaken"] = Field("timeTaken", validation_alias=AliasChoices("eventType", "event_type"))
    time: int = Field(0, ge=0)


PageEvent = Union[ResizeEvent, CopyAndPasteEvent, TimeTakenEvent]

_EVENT_MODELS: Dict[str, Type[BaseEvent]] = {
    "resize": ResizeEvent,
    "copyAndPaste": CopyAndPasteEvent,
    "timeTaken": TimeTakenEvent,
}

EVENT_TYPES = tuple(_EVENT_MODELS)


def parse_page_event(payload: Any) -> PageEvent:
    """Decode a JSON object into a typed page event.

    Raises:
        UnrecognizedEventError: ``eventType`` is missing or not a known kind.
        ValidationError: The payload is not an object or a field has the wrong type.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Event payload must be a JSON object")

    event_type = payload.get("eventType", payload.get("event_type"))
    if event_type not in EVENT_TYPES:
        raise UnrecognizedEventError(
            event_type if isinstance(event_type, str) and _is_utf8(event_type) else None
        )

    try:
        return _EVENT_MODELS[event_type].model_validate(payload)
    except PydanticValidationError as e:
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"]}
            for err in e.errors(include_url=False)
        ]
        raise ValidationError(
            "Invalid event payload",
            details={"event_type": event_type, "errors": errors},
        ) from e


def event_summary(event: PageEvent) -> Dict[str, Any]:
    """Small dict of an event for log records."""
    return {"event_type": event.event_type, "session_id": event.session_id}
