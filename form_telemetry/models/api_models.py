from pydantic import BaseModel
from typing import List


class DimensionModel(BaseModel):
    width: int
    height: int


class InteractionRecordResponse(BaseModel):
    sessionId: str
    websiteUrl: str
    resizeFrom: DimensionModel
    resizeTo: DimensionModel
    copyAndPaste: List[str]
    formCompletionTime: int


class EventAcceptedResponse(BaseModel):
    status: str
    event_type: str
    session: InteractionRecordResponse


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    environment: str
    active_sessions: int
    timestamp: str
