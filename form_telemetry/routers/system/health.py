"""
Health Router - liveness and session counts
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ...core.config import AppConfig
from ...core.dependencies import get_app_config, get_session_store
from ...models.api_models import HealthResponse
from ...services.interfaces import SessionStore

router = APIRouter(prefix="", tags=["system-health"])


@router.get("/health", response_model=HealthResponse)
def get_system_health(
    session_store: SessionStore = Depends(get_session_store),
    config: AppConfig = Depends(get_app_config),
):
    """Report service status and the number of live sessions"""
    return HealthResponse(
        status="healthy",
        service=config.app_name,
        version=config.app_version,
        environment=config.environment,
        active_sessions=len(session_store),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
