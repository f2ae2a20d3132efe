import sys
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional, TextIO

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import AppConfig, get_config
from .core.errors import (
    ApplicationError,
    ErrorCode,
    ResourceNotFoundError,
    ValidationError,
    application_error_response,
)
from .routers.events import events_router
from .routers.form import form_router
from .routers.system import system_router
from .services.events.event_reducer import EventReducer
from .services.interfaces import SessionStore
from .services.sessions.session_store import InMemorySessionStore
from .utils.logging_config import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: AppConfig = app.state.config
    logger.info(f"Starting {config.app_name} {config.app_version} ({config.environment})")
    logger.info(f"Recognized form controls: {', '.join(config.recognized_form_controls_list)}")

    yield

    logger.info(f"Shutting down with {len(app.state.session_store)} live sessions")


def create_app(
    config: Optional[AppConfig] = None,
    session_store: Optional[SessionStore] = None,
    diagnostics_out: Optional[TextIO] = None,
) -> FastAPI:
    """
    Build the application and the collaborators it owns.

    Args:
        config: Settings to use instead of the environment
        session_store: Store to use instead of a fresh in-memory one
        diagnostics_out: Stream for the per-event diagnostic blocks; defaults to
            stdout when diagnostics are enabled
    """
    config = config or get_config()
    if session_store is None:
        session_store = InMemorySessionStore()
    if diagnostics_out is None and config.diagnostics_enabled:
        diagnostics_out = sys.stdout

    app = FastAPI(title=config.app_name, version=config.app_version, lifespan=lifespan)
    app.state.config = config
    app.state.session_store = session_store
    app.state.event_reducer = EventReducer(config.recognized_form_controls_list, out=diagnostics_out)
    app.state.templates = Jinja2Templates(directory=str(config.template_dir))

    app.include_router(form_router)
    app.include_router(events_router)
    app.include_router(system_router)

    _register_exception_handlers(app)
    return app


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ApplicationError)
    async def handle_application_error(request: Request, exc: ApplicationError):
        return application_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return application_error_response(
            ValidationError("Request validation failed", details={"errors": errors})
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        logger.warning(
            "Handled HTTPException",
            extra={
                "path": str(request.url),
                "status_code": exc.status_code,
            },
        )

        if exc.status_code == 403:
            error = ApplicationError("Forbidden", ErrorCode.FORBIDDEN, status_code=403)
        elif exc.status_code == 404:
            error = ResourceNotFoundError("Route", request.url.path, details={"path": request.url.path})
        elif exc.status_code == 405:
            error = ApplicationError(
                "Method not allowed",
                ErrorCode.INVALID_INPUT,
                status_code=exc.status_code,
                details={"path": request.url.path, "method": request.method},
            )
        elif 400 <= exc.status_code < 500:
            error = ApplicationError(
                "Request validation failed",
                ErrorCode.INVALID_INPUT,
                status_code=exc.status_code,
            )
        else:
            error = ApplicationError(
                "Internal server error",
                ErrorCode.INTERNAL_ERROR,
                status_code=exc.status_code,
            )

        response = application_error_response(error)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception encountered",
            extra={"path": str(request.url)},
        )

        error = ApplicationError(
            "Internal server error",
            ErrorCode.INTERNAL_ERROR,
            status_code=500,
            details={"path": request.url.path, "timestamp": datetime.now().isoformat()},
        )
        return application_error_response(error)


app = create_app()
