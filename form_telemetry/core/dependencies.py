"""
Dependency providers for the Form Telemetry API.

Every collaborator is built by ``create_app`` and attached to
``app.state``; these providers hand them to route handlers so tests can
swap any of them without touching module globals.
"""
import logging

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .config import AppConfig
from .errors.handler import DefaultErrorHandler, ErrorHandler
from ..services.events.event_reducer import EventReducer
from ..services.interfaces import SessionStore


def get_error_handler(request: Request) -> ErrorHandler:
    """Provide a request-scoped error handler with structured context."""

    endpoint = request.scope.get("endpoint")
    module_name = getattr(endpoint, "__module__", "form_telemetry") if endpoint else "form_telemetry"
    logger_name = f"{module_name}.errors"
    base_context = {
        "path": request.url.path,
        "method": request.method,
    }
    return DefaultErrorHandler(lambda: logging.getLogger(logger_name), base_context=base_context)


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_event_reducer(request: Request) -> EventReducer:
    return request.app.state.event_reducer


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
