"""
Form Router - page load and final submission

Each load of the form starts a new session whose id is embedded in the
page; submitting the form retires it.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from ...core.config import AppConfig
from ...core.dependencies import (
    get_app_config,
    get_error_handler,
    get_session_store,
    get_templates,
)
from ...core.errors import ApplicationError, ErrorHandler, SessionNotFoundError
from ...services.interfaces import SessionStore
from ...utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="", tags=["form"])


@router.get("/", include_in_schema=False)
def redirect_to_form():
    """Send bare requests to the form page"""
    return RedirectResponse(url="/index.html", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/index.html", response_class=HTMLResponse)
def get_form(
    request: Request,
    session_store: SessionStore = Depends(get_session_store),
    templates: Jinja2Templates = Depends(get_templates),
    config: AppConfig = Depends(get_app_config),
    error_handler: ErrorHandler = Depends(get_error_handler),
):
    """Start a new session and render the form with its id embedded"""
    try:
        entry = session_store.new_session()
    except ApplicationError:
        raise
    except Exception as e:
        error_handler.raise_internal("create session", e)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "session_id": entry.session_id,
            "app_name": config.app_name,
            "form_controls": config.recognized_form_controls_list,
        },
    )


@router.post("/index.html", status_code=status.HTTP_201_CREATED)
def submit_form(
    session_id: Optional[str] = Form(None, alias="SessionId"),
    session_store: SessionStore = Depends(get_session_store),
):
    """Accept the completed form and retire its session"""
    entry = session_store.find(session_id or "")
    if entry is None:
        logger.warning("Form submitted for unknown session")
        raise SessionNotFoundError(session_id)

    logger.info("Form submitted", extra={"website_url": entry.record.website_url})
    session_store.delete(entry.session_id)
    return Response(status_code=status.HTTP_201_CREATED)
