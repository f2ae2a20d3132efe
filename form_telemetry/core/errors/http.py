from typing import Dict

from fastapi.responses import JSONResponse

from .domain import ApplicationError


def application_error_response(error: ApplicationError) -> JSONResponse:
    """JSON body shared by every error the API returns."""
    payload: Dict[str, object] = {
        "message": error.message,
        "error_code": error.error_code.value,
        "details": error.details,
    }
    return JSONResponse(status_code=error.status_code, content=payload)
