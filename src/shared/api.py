"""HTTP error mapping shared by every router.

ValidationError → 400, NotFound → 404, CollaboratorUnavailable → 503.
Request-body validation failures are reported as 400 as well, in the same
field-keyed shape as domain validation errors.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.errors import CollaboratorUnavailable, NotFound, ValidationError

logger = structlog.get_logger(__name__)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"success": False, "error": exc.messages})


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        field = ".".join(str(part) for part in error["loc"][1:]) or "body"
        messages.setdefault(field, []).append(error["msg"])
    return JSONResponse(status_code=400, content={"success": False, "error": messages})


async def _not_found(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"success": False, "error": str(exc)})


async def _collaborator_unavailable(request: Request, exc: CollaboratorUnavailable) -> JSONResponse:
    logger.warning(
        "Collaborator unavailable",
        collaborator=exc.collaborator,
        reason=exc.reason,
        path=request.url.path,
    )
    return JSONResponse(status_code=503, content={"success": False, "error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on ``app``."""
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(NotFound, _not_found)
    app.add_exception_handler(CollaboratorUnavailable, _collaborator_unavailable)
