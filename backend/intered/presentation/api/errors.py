"""Exception handlers: every error response is shaped {"message", "errors"?}.

The dashboard surfaces ``message`` verbatim in its toasts, so HTTPException
details and validation failures are both rendered into that field.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _format_location(loc: tuple) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body/query validation → 400; malformed path parameters → 422."""
    errors = exc.errors()
    on_path = any(err.get("loc", ("",))[0] == "path" for err in errors)
    status_code = (
        status.HTTP_422_UNPROCESSABLE_CONTENT if on_path else status.HTTP_400_BAD_REQUEST
    )
    details = [
        {"field": _format_location(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
        for err in errors
    ]
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, details)
    first = details[0] if details else {"field": "request", "message": "invalid"}
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {"message": f"Invalid data: {first['field']} {first['message']}".strip(), "errors": details}
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
