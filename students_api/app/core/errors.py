"""
Error responses.

Every failure leaves the API as ``{"status": "Error", "error": "..."}``.
``register_exception_handlers`` installs handlers that translate
request validation problems, store errors and framework HTTP errors
into that shape.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from students_api.app.services.student_service import StudentNotFoundError

logger = logging.getLogger(__name__)

STATUS_ERROR = "Error"


def general_error(message: str) -> Dict[str, str]:
    return {"status": STATUS_ERROR, "error": message}


def describe_validation_errors(errors: Sequence[Dict[str, Any]], body: Any = None) -> str:
    """Turn FastAPI/pydantic validation errors into a single message.

    A bad path id wins over any body problem.  Body problems are, in
    order: a blank or missing body, malformed JSON, a non-object body,
    and finally the list of offending fields, e.g.
    ``"field name is required field, field age is invalid"``.

    ``body`` is the raw request body, when known; a body holding only
    whitespace is reported as empty rather than as malformed JSON.
    """
    if any(err["loc"][:1] == ("path",) for err in errors):
        return "invalid id format"

    body_errors = [err for err in errors if err["loc"][:1] == ("body",)]
    for err in body_errors:
        if err["type"] == "json_invalid":
            if isinstance(body, (str, bytes)) and not body.strip():
                return "empty body"
            reason = (err.get("ctx") or {}).get("error")
            return f"invalid JSON body: {reason}" if reason else "invalid JSON body"
    for err in body_errors:
        if len(err["loc"]) == 1:
            return "empty body" if err["type"] == "missing" else "request body must be a JSON object"

    messages: List[str] = []
    seen = set()
    for err in body_errors:
        field = str(err["loc"][1])
        if field in seen:
            continue
        seen.add(field)
        if err["type"] == "missing":
            messages.append(f"field {field} is required field")
        else:
            messages.append(f"field {field} is invalid")
    if not messages:
        return "invalid request"
    return ", ".join(messages)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_errors(exc.errors(), getattr(exc, "body", None))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=general_error(message))


async def not_found_exception_handler(request: Request, exc: StudentNotFoundError) -> JSONResponse:
    # Missing records are reported as a server-side failure, not 404.
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=general_error(str(exc)),
    )


async def database_exception_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=general_error(str(exc)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=general_error(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.critical("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=general_error("internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StudentNotFoundError, not_found_exception_handler)
    app.add_exception_handler(sqlite3.Error, database_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
