"""Exception handlers for the FastAPI application."""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import AppException, ErrorCode, InternalError, ValidationFailedError

logger = structlog.get_logger()

# Where FastAPI found the bad value -> where the client sent it
_LOCATIONS = {"body": "body", "path": "params", "query": "query", "header": "headers"}


def _field_error(error: dict[str, Any]) -> dict[str, str]:
    """Flatten one pydantic error into ``{msg, param, location}``."""
    loc = [str(part) for part in error.get("loc", ())]
    location = _LOCATIONS.get(loc[0], loc[0]) if loc else "body"
    param = ".".join(loc[1:]) if len(loc) > 1 else ""

    msg = error.get("msg", "Invalid value")
    cause = (error.get("ctx") or {}).get("error")
    if error.get("type") == "value_error" and cause is not None:
        msg = str(cause)

    return {"msg": msg, "param": param, "location": location}


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        logger.warning(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
            status_code=exc.status_code,
        )
        content: dict[str, Any] = {
            "error_code": exc.error_code.value,
            "msg": exc.message,
            "details": exc.details,
        }
        if isinstance(exc, ValidationFailedError):
            field = (exc.details or {}).get("field", "")
            content["errors"] = [{"msg": exc.message, "param": field, "location": "body"}]
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions from FastAPI/Starlette (unknown route, bad method)."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error_code": "HTTP_ERROR",
                "msg": exc.detail,
                "details": None,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors as a 400 with an ``errors`` list."""
        errors = [_field_error(error) for error in exc.errors()]
        logger.info("validation_error", errors=errors)
        return JSONResponse(
            status_code=400,
            content={
                "error_code": ErrorCode.VALIDATION_ERROR.value,
                "msg": errors[0]["msg"] if errors else "Request validation failed",
                "errors": errors,
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions. The cause is logged, never returned."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )

        error = InternalError()
        return JSONResponse(
            status_code=error.status_code,
            content={
                "error_code": error.error_code.value,
                "msg": error.message,
                "details": {"request_id": request_id},
            },
        )
