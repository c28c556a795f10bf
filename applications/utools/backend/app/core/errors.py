"""Tool errors and their uniform JSON rendering."""

import logging

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.requests import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("u-tools.errors")


class ToolError(Exception):
    """Client-facing failure of a tool request."""

    code = "ToolError"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_body(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class InvalidValue(ToolError):
    code = "InvalidValue"


class UnsupportedConversion(ToolError):
    code = "UnsupportedConversion"


class InvalidHost(ToolError):
    code = "InvalidHost"


class PingFailed(ToolError):
    code = "PingFailed"


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Render tool and request-shape errors as ``{error: {code, message}}``."""

    @app.exception_handler(ToolError)
    async def handle_tool_error(request: Request, exc: ToolError) -> JSONResponse:
        logger.info(
            "tool_error",
            extra={"path": request.url.path, "code": exc.code, "error_message": exc.message},
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = ToolError(_describe_validation(exc), code="InvalidRequest")
        logger.info(
            "request_invalid",
            extra={"path": request.url.path, "error_message": error.message},
        )
        return JSONResponse(status_code=error.status_code, content=error.to_body())
