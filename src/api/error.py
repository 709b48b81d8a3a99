"""HTTP error rendering

Use case errors are raised as ClientError and rendered as
``{"error": {"code": ..., "message": ..., "details": ...}}``.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from libs.result import Error

logger = logging.getLogger(__name__)


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def error_status(error: Error) -> int:
    """HTTP status for a use case error code"""
    if error.code == "VALIDATION_ERROR":
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if error.code == "DATE_ALREADY_EXISTS":
        return status.HTTP_409_CONFLICT
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def register_error_handlers(app: FastAPI, default_route: str) -> None:
    @app.exception_handler(ClientError)
    async def handle_client_error(request: Request, exc: ClientError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.error.to_dict()})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        error = Error(
            code="VALIDATION_ERROR",
            message="Invalid request parameters",
            details={"errors": jsonable_encoder(exc.errors())},
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": error.to_dict()})

    @app.exception_handler(StarletteHTTPException)
    async def handle_routing_error(request: Request, exc: StarletteHTTPException):
        # Unknown paths land on the quote list
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.info(f"No route for {request.method} {request.url.path}, redirecting")
            return RedirectResponse(
                url=f"{default_route}?notice=Route+not+found",
                status_code=status.HTTP_303_SEE_OTHER,
            )
        return await http_exception_handler(request, exc)
