"""
Error Handlers

- register_exception_handlers(app): renders domain errors and validation
  errors as the {code, message, data} envelope
- ErrorHandlerMiddleware: catches everything else, logs it through the
  error logging service and returns a 500 envelope with the error-log id
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from emur.core.exceptions import AppError, AuthenticationError
from emur.services.error_logging import error_logger

logger = logging.getLogger(__name__)


def envelope_response(status_code: int, message: str, data=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"code": status_code, "message": message, "data": jsonable_encoder(data)},
    )


async def app_error_handler(request: Request, exc: AppError) -> Response:
    if isinstance(exc, AuthenticationError):
        # Authentication failures carry no body
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    if exc.status_code >= 500:
        error_logger.log_error(exc, request=request, user=getattr(request.state, "user", None))
    else:
        logger.info(f"[{request.method} {request.url.path}] {exc.status_code} {exc.message}")

    return envelope_response(exc.status_code, exc.message, exc.details)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.info(f"[{request.method} {request.url.path}] invalid input: {errors}")
    return envelope_response(status.HTTP_400_BAD_REQUEST, "Invalid input", errors)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware that catches all unhandled exceptions and logs them.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            error_id = error_logger.log_error(
                exc,
                request=request,
                user=getattr(request.state, "user", None),
                severity="critical",
                context={"unhandled": True},
            )
            return envelope_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An internal error occurred",
                {"error_id": error_id},
            )
