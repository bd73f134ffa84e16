# loja_api/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client, plus the handler that turns
request validation failures into 400 responses.
"""

import time
import logging
import traceback
from typing import Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from loja_api.domain.exceptions import DomainException
from loja_api.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "PERMISSION_DENIED": status.HTTP_403_FORBIDDEN,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_ERROR_MESSAGE = "Erro interno no servidor."


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            # Domain exceptions: mapping from pure exception to HTTP code based on 'internal_code'
            status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)

            if status_code >= 500:
                original = getattr(exc, "original_error", None)
                logger.error(
                    f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                    f"Cause: {original!r} | Path: {request.url.path}"
                )
                return JSONResponse(
                    status_code=status_code,
                    content={"detail": GENERIC_ERROR_MESSAGE, "code": exc.internal_code},
                )

            logger.warning(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )
            return JSONResponse(
                status_code=status_code,
                content={
                    "detail": exc.detail,
                    "code": exc.internal_code,
                    "errors": exc.details,
                }
            )

        except SQLAlchemyError as exc:
            # SQLAlchemy errors that escaped the repositories
            logger.error(
                f"Database error: Type={type(exc).__name__} | {str(exc)} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": GENERIC_ERROR_MESSAGE, "code": "DATABASE_ERROR"}
            )

        except Exception as exc:
            # Unhandled exceptions
            if settings.ENVIRONMENT == "production":
                logger.exception(
                    f"Unhandled exception: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )
            else:
                stack_trace = traceback.format_exc()
                logger.exception(
                    f"Unhandled exception: {str(exc)} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}\n"
                    f"Traceback: {stack_trace}"
                )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": GENERIC_ERROR_MESSAGE, "code": "INTERNAL_SERVER_ERROR"}
            )


def register_validation_handler(app: FastAPI) -> None:
    """Answer malformed bodies and parameters with 400 instead of FastAPI's 422."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
                "message": error.get("msg", ""),
            }
            for error in exc.errors()
        ]
        logger.warning(f"Validation error: {errors} | Path: {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Campos obrigatórios não preenchidos ou inválidos",
                "code": "INVALID_INPUT",
                "errors": errors,
            },
        )
