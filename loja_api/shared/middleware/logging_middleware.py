# loja_api/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

Every request gets an id (taken from 'X-Request-ID' or generated) that is
echoed in the response and prefixed to its log lines. The token cookie is
never logged, only whether it was sent.
"""

import time
import uuid
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from loja_api.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request and one per outcome, with elapsed time.
    Responses with status >= 400 are logged at WARNING.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        route = f"{request.method} {request.url.path}"

        if settings.ENVIRONMENT == "production":
            logger.info(f"[{request_id}] {route}")
        else:
            has_token = settings.TOKEN_COOKIE_NAME in request.cookies
            logger.info(
                f"[{request_id}] {route} | "
                f"Query: {dict(request.query_params) or 'N/A'} | "
                f"Token cookie: {'yes' if has_token else 'no'} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            logger.info(f"[{request_id}] {route} raised {type(exc).__name__} after {elapsed_ms:.1f}ms")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000.0
        response.headers[REQUEST_ID_HEADER] = request_id

        log = logger.warning if response.status_code >= 400 else logger.info
        log(f"[{request_id}] {route} -> {response.status_code} in {elapsed_ms:.1f}ms")
        return response
