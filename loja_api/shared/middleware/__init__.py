# loja_api/shared/middleware/__init__.py (async version)

from loja_api.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    register_validation_handler,
)
from loja_api.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "register_validation_handler",
]
