# loja_api/main.py (async version)

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from loja_api.adapters.configuration.config import settings
from loja_api.adapters.outbound.persistence.database import database

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.

    The connection pool is created once here and released on shutdown.
    """
    # Startup
    logger.info("Application starting up...")
    database.init(settings.async_database_url)

    if settings.DB_CREATE_TABLES:
        await database.create_tables()

    yield

    # Shutdown
    logger.info("Application shutting down...")
    await database.dispose()


# Create FastAPI instance
app = FastAPI(
    title="Loja API",
    description="API de clientes e produtos",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Middlewares
from loja_api.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    register_validation_handler,
)

app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_middleware(AsyncExceptionMiddleware)
register_validation_handler(app)

# Routers
from loja_api.adapters.inbound.api.v1.router import api_router

app.include_router(api_router)


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    schema_doc = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    # Validation failures are answered with 400, never 422
    for schema in ("HTTPValidationError", "ValidationError"):
        schema_doc.get("components", {}).get("schemas", {}).pop(schema, None)

    for path in schema_doc.get("paths", {}).values():
        for op in path.values():
            op.get("responses", {}).pop("422", None)

    app.openapi_schema = schema_doc
    return schema_doc


app.openapi = custom_openapi
