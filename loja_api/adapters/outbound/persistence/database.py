# loja_api/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from loja_api.adapters.outbound.persistence.models.base_model import Base

# Configure logger
logger = logging.getLogger(__name__)


class Database:
    """
    Process-wide database resource.

    Owns the async engine (connection pool) and the session factory.
    The engine is created once by init() during application startup and
    released by dispose() on shutdown; repositories only ever see the
    sessions handed out by session().
    """

    def __init__(self):
        self.engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    @property
    def is_initialized(self) -> bool:
        return self.engine is not None

    def init(self, database_url: str, **engine_options) -> None:
        """
        Create the engine and session factory.

        Args:
            database_url: SQLAlchemy async URL (postgresql+asyncpg://...)
            **engine_options: Overrides for the pool configuration

        Raises:
            RuntimeError: If the resource was already initialized
        """
        if self.is_initialized:
            raise RuntimeError("Database already initialized")

        options = dict(
            echo=False,
            pool_size=20,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=1800,
            pool_pre_ping=True,
        )
        options.update(engine_options)

        logger.info(f"Connecting to database: {database_url.split('@')[-1]}")
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )
        logger.info("Async database connection configured successfully")

    async def create_tables(self) -> None:
        """Create the tables declared on Base.metadata if they don't exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close every pooled connection and forget the engine."""
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Database connections closed")
        self.engine = None
        self._session_factory = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provides an async session, committing on success and
        rolling back on error. The session is always closed at the end.

        Example:
            ```python
            async with database.session() as db:
                result = await db.execute(select(ProdutoModel))
            ```
        """
        if self._session_factory is None:
            raise RuntimeError("Database not initialized; call init() first")

        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


database = Database()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: SQLAlchemy async session bound to the shared pool
    """
    async with database.session() as session:
        yield session
