# loja_api/adapters/outbound/persistence/repositories/base_repository.py (async version)

from typing import Any, Generic, List, Type, TypeVar
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Executable
from sqlalchemy.future import select
import logging

from loja_api.adapters.outbound.persistence.models.base_model import Base
from loja_api.domain.exceptions import StorageError

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)
# Define generic type for domain records
DomainType = TypeVar("DomainType")

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRepositoryBase(Generic[ModelType, DomainType]):
    """
    Async base class for implementing the Repository pattern.

    Provides the read operations shared by every entity and a single
    place where driver failures are logged and wrapped in StorageError.

    Attributes:
        db: Async session handed out by the shared Database resource
        model: SQLAlchemy model class
        logger: Configured logger for the class
    """

    model: Type[ModelType]

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with a database session.

        Args:
            db: Async database session
        """
        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{self.model.__name__}")

    def to_domain(self, db_model: ModelType) -> DomainType:
        """Convert database model to domain model."""
        raise NotImplementedError

    async def _fetch(self, query: Executable, action: str) -> List[DomainType]:
        """
        Run a SELECT and map every row to the domain model.

        Args:
            query: Statement built from the model's typed columns
            action: Short description used in logs and in the error detail

        Raises:
            StorageError: In case of database error
        """
        try:
            result = await self.db.execute(query)
            return [self.to_domain(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error {action}: {str(e)}")
            raise StorageError(detail=f"Error {action}", original_error=e) from e

    async def _write(self, statement: Executable, action: str) -> None:
        """
        Run an INSERT/UPDATE/DELETE and commit it.

        Raises:
            StorageError: In case of database error (the session is rolled back)
        """
        try:
            await self.db.execute(statement)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error {action}: {str(e)}")
            raise StorageError(detail=f"Error {action}", original_error=e) from e

    async def list_all(self) -> List[DomainType]:
        """
        List every entity.

        Returns:
            List of domain records

        Raises:
            StorageError: In case of database error
        """
        return await self._fetch(select(self.model), f"listing {self.model.__tablename__}")

    async def find_by_id(self, id: Any) -> List[DomainType]:
        """
        Find an entity by ID.

        Args:
            id: UUID of the entity

        Returns:
            List with the entity, or an empty list if it doesn't exist

        Raises:
            StorageError: In case of database error
        """
        query = select(self.model).where(self.model.id == id)
        return await self._fetch(query, f"fetching {self.model.__name__} with ID {id}")
