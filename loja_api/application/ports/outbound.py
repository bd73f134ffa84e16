# loja_api/application/ports/outbound.py

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Generic, Optional, TypeVar
from uuid import UUID

from loja_api.domain.models.cliente_domain_model import Cliente
from loja_api.domain.models.produto_domain_model import Produto

T = TypeVar('T')


class IRepository(Generic[T], ABC):
    """Generic read interface shared by every repository."""

    @abstractmethod
    async def list_all(self) -> List[T]:
        """List every entity."""
        pass

    @abstractmethod
    async def find_by_id(self, id: UUID) -> List[T]:
        """Find entity by ID; empty list when absent."""
        pass


class IClienteRepository(IRepository[Cliente], ABC):
    """Cliente repository interface."""

    @abstractmethod
    async def find_by_email_or_cpf(self, cpf: Optional[str], email: Optional[str]) -> List[Cliente]:
        """Find every cliente matching the CPF or the email."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> List[Cliente]:
        """Find clientes by email."""
        pass

    @abstractmethod
    async def insert(self, nome: str, cpf: str, email: str, senha_hash: str) -> UUID:
        """Insert a cliente and return its generated ID."""
        pass


class IProdutoRepository(IRepository[Produto], ABC):
    """Produto repository interface."""

    @abstractmethod
    async def insert(self, nome: str, preco: Decimal) -> UUID:
        """Insert a produto and return its generated ID."""
        pass

    @abstractmethod
    async def update(self, id: UUID, nome: str, preco: Decimal) -> None:
        """Overwrite every field of a produto."""
        pass

    @abstractmethod
    async def delete(self, id: UUID) -> None:
        """Delete a produto by ID."""
        pass
