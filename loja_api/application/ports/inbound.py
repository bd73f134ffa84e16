# loja_api/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from loja_api.application.dtos.auth_dto import LoginRequest, LoginResult
from loja_api.application.dtos.cliente_dto import ClienteCreate
from loja_api.application.dtos.produto_dto import ProdutoCreate, ProdutoUpdate
from loja_api.domain.models.cliente_domain_model import Cliente
from loja_api.domain.models.produto_domain_model import Produto


class IClienteUseCase(ABC):
    """Interface for cliente-related use cases."""

    @abstractmethod
    async def list_clientes(self) -> List[Cliente]:
        """List every cliente."""
        pass

    @abstractmethod
    async def get_cliente(self, id_cliente: UUID) -> Cliente:
        """Get cliente by ID."""
        pass

    @abstractmethod
    async def register_cliente(self, data: ClienteCreate) -> UUID:
        """Register a new cliente."""
        pass


class IAuthUseCase(ABC):
    """Interface for authentication use cases."""

    @abstractmethod
    async def login(self, data: LoginRequest) -> LoginResult:
        """Authenticate a cliente and return a signed token."""
        pass


class IProdutoUseCase(ABC):
    """Interface for produto-related use cases."""

    @abstractmethod
    async def list_produtos(self) -> List[Produto]:
        """List every produto."""
        pass

    @abstractmethod
    async def get_produto(self, id_produto: UUID) -> Produto:
        """Get produto by ID."""
        pass

    @abstractmethod
    async def create_produto(self, data: ProdutoCreate) -> UUID:
        """Create a produto and return its ID."""
        pass

    @abstractmethod
    async def update_produto(self, id_produto: UUID, data: ProdutoUpdate) -> Produto:
        """Update a produto, keeping omitted fields."""
        pass

    @abstractmethod
    async def delete_produto(self, id_produto: UUID) -> None:
        """Delete a produto."""
        pass
