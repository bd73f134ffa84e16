# loja_api/adapters/outbound/persistence/repositories/produto_repository.py (async version)

"""
Repository for produto operations.

This module implements the repository that performs database operations
related to produtos, implementing the IProdutoRepository interface.
"""

import uuid
from decimal import Decimal
from sqlalchemy import delete, insert, update

from loja_api.adapters.outbound.persistence.repositories.base_repository import AsyncRepositoryBase
from loja_api.adapters.outbound.persistence.models import ProdutoModel
from loja_api.application.ports.outbound import IProdutoRepository
from loja_api.domain.models.produto_domain_model import Produto


class ProdutoRepository(AsyncRepositoryBase[ProdutoModel, Produto], IProdutoRepository):
    """
    Async repository for the Produto entity.

    Prices are bound as NUMERIC(10, 2) and identifiers as UUID.
    """

    model = ProdutoModel

    async def insert(self, nome: str, preco: Decimal) -> uuid.UUID:
        """
        Insert a new produto.

        Args:
            nome: Product name
            preco: Price

        Returns:
            Generated produto ID

        Raises:
            StorageError: In case of database error
        """
        new_id = uuid.uuid4()
        statement = insert(ProdutoModel).values(id=new_id, nome=nome, preco=preco)
        await self._write(statement, "inserting produto")
        self.logger.info(f"Produto created: {new_id}")
        return new_id

    async def update(self, id: uuid.UUID, nome: str, preco: Decimal) -> None:
        """
        Write the full produto record.

        Raises:
            StorageError: In case of database error
        """
        statement = (
            update(ProdutoModel)
            .where(ProdutoModel.id == id)
            .values(nome=nome, preco=preco)
        )
        await self._write(statement, f"updating produto {id}")

    async def delete(self, id: uuid.UUID) -> None:
        """
        Physically delete a produto.

        Raises:
            StorageError: In case of database error
        """
        statement = delete(ProdutoModel).where(ProdutoModel.id == id)
        await self._write(statement, f"deleting produto {id}")
        self.logger.info(f"Produto deleted: {id}")

    def to_domain(self, db_model: ProdutoModel) -> Produto:
        return Produto(id=db_model.id, nome=db_model.nome, preco=db_model.preco)
