# loja_api/application/use_cases/produto_use_cases.py (async version)

"""
Service for produto management.
"""

import logging
from typing import List
from uuid import UUID

from loja_api.application.dtos.produto_dto import ProdutoCreate, ProdutoUpdate
from loja_api.application.ports.inbound import IProdutoUseCase
from loja_api.application.ports.outbound import IProdutoRepository
from loja_api.domain.exceptions import NotFoundError
from loja_api.domain.models.produto_domain_model import Produto

logger = logging.getLogger(__name__)


class ProdutoService(IProdutoUseCase):
    """
    Service for produto management (create, read, partial update, delete).
    """

    def __init__(self, repository: IProdutoRepository):
        self.repository = repository

    async def list_produtos(self) -> List[Produto]:
        return await self.repository.list_all()

    async def get_produto(self, id_produto: UUID) -> Produto:
        """
        Get a single produto.

        Raises:
            NotFoundError: If no produto has this ID
        """
        result = await self.repository.find_by_id(id_produto)
        if len(result) != 1:
            logger.warning(f"Produto not found: ID {id_produto}")
            raise NotFoundError(detail="Produto não encontrado!", resource_id=id_produto)
        return result[0]

    async def create_produto(self, data: ProdutoCreate) -> UUID:
        return await self.repository.insert(nome=data.nomeProduto, preco=data.precoProduto)

    async def update_produto(self, id_produto: UUID, data: ProdutoUpdate) -> Produto:
        """
        Update a produto; fields left out of the request keep their stored value.

        The current record is read first, the supplied fields are laid over
        it and the full record is written back.

        Raises:
            NotFoundError: If no produto has this ID
        """
        atual = await self.get_produto(id_produto)

        atualizado = Produto(
            id=atual.id,
            nome=data.nomeProduto if data.nomeProduto is not None else atual.nome,
            preco=data.precoProduto if data.precoProduto is not None else atual.preco,
        )

        await self.repository.update(atualizado.id, atualizado.nome, atualizado.preco)
        logger.info(f"Produto updated: {id_produto}")
        return atualizado

    async def delete_produto(self, id_produto: UUID) -> None:
        """
        Delete a produto.

        Raises:
            NotFoundError: If no produto has this ID
        """
        await self.get_produto(id_produto)
        await self.repository.delete(id_produto)
