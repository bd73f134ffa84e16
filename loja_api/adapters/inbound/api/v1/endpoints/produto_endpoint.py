# loja_api/adapters/inbound/api/v1/endpoints/produto_endpoint.py

"""
Endpoints para o CRUD de produtos.
"""

import logging
from typing import List, Optional, Union
from fastapi import APIRouter, Body, Depends, Query, status

from loja_api.adapters.inbound.api.deps import get_produto_service
from loja_api.application.dtos.produto_dto import (
    MessageResponse,
    ProdutoCreate,
    ProdutoCreated,
    ProdutoOutput,
    ProdutoUpdate,
)
from loja_api.application.use_cases import ProdutoService
from loja_api.shared.utils.input_validation import InputValidator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/produtos", tags=["Produtos"])


@router.get(
    "",
    response_model=Union[ProdutoOutput, List[ProdutoOutput]],
    summary="Listar Produtos",
    description="Retorna todos os produtos ou, com 'idProduto', apenas um.",
    responses={
        400: {"description": "Id do produto inválido"},
        404: {"description": "Produto não encontrado"},
    },
)
async def listar_produtos(
        idProduto: Optional[str] = Query(None, description="UUID do produto"),
        service: ProdutoService = Depends(get_produto_service),
):
    if idProduto:
        id_produto = InputValidator.parse_uuid(idProduto, "idProduto")
        produto = await service.get_produto(id_produto)
        return ProdutoOutput.from_domain(produto)

    produtos = await service.list_produtos()
    return [ProdutoOutput.from_domain(p) for p in produtos]


@router.post(
    "",
    response_model=ProdutoCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Cadastrar Produto",
    responses={400: {"description": "Campos obrigatórios não preenchidos"}},
)
async def criar_produto(
        payload: ProdutoCreate,
        service: ProdutoService = Depends(get_produto_service),
):
    id_produto = await service.create_produto(payload)
    return ProdutoCreated(message="Produto cadastrado com sucesso!", idProduto=id_produto)


@router.put(
    "/{idProduto}",
    response_model=MessageResponse,
    summary="Atualizar Produto",
    description=(
            "Atualiza todos os campos de um produto ou apenas alguns. "
            "Campos não enviados mantêm o valor atual."
    ),
    responses={
        400: {"description": "Id do produto inválido"},
        404: {"description": "Produto não encontrado"},
    },
)
async def atualizar_produto(
        idProduto: str,
        payload: Optional[ProdutoUpdate] = Body(None),
        service: ProdutoService = Depends(get_produto_service),
):
    id_produto = InputValidator.parse_uuid(idProduto, "idProduto")
    await service.update_produto(id_produto, payload or ProdutoUpdate())
    return MessageResponse(message="Produto atualizado com sucesso!")


@router.delete(
    "/{idProduto}",
    response_model=MessageResponse,
    summary="Deletar Produto",
    responses={
        400: {"description": "Id do produto inválido"},
        404: {"description": "Produto não encontrado"},
    },
)
async def deletar_produto(
        idProduto: str,
        service: ProdutoService = Depends(get_produto_service),
):
    id_produto = InputValidator.parse_uuid(idProduto, "idProduto")
    await service.delete_produto(id_produto)
    return MessageResponse(message="Produto deletado com sucesso!")
