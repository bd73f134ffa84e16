# loja_api/adapters/inbound/api/v1/endpoints/cliente_endpoint.py

"""
Endpoints para consulta e cadastro de clientes.

A listagem exige o cookie 'token' de um cliente autenticado; o cadastro
é aberto.
"""

import logging
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query, status

from loja_api.adapters.inbound.api.deps import get_cliente_service, require_cliente
from loja_api.application.dtos.cliente_dto import ClienteCreate, ClienteCreated, ClienteOutput
from loja_api.application.use_cases import ClienteService
from loja_api.shared.utils.input_validation import InputValidator

# Configurar logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["Clientes"])


@router.get(
    "/clientes",
    response_model=Union[ClienteOutput, List[ClienteOutput]],
    dependencies=[Depends(require_cliente)],
    summary="Listar Clientes",
    description="Retorna todos os clientes ou, com 'idCliente', apenas um.",
    responses={
        400: {"description": "idCliente inválido"},
        401: {"description": "Token inválido ou expirado"},
        403: {"description": "Perfil sem permissão"},
        404: {"description": "Cliente não encontrado"},
    },
)
async def listar_clientes(
        idCliente: Optional[str] = Query(None, description="UUID do cliente"),
        service: ClienteService = Depends(get_cliente_service),
):
    if idCliente:
        id_cliente = InputValidator.parse_uuid(idCliente, "idCliente")
        cliente = await service.get_cliente(id_cliente)
        return ClienteOutput.from_domain(cliente)

    clientes = await service.list_clientes()
    return [ClienteOutput.from_domain(c) for c in clientes]


@router.post(
    "/clientes",
    response_model=ClienteCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Cadastrar Cliente",
    description="""
    Cadastra um novo cliente.

    - nomeCliente: obrigatório, não vazio
    - cpfCliente: exatamente 11 caracteres, único
    - emailCliente: deve conter '@', único
    - senhaCliente: no mínimo 8 caracteres
    """,
    responses={
        400: {"description": "Campos obrigatórios não preenchidos"},
        409: {"description": "CPF ou Email já cadastrados"},
    },
)
async def criar_cliente(
        payload: ClienteCreate,
        service: ClienteService = Depends(get_cliente_service),
):
    id_cliente = await service.register_cliente(payload)
    return ClienteCreated(message="Cliente cadastrado com sucesso!", idCliente=id_cliente)
