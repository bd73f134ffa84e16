# loja_api/adapters/inbound/api/v1/endpoints/auth_endpoint.py (async version)

import logging
from fastapi import APIRouter, Depends, Response, status

from loja_api.adapters.configuration.config import settings
from loja_api.adapters.inbound.api.deps import get_auth_service
from loja_api.application.dtos.auth_dto import LoginRequest, LoginResponse
from loja_api.application.use_cases import AuthService
from loja_api.domain.exceptions import InvalidCredentialsError, NotFoundError

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/clientes/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Login Cliente - Gera o token de acesso",
    description=(
            "Autentica um cliente por email ou CPF e senha. O token JWT é devolvido "
            "no corpo da resposta e também gravado no cookie HTTP-only 'token'."
    ),
    responses={
        400: {"description": "Email ou CPF e senha são obrigatórios"},
        401: {"description": "Email/CPF não encontrado ou senha inválida"},
    },
)
async def login_cliente(
        payload: LoginRequest,
        response: Response,
        service: AuthService = Depends(get_auth_service),
):
    try:
        result = await service.login(payload)
    except NotFoundError as e:
        # unknown credentials are an authentication failure, not a missing resource
        raise InvalidCredentialsError(detail=e.detail) from e

    response.set_cookie(key=settings.TOKEN_COOKIE_NAME, value=result.token, **result.cookie_options)
    return LoginResponse(message="Login realizado com sucesso!", token=result.token)
