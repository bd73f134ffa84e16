# loja_api/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for database access, repositories, services
and cookie-based authorization.
"""

import logging
from typing import Callable, Optional
from fastapi import Cookie, Depends
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from loja_api.adapters.configuration.config import settings
from loja_api.adapters.outbound.persistence.database import get_db
from loja_api.adapters.outbound.persistence.repositories import ClienteRepository, ProdutoRepository
from loja_api.adapters.outbound.security.auth_cliente_manager import ClienteAuthManager
from loja_api.application.dtos.auth_dto import TokenClaims
from loja_api.application.ports.outbound import IClienteRepository, IProdutoRepository
from loja_api.application.use_cases import AuthService, ClienteService, ProdutoService
from loja_api.domain.exceptions import AuthenticationError, AuthorizationError
from loja_api.domain.models.role import Role

# Configure logger
logger = logging.getLogger(__name__)

########################################################################
# Database Session Management
########################################################################

get_session = get_db


########################################################################
# Repositories and Services
########################################################################

async def get_cliente_repository(db: AsyncSession = Depends(get_session)) -> IClienteRepository:
    return ClienteRepository(db)


async def get_produto_repository(db: AsyncSession = Depends(get_session)) -> IProdutoRepository:
    return ProdutoRepository(db)


async def get_cliente_service(
        repository: IClienteRepository = Depends(get_cliente_repository),
) -> ClienteService:
    return ClienteService(repository)


async def get_auth_service(
        repository: IClienteRepository = Depends(get_cliente_repository),
) -> AuthService:
    return AuthService(repository)


async def get_produto_service(
        repository: IProdutoRepository = Depends(get_produto_repository),
) -> ProdutoService:
    return ProdutoService(repository)


########################################################################
# Cookie Token Authorization
########################################################################

def require_roles(*allowed_roles: Role) -> Callable:
    """
    Returns a dependency that only lets through requests whose 'token'
    cookie carries a valid, unexpired JWT with a role in allowed_roles.

    Usage:
        @router.get(..., dependencies=[Depends(require_roles(Role.CLIENTE))])

    The dependency answers:
        - AuthenticationError (401) when the cookie is missing, malformed,
          tampered with or expired
        - AuthorizationError (403) when the role claim is absent or not allowed
    """
    allowed = frozenset(allowed_roles)

    async def role_checker(
            token: Optional[str] = Cookie(None, alias=settings.TOKEN_COOKIE_NAME),
    ) -> TokenClaims:
        if not token:
            logger.warning("Request without token cookie")
            raise AuthenticationError()

        payload = ClienteAuthManager.decode_access_token(token)

        claimed_role = payload.get("tipoUsuario")
        if Role.parse(claimed_role) not in allowed:
            logger.warning(f"Role '{claimed_role}' denied; allowed: {sorted(r.value for r in allowed)}")
            raise AuthorizationError(role=claimed_role)

        try:
            return TokenClaims(**payload)
        except PydanticValidationError:
            logger.warning("Token with incomplete claims")
            raise AuthenticationError()

    return role_checker


require_cliente = require_roles(Role.CLIENTE)
