# loja_api/application/use_cases/auth_use_cases.py (async version)

"""
Service for cliente authentication.

This module implements the login flow: credential lookup, password
verification and token issuance.
"""

import logging

from loja_api.adapters.outbound.security.auth_cliente_manager import ClienteAuthManager
from loja_api.application.dtos.auth_dto import LoginRequest, LoginResult
from loja_api.application.ports.inbound import IAuthUseCase
from loja_api.application.ports.outbound import IClienteRepository
from loja_api.domain.exceptions import InvalidCredentialsError, NotFoundError, ValidationError
from loja_api.domain.models.role import Role

logger = logging.getLogger(__name__)


class AuthService(IAuthUseCase):
    """
    Service for cliente authentication.
    """

    def __init__(self, repository: IClienteRepository):
        self.repository = repository

    async def login(self, data: LoginRequest) -> LoginResult:
        """
        Authenticate a cliente by email or CPF and password.

        Args:
            data: Login request (email and/or CPF, password)

        Returns:
            Signed token and the attributes of the cookie that carries it

        Raises:
            ValidationError: If both email and CPF are missing, or the password is missing
            NotFoundError: If no cliente matches the email or CPF
            InvalidCredentialsError: If the password doesn't match
        """
        if (data.emailCliente is None and data.cpfCliente is None) or data.senhaCliente is None:
            raise ValidationError(detail="Email ou CPF e senha são obrigatórios!")

        result = await self.repository.find_by_email_or_cpf(data.cpfCliente, data.emailCliente)
        if len(result) == 0:
            logger.warning("Login attempt with unknown email/CPF")
            raise NotFoundError(detail="Email ou CPF não encontrado!")

        cliente = result[0]

        if not await ClienteAuthManager.verify_password(data.senhaCliente, cliente.senha_hash):
            logger.warning(f"Login attempt with incorrect password: cliente {cliente.id}")
            raise InvalidCredentialsError(detail="Senha inválida!")

        token = await ClienteAuthManager.create_access_token(
            id_cliente=cliente.id,
            nome_cliente=cliente.nome,
            role=Role.CLIENTE,
        )

        logger.info(f"Successful cliente login: {cliente.id}")
        return LoginResult(token=token, cookie_options=ClienteAuthManager.cookie_options())
