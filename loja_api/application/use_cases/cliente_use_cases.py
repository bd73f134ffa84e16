# loja_api/application/use_cases/cliente_use_cases.py (async version)

"""
Service for cliente management.

This module implements the use cases for listing, fetching and
registering clientes.
"""

import logging
from typing import List
from uuid import UUID
from sqlalchemy.exc import IntegrityError

from loja_api.adapters.outbound.security.auth_cliente_manager import ClienteAuthManager
from loja_api.application.dtos.cliente_dto import ClienteCreate
from loja_api.application.ports.inbound import IClienteUseCase
from loja_api.application.ports.outbound import IClienteRepository
from loja_api.domain.exceptions import ConflictError, NotFoundError, StorageError
from loja_api.domain.models.cliente_domain_model import Cliente

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "CPF ou Email já cadastrados!"


class ClienteService(IClienteUseCase):
    """
    Service for cliente management.

    This class implements the business logic related to clientes;
    the repository is injected so the service never touches the pool.
    """

    def __init__(self, repository: IClienteRepository):
        self.repository = repository

    async def list_clientes(self) -> List[Cliente]:
        return await self.repository.list_all()

    async def get_cliente(self, id_cliente: UUID) -> Cliente:
        """
        Get a single cliente.

        Raises:
            NotFoundError: If no cliente has this ID
        """
        result = await self.repository.find_by_id(id_cliente)
        if not result:
            logger.warning(f"Cliente not found: ID {id_cliente}")
            raise NotFoundError(detail="Cliente não encontrado!", resource_id=id_cliente)
        return result[0]

    async def register_cliente(self, data: ClienteCreate) -> UUID:
        """
        Register a new cliente with a bcrypt-hashed password.

        The existence check answers the common duplicate case; the unique
        constraints on CPF and email catch concurrent registrations that
        slip past it.

        Args:
            data: Validated registration data

        Returns:
            ID of the new cliente

        Raises:
            ConflictError: If the CPF or email is already registered
            StorageError: In case of any other database error
        """
        existing = await self.repository.find_by_email_or_cpf(data.cpfCliente, data.emailCliente)
        if existing:
            logger.warning("Duplicate registration attempt (CPF or email already registered)")
            raise ConflictError(detail=DUPLICATE_MESSAGE)

        senha_hash = await ClienteAuthManager.hash_password(data.senhaCliente)

        try:
            return await self.repository.insert(
                nome=data.nomeCliente,
                cpf=data.cpfCliente,
                email=data.emailCliente,
                senha_hash=senha_hash,
            )
        except StorageError as e:
            if isinstance(e.original_error, IntegrityError):
                logger.warning("Unique constraint violated while registering cliente")
                raise ConflictError(detail=DUPLICATE_MESSAGE) from e
            raise
