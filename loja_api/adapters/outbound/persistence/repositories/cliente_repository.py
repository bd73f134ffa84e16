# loja_api/adapters/outbound/persistence/repositories/cliente_repository.py (async version)

"""
Repository for cliente operations.

This module implements the repository that performs database operations
related to clientes, implementing the IClienteRepository interface.
"""

import uuid
from typing import List, Optional
from sqlalchemy import insert, or_
from sqlalchemy.future import select

from loja_api.adapters.outbound.persistence.repositories.base_repository import AsyncRepositoryBase
from loja_api.adapters.outbound.persistence.models import ClienteModel
from loja_api.application.ports.outbound import IClienteRepository
from loja_api.domain.models.cliente_domain_model import Cliente


class ClienteRepository(AsyncRepositoryBase[ClienteModel, Cliente], IClienteRepository):
    """
    Async repository for the Cliente entity.

    Every value reaches the database as a bound parameter typed by its
    column: CHAR(11) for the CPF, VARCHAR(200) for the email and so on.
    """

    model = ClienteModel

    async def find_by_email_or_cpf(self, cpf: Optional[str], email: Optional[str]) -> List[Cliente]:
        """
        Find every cliente whose CPF or email matches.

        Used both by login and by the duplicate-registration check.
        A None argument contributes no condition.

        Args:
            cpf: CPF (11 characters) or None
            email: Email or None

        Returns:
            Matching clientes (possibly empty)

        Raises:
            StorageError: In case of database error
        """
        conditions = []
        if cpf is not None:
            conditions.append(ClienteModel.cpf == cpf)
        if email is not None:
            conditions.append(ClienteModel.email == email)
        if not conditions:
            return []

        query = select(ClienteModel).where(or_(*conditions))
        return await self._fetch(query, "fetching cliente by email or CPF")

    async def find_by_email(self, email: str) -> List[Cliente]:
        query = select(ClienteModel).where(ClienteModel.email == email)
        return await self._fetch(query, "fetching cliente by email")

    async def insert(self, nome: str, cpf: str, email: str, senha_hash: str) -> uuid.UUID:
        """
        Insert a new cliente.

        Args:
            nome: Name
            cpf: CPF (11 characters)
            email: Email
            senha_hash: bcrypt hash of the password

        Returns:
            Generated cliente ID

        Raises:
            StorageError: In case of database error, including unique
                constraint violations on CPF/email
        """
        new_id = uuid.uuid4()
        statement = insert(ClienteModel).values(
            id=new_id,
            nome=nome,
            cpf=cpf,
            email=email,
            senha=senha_hash,
        )
        await self._write(statement, "inserting cliente")
        self.logger.info(f"Cliente created: {new_id}")
        return new_id

    def to_domain(self, db_model: ClienteModel) -> Cliente:
        return Cliente(
            id=db_model.id,
            nome=db_model.nome,
            cpf=db_model.cpf,
            email=db_model.email,
            senha_hash=db_model.senha,
        )
