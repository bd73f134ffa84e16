# Shared helpers for API endpoint tests.
# Repositories are swapped for in-memory fakes through dependency overrides,
# so no test touches a real database.

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.exc import IntegrityError, OperationalError

from loja_api.adapters.configuration.config import settings
from loja_api.adapters.inbound.api.deps import get_cliente_repository, get_produto_repository
from loja_api.adapters.outbound.security.auth_cliente_manager import ClienteAuthManager
from loja_api.application.ports.outbound import IClienteRepository, IProdutoRepository
from loja_api.domain.exceptions import StorageError
from loja_api.domain.models.cliente_domain_model import Cliente
from loja_api.domain.models.produto_domain_model import Produto
from loja_api.main import app

SENHA = "senhaSegura123"


def storage_failure() -> StorageError:
    return StorageError(
        detail="Error listing",
        original_error=OperationalError("SELECT 1", {}, Exception("connection refused")),
    )


class FakeProdutoRepository(IProdutoRepository):
    """In-memory produto repository that records every call."""

    def __init__(self, *, fail: bool = False) -> None:
        self.rows: dict[uuid.UUID, Produto] = {}
        self.calls: list[str] = []
        self._fail = fail

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self._fail:
            raise storage_failure()

    def seed(self, nome: str, preco: str) -> Produto:
        produto = Produto(id=uuid.uuid4(), nome=nome, preco=Decimal(preco))
        self.rows[produto.id] = produto
        return produto

    async def list_all(self) -> list[Produto]:
        self._record("list_all")
        return [replace(p) for p in self.rows.values()]

    async def find_by_id(self, id: uuid.UUID) -> list[Produto]:
        self._record("find_by_id")
        produto = self.rows.get(id)
        return [replace(produto)] if produto else []

    async def insert(self, nome: str, preco: Decimal) -> uuid.UUID:
        self._record("insert")
        new_id = uuid.uuid4()
        self.rows[new_id] = Produto(id=new_id, nome=nome, preco=preco)
        return new_id

    async def update(self, id: uuid.UUID, nome: str, preco: Decimal) -> None:
        self._record("update")
        self.rows[id] = Produto(id=id, nome=nome, preco=preco)

    async def delete(self, id: uuid.UUID) -> None:
        self._record("delete")
        self.rows.pop(id, None)


class FakeClienteRepository(IClienteRepository):
    """
    In-memory cliente repository.

    With race=True the existence check never sees duplicates and insert
    fails like a unique constraint would, mimicking two concurrent
    registrations.
    """

    def __init__(self, *, race: bool = False, fail: bool = False) -> None:
        self.rows: dict[uuid.UUID, Cliente] = {}
        self.calls: list[str] = []
        self._race = race
        self._fail = fail

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self._fail:
            raise storage_failure()

    def seed(self, nome: str = "Maria Silva", cpf: str = "12345678901",
             email: str = "maria@example.com", senha: str = SENHA) -> Cliente:
        cliente = Cliente(
            id=uuid.uuid4(),
            nome=nome,
            cpf=cpf,
            email=email,
            senha_hash=ClienteAuthManager.crypt_context.hash(senha),
        )
        self.rows[cliente.id] = cliente
        return cliente

    async def list_all(self) -> list[Cliente]:
        self._record("list_all")
        return list(self.rows.values())

    async def find_by_id(self, id: uuid.UUID) -> list[Cliente]:
        self._record("find_by_id")
        cliente = self.rows.get(id)
        return [cliente] if cliente else []

    async def find_by_email_or_cpf(self, cpf: str | None, email: str | None) -> list[Cliente]:
        self._record("find_by_email_or_cpf")
        if self._race:
            return []
        return [
            c for c in self.rows.values()
            if (cpf is not None and c.cpf == cpf) or (email is not None and c.email == email)
        ]

    async def find_by_email(self, email: str) -> list[Cliente]:
        self._record("find_by_email")
        return [c for c in self.rows.values() if c.email == email]

    async def insert(self, nome: str, cpf: str, email: str, senha_hash: str) -> uuid.UUID:
        self._record("insert")
        if any(c.cpf == cpf or c.email == email for c in self.rows.values()):
            raise StorageError(
                detail="Error inserting cliente",
                original_error=IntegrityError(
                    "INSERT INTO clientes", {}, Exception('duplicate key value violates unique constraint "uq_clientes_cpf"')
                ),
            )
        new_id = uuid.uuid4()
        self.rows[new_id] = Cliente(id=new_id, nome=nome, cpf=cpf, email=email, senha_hash=senha_hash)
        return new_id


def make_token(
        *,
        id_cliente: uuid.UUID | None = None,
        nome: str = "Maria Silva",
        role: Any = "cliente",
        expires_delta: timedelta = timedelta(minutes=5),
        secret: str | None = None,
) -> str:
    """Sign a token directly, so tests can forge roles, expiries and secrets."""
    payload: dict[str, Any] = {
        "idCliente": str(id_cliente or uuid.uuid4()),
        "nomeCliente": nome,
        "exp": int((datetime.now(timezone.utc) + expires_delta).timestamp()),
    }
    if role is not None:
        payload["tipoUsuario"] = role
    return jwt.encode(payload, secret or settings.SECRET_KEY, algorithm=settings.ALGORITHM)


@contextmanager
def api_test_client(
        *,
        cliente_repository: IClienteRepository | None = None,
        produto_repository: IProdutoRepository | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped repository overrides."""

    clientes = cliente_repository or FakeClienteRepository()
    produtos = produto_repository or FakeProdutoRepository()

    app.dependency_overrides[get_cliente_repository] = lambda: clientes
    app.dependency_overrides[get_produto_repository] = lambda: produtos

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
