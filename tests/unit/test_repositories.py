# Repository tests against a mocked AsyncSession.
# Statements are compiled for PostgreSQL to check that every value
# travels as a typed bound parameter instead of being spliced into SQL.

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import CHAR, Numeric
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, OperationalError

from loja_api.adapters.outbound.persistence.models import ClienteModel, ProdutoModel
from loja_api.adapters.outbound.persistence.repositories import ClienteRepository, ProdutoRepository
from loja_api.domain.exceptions import StorageError
from loja_api.domain.models.cliente_domain_model import Cliente
from loja_api.domain.models.produto_domain_model import Produto

pytestmark = pytest.mark.anyio


def fake_session(rows=None, error: Exception | None = None) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows or []

    session = MagicMock()
    session.execute = AsyncMock(return_value=result, side_effect=error)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


def compiled_statement(session: MagicMock):
    statement = session.execute.await_args.args[0]
    return statement.compile(dialect=postgresql.dialect())


def bind_for(compiled, value):
    return next(b for b in compiled.binds.values() if b.value == value)


async def test_lookup_values_are_bound_parameters() -> None:
    session = fake_session()
    hostile = "x' OR '1'='1"

    await ClienteRepository(session).find_by_email_or_cpf("12345678901", hostile)

    compiled = compiled_statement(session)
    assert hostile in compiled.params.values()
    assert "12345678901" in compiled.params.values()
    assert hostile not in str(compiled)
    assert isinstance(bind_for(compiled, "12345678901").type, CHAR)


async def test_lookup_without_cpf_or_email_skips_the_database() -> None:
    session = fake_session()

    assert await ClienteRepository(session).find_by_email_or_cpf(None, None) == []
    session.execute.assert_not_awaited()


async def test_lookup_with_only_email_filters_on_email() -> None:
    session = fake_session()

    await ClienteRepository(session).find_by_email_or_cpf(None, "maria@example.com")

    compiled = compiled_statement(session)
    assert list(compiled.params.values()) == ["maria@example.com"]


async def test_find_by_email_binds_email_as_varchar() -> None:
    session = fake_session()

    await ClienteRepository(session).find_by_email("maria@example.com")

    compiled = compiled_statement(session)
    assert list(compiled.params.values()) == ["maria@example.com"]
    assert bind_for(compiled, "maria@example.com").type.length == 200


async def test_rows_are_mapped_to_domain_records() -> None:
    id_cliente = uuid.uuid4()
    row = ClienteModel(id=id_cliente, nome="Maria", cpf="12345678901", email="maria@example.com", senha="hash")
    session = fake_session(rows=[row])

    result = await ClienteRepository(session).list_all()

    assert result == [Cliente(id=id_cliente, nome="Maria", cpf="12345678901", email="maria@example.com",
                              senha_hash="hash")]


async def test_insert_cliente_commits_and_returns_generated_id() -> None:
    session = fake_session()

    new_id = await ClienteRepository(session).insert("Maria", "12345678901", "maria@example.com", "hash")

    assert isinstance(new_id, uuid.UUID)
    session.commit.assert_awaited_once()
    compiled = compiled_statement(session)
    assert new_id in compiled.params.values()
    assert "hash" in compiled.params.values()
    assert "maria@example.com" not in str(compiled)


async def test_integrity_error_on_insert_rolls_back_and_keeps_cause() -> None:
    error = IntegrityError("INSERT INTO clientes", {}, Exception("duplicate key"))
    session = fake_session(error=error)

    with pytest.raises(StorageError) as exc_info:
        await ClienteRepository(session).insert("Maria", "12345678901", "maria@example.com", "hash")

    assert exc_info.value.original_error is error
    session.rollback.assert_awaited_once()
    session.commit.assert_not_awaited()


async def test_read_failure_becomes_storage_error() -> None:
    error = OperationalError("SELECT", {}, Exception("connection refused"))
    session = fake_session(error=error)

    with pytest.raises(StorageError) as exc_info:
        await ProdutoRepository(session).find_by_id(uuid.uuid4())

    assert exc_info.value.original_error is error


async def test_produto_update_binds_price_as_numeric() -> None:
    session = fake_session()
    id_produto = uuid.uuid4()

    await ProdutoRepository(session).update(id_produto, "Camiseta", Decimal("59.90"))

    compiled = compiled_statement(session)
    assert id_produto in compiled.params.values()
    assert isinstance(bind_for(compiled, Decimal("59.90")).type, Numeric)
    session.commit.assert_awaited_once()


async def test_produto_delete_targets_a_single_id() -> None:
    session = fake_session()
    id_produto = uuid.uuid4()

    await ProdutoRepository(session).delete(id_produto)

    compiled = compiled_statement(session)
    assert list(compiled.params.values()) == [id_produto]
    assert str(compiled).startswith("DELETE FROM produtos")


async def test_produto_rows_keep_decimal_price() -> None:
    id_produto = uuid.uuid4()
    session = fake_session(rows=[ProdutoModel(id=id_produto, nome="Boné", preco=Decimal("19.99"))])

    (produto,) = await ProdutoRepository(session).find_by_id(id_produto)

    assert produto == Produto(id=id_produto, nome="Boné", preco=Decimal("19.99"))
