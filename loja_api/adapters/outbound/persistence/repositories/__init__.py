# loja_api/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Repository module.

This module exports the repository classes for the system entities,
implementing the Repository pattern.
"""

from loja_api.adapters.outbound.persistence.repositories.base_repository import AsyncRepositoryBase
from loja_api.adapters.outbound.persistence.repositories.cliente_repository import ClienteRepository
from loja_api.adapters.outbound.persistence.repositories.produto_repository import ProdutoRepository

__all__ = [
    "AsyncRepositoryBase",
    "ClienteRepository",
    "ProdutoRepository",
]
