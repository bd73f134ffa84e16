# loja_api/domain/__init__.py

"""
Módulo principal para componentes do domínio da aplicação.

Este módulo exporta as exceções e os modelos de domínio.
"""

from loja_api.domain.exceptions import (
    DomainException,               # Exceção base pura do domínio
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    InvalidCredentialsError,
    AuthorizationError,
    StorageError,
)
from loja_api.domain.models.cliente_domain_model import Cliente
from loja_api.domain.models.produto_domain_model import Produto
from loja_api.domain.models.role import Role

__all__ = [
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "AuthorizationError",
    "StorageError",
    "Cliente",
    "Produto",
    "Role",
]
