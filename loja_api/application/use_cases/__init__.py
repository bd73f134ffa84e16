# loja_api/application/use_cases/__init__.py (async version)

"""
Application service module.

This package contains the application services that implement the business logic
of the application, organized according to functional domains.
"""

from loja_api.application.use_cases.auth_use_cases import AuthService
from loja_api.application.use_cases.cliente_use_cases import ClienteService
from loja_api.application.use_cases.produto_use_cases import ProdutoService

__all__ = [
    "AuthService",
    "ClienteService",
    "ProdutoService",
]
