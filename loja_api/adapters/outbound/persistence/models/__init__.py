# loja_api/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta todos os modelos SQLAlchemy do sistema,
facilitando a importação e uso em outros módulos.
"""

from loja_api.adapters.outbound.persistence.models.base_model import Base
from loja_api.adapters.outbound.persistence.models.cliente_model import ClienteModel
from loja_api.adapters.outbound.persistence.models.produto_model import ProdutoModel

__all__ = [
    "Base",
    "ClienteModel",
    "ProdutoModel",
]
