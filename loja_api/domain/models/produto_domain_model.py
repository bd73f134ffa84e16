# loja_api/domain/models/produto_domain_model.py

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass
class Produto:
    """Domain model for the product entity."""
    id: UUID
    nome: str
    preco: Decimal
