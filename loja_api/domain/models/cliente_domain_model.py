# loja_api/domain/models/cliente_domain_model.py

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Cliente:
    """Domain model for the customer entity."""
    id: UUID
    nome: str
    cpf: str
    email: str
    senha_hash: str  # bcrypt hash, never serialized
