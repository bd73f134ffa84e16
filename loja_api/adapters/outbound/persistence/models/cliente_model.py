# loja_api/adapters/outbound/persistence/models/cliente_model.py

"""
Modelo de cliente (consumidor cadastrado na loja).

Este módulo define a tabela 'clientes'. CPF e email são únicos por
restrição no próprio banco, que é a fonte da verdade para duplicidade.
"""

import uuid

from sqlalchemy import Column, CHAR, String, Uuid, UniqueConstraint
from loja_api.adapters.outbound.persistence.models.base_model import Base


class ClienteModel(Base):
    """
    Modelo que representa um cliente da loja.

    Attributes:
        id: Identificador único (UUID gerado pelo servidor)
        nome: Nome do cliente
        cpf: CPF com exatamente 11 caracteres
        email: Email do cliente
        senha: Hash bcrypt da senha
    """
    __tablename__ = "clientes"
    __table_args__ = (
        UniqueConstraint("cpfCliente", name="uq_clientes_cpf"),
        UniqueConstraint("emailCliente", name="uq_clientes_email"),
    )

    id = Column("idCliente", Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    nome = Column("nomeCliente", String(100), nullable=False)
    cpf = Column("cpfCliente", CHAR(11), nullable=False)
    email = Column("emailCliente", String(200), nullable=False)
    senha = Column("senhaCliente", String(255), nullable=False)

    def __repr__(self) -> str:
        """Representação em string do objeto ClienteModel."""
        return f"<ClienteModel(id={self.id}, email={self.email})>"
