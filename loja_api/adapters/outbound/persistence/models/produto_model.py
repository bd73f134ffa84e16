# loja_api/adapters/outbound/persistence/models/produto_model.py

"""
Modelo de produto do catálogo.
"""

import uuid

from sqlalchemy import Column, Numeric, String, Uuid
from loja_api.adapters.outbound.persistence.models.base_model import Base


class ProdutoModel(Base):
    """
    Modelo que representa um produto.

    Attributes:
        id: Identificador único (UUID gerado pelo servidor)
        nome: Nome do produto
        preco: Preço com duas casas decimais
    """
    __tablename__ = "produtos"

    id = Column("idProduto", Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    nome = Column("nomeProduto", String(100), nullable=False)
    preco = Column("precoProduto", Numeric(10, 2, asdecimal=True), nullable=False)

    def __repr__(self) -> str:
        return f"<ProdutoModel(id={self.id}, nome={self.nome})>"
