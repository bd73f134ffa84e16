# loja_api/application/dtos/produto_dto.py

"""
Schemas para dados de produto.

Este módulo define os dtos Pydantic para cadastro, atualização
(total ou parcial) e retorno de produtos.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_validator

from loja_api.domain.models.produto_domain_model import Produto
from loja_api.shared.utils.input_validation import InputValidator, check


class ProdutoCreate(BaseModel):
    """
    Schema para cadastro de produto.
    """
    nomeProduto: str = Field(..., description="Nome do produto")
    precoProduto: Decimal = Field(..., description="Preço (não negativo, duas casas decimais)")

    model_config = ConfigDict(
        json_schema_extra={"example": {"nomeProduto": "Camiseta", "precoProduto": 49.90}}
    )

    @field_validator('nomeProduto')
    def validate_nome(cls, v):
        check(InputValidator.validate_name(v))
        return InputValidator.sanitize_name(v)

    @field_validator('precoProduto')
    def validate_preco(cls, v):
        return InputValidator.normalize_price(v)


class ProdutoUpdate(BaseModel):
    """
    Schema para atualização de produto.

    Campos omitidos (ou nulos) mantêm o valor atual armazenado.
    """
    nomeProduto: Optional[str] = Field(None, description="Novo nome do produto (opcional)")
    precoProduto: Optional[Decimal] = Field(None, description="Novo preço do produto (opcional)")

    @field_validator('nomeProduto')
    def validate_nome(cls, v):
        if v is None:
            return v
        check(InputValidator.validate_name(v))
        return InputValidator.sanitize_name(v)

    @field_validator('precoProduto')
    def validate_preco(cls, v):
        if v is None:
            return v
        return InputValidator.normalize_price(v)


class ProdutoOutput(BaseModel):
    """Schema para retorno de produto."""
    idProduto: UUID
    nomeProduto: str
    precoProduto: float

    @classmethod
    def from_domain(cls, produto: Produto) -> "ProdutoOutput":
        return cls(idProduto=produto.id, nomeProduto=produto.nome, precoProduto=float(produto.preco))


class ProdutoCreated(BaseModel):
    """Resposta do cadastro de produto."""
    message: str
    idProduto: UUID


class MessageResponse(BaseModel):
    message: str
