# loja_api/application/dtos/cliente_dto.py

"""
Schemas para dados de cliente.

Este módulo define os dtos Pydantic para validação e serialização
dos dados relacionados a clientes. Os nomes dos campos seguem o
formato JSON exposto pela API.
"""

from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_validator

from loja_api.domain.models.cliente_domain_model import Cliente
from loja_api.shared.utils.input_validation import InputValidator, check


class ClienteCreate(BaseModel):
    """
    Schema para cadastro de um novo cliente.
    """
    nomeCliente: str = Field(..., description="Nome do cliente")
    cpfCliente: str = Field(..., description="CPF com exatamente 11 caracteres")
    emailCliente: str = Field(..., description="Email do cliente. Deve ser único.")
    senhaCliente: str = Field(..., description="Senha com no mínimo 8 caracteres")

    @field_validator('nomeCliente')
    def validate_nome(cls, v):
        check(InputValidator.validate_name(v))
        return InputValidator.sanitize_name(v)

    @field_validator('cpfCliente')
    def validate_cpf(cls, v):
        check(InputValidator.validate_cpf(v))
        return v

    @field_validator('emailCliente')
    def validate_email(cls, v):
        """
        Valida o email (não vazio, contém '@', até 200 caracteres).

        Raises:
            ValueError: Se o email for inválido
        """
        check(InputValidator.validate_email(v))
        return v.strip()

    @field_validator('senhaCliente')
    def validate_senha(cls, v):
        check(InputValidator.validate_password(v))
        return v


class ClienteOutput(BaseModel):
    """
    Schema para retorno de dados de cliente.

    Utilizado para retornar dados do cliente nas APIs sem expor a senha.
    """
    idCliente: UUID
    nomeCliente: str
    cpfCliente: str
    emailCliente: str

    @classmethod
    def from_domain(cls, cliente: Cliente) -> "ClienteOutput":
        return cls(
            idCliente=cliente.id,
            nomeCliente=cliente.nome,
            cpfCliente=cliente.cpf,
            emailCliente=cliente.email,
        )


class ClienteCreated(BaseModel):
    """Resposta do cadastro de cliente."""
    message: str
    idCliente: UUID

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Cliente cadastrado com sucesso!",
                "idCliente": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
            }
        }
    )
