# loja_api/application/dtos/auth_dto.py

"""
Schemas para autenticação de clientes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from uuid import UUID
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """
    Schema para login de cliente.

    Email ou CPF identificam o cliente; a senha é obrigatória. A ausência
    desses campos é verificada pelo serviço de autenticação.
    """
    emailCliente: Optional[str] = Field(None, description="Email do cliente")
    cpfCliente: Optional[str] = Field(None, description="CPF do cliente")
    senhaCliente: Optional[str] = Field(None, description="Senha do cliente")


class LoginResponse(BaseModel):
    """Resposta do login; o token também é enviado no cookie 'token'."""
    message: str
    token: str


class TokenClaims(BaseModel):
    """Claims decodificadas do token de um cliente autenticado."""
    idCliente: UUID
    nomeCliente: str
    tipoUsuario: str
    exp: int


@dataclass
class LoginResult:
    """Token assinado e os atributos do cookie que o transporta."""
    token: str
    cookie_options: Dict[str, Any] = field(default_factory=dict)
