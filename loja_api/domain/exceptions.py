# loja_api/domain/exceptions.py

"""
Exceções de domínio da aplicação.

As exceções aqui definidas não conhecem HTTP: cada uma carrega apenas
uma mensagem e um código interno. A tradução para status HTTP é feita
pelo AsyncExceptionMiddleware a partir do código interno.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Exceção base pura do domínio."""

    internal_code: str = "DOMAIN_ERROR"

    def __init__(self, detail: str = "Erro de domínio", details: Optional[Dict[str, Any]] = None):
        super().__init__(detail)
        self.detail = detail
        self.details = details or {}


class ValidationError(DomainException):
    """Dados de entrada inválidos ou ausentes."""

    internal_code = "INVALID_INPUT"

    def __init__(self, detail: str = "Dados de entrada inválidos", fields: Optional[Dict[str, str]] = None):
        super().__init__(detail=detail, details=fields)


class NotFoundError(DomainException):
    """Recurso não encontrado."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Recurso não encontrado", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")
        self.resource_id = resource_id


class ConflictError(DomainException):
    """Recurso já existe (violação de unicidade)."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Recurso já existe"):
        super().__init__(detail=detail)


class AuthenticationError(DomainException):
    """Token ausente, inválido ou expirado."""

    internal_code = "INVALID_TOKEN"

    def __init__(self, detail: str = "Token inválido ou expirado!"):
        super().__init__(detail=detail)


class InvalidCredentialsError(AuthenticationError):
    """Credenciais inválidas."""

    internal_code = "INVALID_CREDENTIALS"

    def __init__(self, detail: str = "Credenciais inválidas"):
        super().__init__(detail=detail)


class AuthorizationError(DomainException):
    """Identidade válida, perfil sem permissão."""

    internal_code = "PERMISSION_DENIED"

    def __init__(self, detail: str = "Acesso não permitido para este perfil", role: Optional[str] = None):
        role_info = f" (perfil: {role})" if role else ""
        super().__init__(detail=f"{detail}{role_info}")


class StorageError(DomainException):
    """Erro na operação de banco de dados."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Erro ao executar operação no banco de dados",
                 original_error: Optional[Exception] = None):
        super().__init__(detail=detail)
        self.original_error = original_error
