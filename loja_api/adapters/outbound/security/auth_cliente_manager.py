# loja_api/adapters/outbound/security/auth_cliente_manager.py (async version)

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import jwt, JWTError
from passlib.context import CryptContext

from loja_api.adapters.configuration.config import settings
from loja_api.domain.exceptions import AuthenticationError
from loja_api.domain.models.role import Role


class ClienteAuthManager:
    """
    Authentication manager for the JWT tokens and passwords of clientes.
    """

    crypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    @classmethod
    async def create_access_token(
            cls,
            id_cliente: UUID,
            nome_cliente: str,
            role: Role = Role.CLIENTE,
            expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create a signed JWT carrying the cliente identity and its role.

        - expires_delta: defaults to the configured token duration, the same
          value used for the cookie max-age.
        """
        if expires_delta is None:
            expires_delta = settings.access_token_expires

        expire = datetime.now(timezone.utc) + expires_delta
        payload = {
            "idCliente": str(id_cliente),
            "nomeCliente": nome_cliente,
            "tipoUsuario": role.value,
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @classmethod
    def decode_access_token(cls, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry and return the claims.

        Pure computation, no I/O.

        Raises:
            AuthenticationError: If the token is malformed, tampered with or expired
        """
        try:
            return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except JWTError:
            raise AuthenticationError()

    @classmethod
    async def hash_password(cls, password: str) -> str:
        """
        Generate secure password hash for storage in the database.
        """
        return cls.crypt_context.hash(password)

    @classmethod
    async def verify_password(cls, plain_password: str, hashed_password: str) -> bool:
        """
        Compare plain text password with stored hash.
        """
        try:
            return cls.crypt_context.verify(plain_password, hashed_password)
        except ValueError:
            # stored value is not a recognizable hash
            return False

    @classmethod
    def cookie_options(cls) -> Dict[str, Any]:
        """Attributes of the 'token' cookie; max_age mirrors the token expiry."""
        return {
            "httponly": True,
            "secure": False,
            "samesite": "strict",
            "max_age": settings.cookie_max_age,
        }
