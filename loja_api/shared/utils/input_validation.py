# loja_api/shared/utils/input_validation.py

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple
from uuid import UUID

from loja_api.domain.exceptions import ValidationError


class InputValidator:
    """
    Classe para validação e sanitização de entradas do usuário,
    complementando as validações do Pydantic.
    """

    # Constantes para limites (espelham as colunas do banco)
    MAX_NAME_LENGTH = 100
    MAX_EMAIL_LENGTH = 200
    CPF_LENGTH = 11
    UUID_LENGTH = 36
    MIN_PASSWORD_LENGTH = 8
    MAX_PASSWORD_LENGTH = 72  # Limite seguro para bcrypt
    PRICE_QUANTUM = Decimal("0.01")
    MAX_PRICE = Decimal("99999999.99")  # decimal(10,2)

    @classmethod
    def validate_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Valida um nome (não vazio e dentro do limite da coluna).

        Args:
            name: String a ser validada

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not name or not name.strip():
            return False, "Nome não pode estar vazio"

        if len(name.strip()) > cls.MAX_NAME_LENGTH:
            return False, f"Nome é muito longo (máximo {cls.MAX_NAME_LENGTH} caracteres)"

        return True, None

    @classmethod
    def sanitize_name(cls, name: str) -> str:
        """
        Sanitiza um nome removendo espaços extras.

        Args:
            name: String a ser sanitizada

        Returns:
            String sanitizada
        """
        return re.sub(r'\s+', ' ', name.strip())

    @classmethod
    def validate_cpf(cls, cpf: str) -> Tuple[bool, Optional[str]]:
        if not cpf or len(cpf) != cls.CPF_LENGTH:
            return False, f"CPF deve ter exatamente {cls.CPF_LENGTH} caracteres"
        return True, None

    @classmethod
    def validate_email(cls, email: str) -> Tuple[bool, Optional[str]]:
        """
        Valida formato mínimo e comprimento de email.

        Args:
            email: Email a ser validado

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not email or not email.strip():
            return False, "Email não pode estar vazio"

        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, f"Email é muito longo (máximo {cls.MAX_EMAIL_LENGTH} caracteres)"

        if "@" not in email:
            return False, "Formato de email inválido"

        return True, None

    @classmethod
    def validate_password(cls, password: str) -> Tuple[bool, Optional[str]]:
        """
        Valida o comprimento de uma senha.

        Args:
            password: Senha a ser validada

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not password or not password.strip():
            return False, "Senha não pode estar vazia"

        if len(password) < cls.MIN_PASSWORD_LENGTH:
            return False, f"Senha deve ter pelo menos {cls.MIN_PASSWORD_LENGTH} caracteres"

        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_LENGTH:
            return False, f"Senha é muito longa (máximo {cls.MAX_PASSWORD_LENGTH} bytes)"

        return True, None

    @classmethod
    def normalize_price(cls, price: Decimal) -> Decimal:
        """
        Valida e arredonda um preço para duas casas decimais.

        Raises:
            ValueError: Se o preço for negativo ou não couber em decimal(10,2)
        """
        if not price.is_finite():
            raise ValueError("Preço deve ser numérico")
        if price < 0:
            raise ValueError("Preço não pode ser negativo")
        # quantize() overflows the decimal context for huge values
        if price > cls.MAX_PRICE:
            raise ValueError(f"Preço excede o máximo permitido ({cls.MAX_PRICE})")

        quantized = price.quantize(cls.PRICE_QUANTUM, rounding=ROUND_HALF_UP)
        if quantized > cls.MAX_PRICE:
            raise ValueError(f"Preço excede o máximo permitido ({cls.MAX_PRICE})")
        return quantized

    @classmethod
    def parse_uuid(cls, value: str, field: str) -> UUID:
        """
        Converte um identificador recebido na URL para UUID.

        O identificador precisa ter exatamente 36 caracteres (formato
        canônico com hífens).

        Raises:
            ValidationError: Se o identificador for inválido
        """
        if value is None or len(value) != cls.UUID_LENGTH:
            raise ValidationError(f"{field} inválido!", fields={field: "deve ser um UUID com 36 caracteres"})
        try:
            return UUID(value)
        except ValueError:
            raise ValidationError(f"{field} inválido!", fields={field: "deve ser um UUID com 36 caracteres"})


def check(result: Tuple[bool, Optional[str]]) -> None:
    """Raise ValueError for a failed (valid, message) tuple; used inside Pydantic validators."""
    is_valid, error_msg = result
    if not is_valid:
        raise ValueError(error_msg)
