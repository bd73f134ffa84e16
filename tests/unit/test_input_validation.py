from __future__ import annotations

import uuid
from decimal import Decimal

import pytest

from loja_api.domain.exceptions import ValidationError
from loja_api.shared.utils.input_validation import InputValidator


def test_parse_uuid_accepts_canonical_form() -> None:
    value = uuid.uuid4()
    assert InputValidator.parse_uuid(str(value), "idProduto") == value


@pytest.mark.parametrize("value", ["", "1234", str(uuid.uuid4()) + "0", "z" * 36, uuid.uuid4().hex])
def test_parse_uuid_rejects_other_shapes(value: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        InputValidator.parse_uuid(value, "idProduto")

    assert exc_info.value.detail == "idProduto inválido!"
    assert "idProduto" in exc_info.value.details


@pytest.mark.parametrize(
    "raw, expected",
    [("10", "10.00"), ("10.005", "10.01"), ("10.004", "10.00"), ("0", "0.00"), ("99999999.99", "99999999.99")],
)
def test_normalize_price_rounds_half_up(raw: str, expected: str) -> None:
    assert str(InputValidator.normalize_price(Decimal(raw))) == expected


@pytest.mark.parametrize(
    "raw", ["-0.01", "100000000", "99999999.995", "1e30", "123456789012345678901234567890", "NaN", "Infinity"]
)
def test_normalize_price_rejects_out_of_range(raw: str) -> None:
    with pytest.raises(ValueError):
        InputValidator.normalize_price(Decimal(raw))


def test_cpf_must_have_eleven_characters() -> None:
    assert InputValidator.validate_cpf("12345678901") == (True, None)
    assert InputValidator.validate_cpf("1234567890")[0] is False


def test_email_needs_at_sign_and_fits_column() -> None:
    assert InputValidator.validate_email("maria@example.com")[0] is True
    assert InputValidator.validate_email("maria.example.com")[0] is False
    assert InputValidator.validate_email("a@" + "b" * 199)[0] is False


def test_password_length_limits() -> None:
    assert InputValidator.validate_password("12345678")[0] is True
    assert InputValidator.validate_password("1234567")[0] is False
    # 72 bytes is the bcrypt input limit
    assert InputValidator.validate_password("ç" * 37)[0] is False


def test_sanitize_name_collapses_whitespace() -> None:
    assert InputValidator.sanitize_name("  Maria   da  Silva ") == "Maria da Silva"
