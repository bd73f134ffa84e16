# loja_api/domain/models/role.py

from enum import Enum


class Role(str, Enum):
    """Perfis aceitos na claim 'tipoUsuario' do token."""
    CLIENTE = "cliente"

    @classmethod
    def parse(cls, value):
        """Return the matching Role or None for unknown/absent values."""
        try:
            return cls(value)
        except ValueError:
            return None
