# loja_api/__init__.py

"""API REST de clientes e produtos com autenticação JWT por cookie."""

__version__ = "1.0.0"
