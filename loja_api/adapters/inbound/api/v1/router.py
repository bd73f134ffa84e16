# loja_api/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from loja_api.adapters.inbound.api.v1.endpoints import auth_endpoint, cliente_endpoint, produto_endpoint

api_router = APIRouter()

api_router.include_router(auth_endpoint.router, tags=["Autenticação"])
api_router.include_router(cliente_endpoint.router)
api_router.include_router(produto_endpoint.router)
