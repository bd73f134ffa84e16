"""
Shared test configuration.
Environment defaults are set before the application is imported, because
settings are read once at import time.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

TEST_ENV = {
    "ENVIRONMENT": "testing",
    "LOG_LEVEL": "INFO",
    "POSTGRES_HOST": "localhost",
    "POSTGRES_PORT": "5432",
    "POSTGRES_DB": "loja_test",
    "POSTGRES_USER": "loja",
    "POSTGRES_PASSWORD": "loja",
    "DB_CREATE_TABLES": "false",
    "SECRET_KEY": "test-secret-key-not-for-production",
    "ALGORITHM": "HS256",
    "ACCESS_TOKEN_CLIENTE_EXPIRE_MINUTOS": "60",
}

for key, value in TEST_ENV.items():
    os.environ.setdefault(key, value)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
