# migrations/env.py

"""
Alembic environment for the clientes/produtos schema.

Migrations always run over the synchronous psycopg2 driver, whatever
driver the application itself is configured with.
"""

from logging.config import fileConfig
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool
from alembic import context

from loja_api.adapters.configuration.config import settings
from loja_api.adapters.outbound.persistence.models import Base

alembic_config = context.config

if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

target_metadata = Base.metadata


def migration_url() -> str:
    """DATABASE_URL with its driver swapped for psycopg2."""
    url = str(settings.DATABASE_URL)
    scheme, _, rest = url.partition("://")
    return f"postgresql+psycopg2://{rest}" if scheme.startswith("postgresql") else url


def run_migrations_offline() -> None:
    """Emit the SQL script without connecting (alembic upgrade --sql)."""
    context.configure(
        url=migration_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a single short-lived connection."""
    engine = create_engine(migration_url(), poolclass=NullPool)

    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
            )

            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
