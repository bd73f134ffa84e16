"""cria tabelas clientes e produtos

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "clientes",
        sa.Column("idCliente", sa.Uuid(), primary_key=True),
        sa.Column("nomeCliente", sa.String(length=100), nullable=False),
        sa.Column("cpfCliente", sa.CHAR(length=11), nullable=False),
        sa.Column("emailCliente", sa.String(length=200), nullable=False),
        sa.Column("senhaCliente", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("cpfCliente", name="uq_clientes_cpf"),
        sa.UniqueConstraint("emailCliente", name="uq_clientes_email"),
    )
    op.create_table(
        "produtos",
        sa.Column("idProduto", sa.Uuid(), primary_key=True),
        sa.Column("nomeProduto", sa.String(length=100), nullable=False),
        sa.Column("precoProduto", sa.Numeric(precision=10, scale=2), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("produtos")
    op.drop_table("clientes")
