"""create companies and invoices tables

Revision ID: 3f9a1c2b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f9a1c2b7d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("code", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("code"),
    )
    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("comp_code", sa.String(length=255), nullable=False),
        sa.Column("amt", sa.Float(), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False),
        sa.Column("add_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("paid_date", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("amt > 0", name="ck_invoices_amt_positive"),
        sa.ForeignKeyConstraint(["comp_code"], ["companies.code"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_invoices_comp_code"), "invoices", ["comp_code"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_invoices_comp_code"), table_name="invoices")
    op.drop_table("invoices")
    op.drop_table("companies")
