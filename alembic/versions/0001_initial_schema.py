"""Initial schema — pacientes.

Revision ID: 0001
Revises:
Create Date: 2026-10-16 00:00:00.000000 UTC

Creates the patient registry table:
  - pacientes    (id identity, name, age, email)
"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# ── Revision identifiers ──────────────────────────────────────────────────────
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # ── pacientes ─────────────────────────────────────────────────────────────
    op.create_table(
        "pacientes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("pacientes")
