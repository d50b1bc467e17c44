"""Catalog schema — material_types, genres, materials, patrons, checkouts.

Revision ID: 001_catalog_schema
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_catalog_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "material_types",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("checkout_days", sa.Integer, nullable=False),
    )

    op.create_table(
        "genres",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
    )

    op.create_table(
        "patrons",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "materials",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("material_name", sa.String(255), nullable=False),
        sa.Column("material_type_id", sa.Integer, sa.ForeignKey("material_types.id"), nullable=False),
        sa.Column("genre_id", sa.Integer, sa.ForeignKey("genres.id"), nullable=False),
        sa.Column("out_of_circulation_since", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_materials_material_type_id", "materials", ["material_type_id"])
    op.create_index("ix_materials_genre_id", "materials", ["genre_id"])

    op.create_table(
        "checkouts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("material_id", sa.Integer, sa.ForeignKey("materials.id"), nullable=False),
        sa.Column("patron_id", sa.Integer, sa.ForeignKey("patrons.id"), nullable=False),
        sa.Column("checkout_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("return_date", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_checkouts_material_id", "checkouts", ["material_id"])
    op.create_index("ix_checkouts_patron_id", "checkouts", ["patron_id"])


def downgrade() -> None:
    op.drop_table("checkouts")
    op.drop_table("materials")
    op.drop_table("patrons")
    op.drop_table("genres")
    op.drop_table("material_types")
