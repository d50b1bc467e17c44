"""Seed starter catalog data — types, genres, patrons, materials, checkouts.

Revision ID: 002_seed_catalog
Revises: 001_catalog_schema
Create Date: 2026-10-17

Rows carry explicit ids so checkouts can reference them; on PostgreSQL the
identity sequences are moved past the seeded ids afterwards, otherwise the
first POST /api/materials would collide with id 1.
"""
from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_seed_catalog"
down_revision: Union[str, None] = "001_catalog_schema"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


MATERIAL_TYPES = [
    {"id": 1, "name": "Book", "checkout_days": 14},
    {"id": 2, "name": "Periodical", "checkout_days": 7},
    {"id": 3, "name": "CD", "checkout_days": 7},
]

GENRES = [
    {"id": 1, "name": "Science Fiction"},
    {"id": 2, "name": "Mystery"},
    {"id": 3, "name": "History"},
    {"id": 4, "name": "Jazz"},
    {"id": 5, "name": "Cooking"},
]

PATRONS = [
    {"id": 1, "first_name": "Ada", "last_name": "Moreno", "address": "101 Elm St",
     "email": "ada.moreno@example.com", "is_active": True},
    {"id": 2, "first_name": "Jonah", "last_name": "Pike", "address": "22 Harbor Rd",
     "email": "jonah.pike@example.com", "is_active": True},
    {"id": 3, "first_name": "Priya", "last_name": "Raman", "address": "9 Orchard Ln",
     "email": "priya.raman@example.com", "is_active": False},
]

MATERIALS = [
    {"id": 1, "material_name": "Dune", "material_type_id": 1, "genre_id": 1,
     "out_of_circulation_since": None},
    {"id": 2, "material_name": "Foundation", "material_type_id": 1, "genre_id": 1,
     "out_of_circulation_since": None},
    {"id": 3, "material_name": "The Hound of the Baskervilles", "material_type_id": 1,
     "genre_id": 2, "out_of_circulation_since": None},
    {"id": 4, "material_name": "Murder on the Orient Express", "material_type_id": 1,
     "genre_id": 2, "out_of_circulation_since": _utc(2023, 3, 1)},
    {"id": 5, "material_name": "The Guns of August", "material_type_id": 1, "genre_id": 3,
     "out_of_circulation_since": None},
    {"id": 6, "material_name": "History Today, May Issue", "material_type_id": 2,
     "genre_id": 3, "out_of_circulation_since": None},
    {"id": 7, "material_name": "Bon Appetit, Winter Issue", "material_type_id": 2,
     "genre_id": 5, "out_of_circulation_since": None},
    {"id": 8, "material_name": "Kind of Blue", "material_type_id": 3, "genre_id": 4,
     "out_of_circulation_since": None},
    {"id": 9, "material_name": "A Love Supreme", "material_type_id": 3, "genre_id": 4,
     "out_of_circulation_since": None},
    {"id": 10, "material_name": "Salt, Fat, Acid, Heat", "material_type_id": 1,
     "genre_id": 5, "out_of_circulation_since": None},
]

CHECKOUTS = [
    {"id": 1, "material_id": 1, "patron_id": 1,
     "checkout_date": _utc(2024, 1, 3), "return_date": _utc(2024, 1, 15)},
    {"id": 2, "material_id": 8, "patron_id": 1,
     "checkout_date": _utc(2024, 2, 10), "return_date": None},
    {"id": 3, "material_id": 3, "patron_id": 2,
     "checkout_date": _utc(2024, 2, 12), "return_date": None},
    {"id": 4, "material_id": 4, "patron_id": 3,
     "checkout_date": _utc(2022, 11, 20), "return_date": _utc(2022, 12, 1)},
]

_SEEDED = (
    ("material_types", MATERIAL_TYPES),
    ("genres", GENRES),
    ("patrons", PATRONS),
    ("materials", MATERIALS),
    ("checkouts", CHECKOUTS),
)


def _table(name: str, rows: list[dict]) -> sa.Table:
    """Lightweight table clause with just the seeded columns."""
    columns = [sa.column(key) for key in rows[0]]
    return sa.table(name, *columns)


def upgrade() -> None:
    for name, rows in _SEEDED:
        op.bulk_insert(_table(name, rows), rows)

    if op.get_bind().dialect.name == "postgresql":
        for name, _ in _SEEDED:
            op.execute(
                f"SELECT setval(pg_get_serial_sequence('{name}', 'id'), "
                f"(SELECT MAX(id) FROM {name}))"
            )


def downgrade() -> None:
    for name, rows in reversed(_SEEDED):
        table = sa.table(name, sa.column("id"))
        op.execute(table.delete().where(table.c.id.in_([row["id"] for row in rows])))
