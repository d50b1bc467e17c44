"""Catalog Service — read-only listings for lookup tables and patrons.

Invariants:
    - No filtering: every material type, genre and patron is returned
    - list_patrons loads checkouts -> material -> (material_type, genre)
      in three batched selects, never per row
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from loncotes.models.checkout import Checkout
from loncotes.models.genre import Genre
from loncotes.models.material import Material
from loncotes.models.material_type import MaterialType
from loncotes.models.patron import Patron


async def list_material_types(db: AsyncSession) -> list[MaterialType]:
    result = await db.execute(select(MaterialType))
    return list(result.scalars().all())


async def list_genres(db: AsyncSession) -> list[Genre]:
    result = await db.execute(select(Genre))
    return list(result.scalars().all())


async def list_patrons(db: AsyncSession) -> list[Patron]:
    """Every patron with full checkout history, each checkout's material inlined."""
    result = await db.execute(
        select(Patron).options(
            selectinload(Patron.checkouts)
            .selectinload(Checkout.material)
            .options(
                joinedload(Material.material_type),
                joinedload(Material.genre),
            ),
        ),
    )
    return list(result.scalars().all())
