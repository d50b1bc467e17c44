"""Material Service — queries and writes for the materials table.

Invariants:
    - list_circulating_materials never returns a withdrawn material
    - Every read loads exactly the relations its projection walks:
        summary -> material_type, genre (joinedload)
        detail  -> + checkouts (selectinload) -> patron (joinedload)
    - create_material checks both references before inserting
    - withdraw_material always stamps the current UTC time, even when the
      material is already withdrawn

Design Decisions:
    - joinedload for many-to-one, selectinload for collections: one round
      trip per level, no N+1 regardless of result size
    - IntegrityError at commit maps to the same InvalidReferenceError as the
      pre-check (a reference deleted between check and insert)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from loncotes.core.domain_types import (
    GenreId,
    MaterialId,
    MaterialTypeId,
    circulation_status,
)
from loncotes.core.errors import InvalidReferenceError, ResourceNotFoundError
from loncotes.models.checkout import Checkout
from loncotes.models.genre import Genre
from loncotes.models.material import Material
from loncotes.models.material_type import MaterialType
from loncotes.schemas.catalog import MaterialCreate

logger = logging.getLogger(__name__)


def _with_type_and_genre():
    return (joinedload(Material.material_type), joinedload(Material.genre))


async def list_circulating_materials(
    db: AsyncSession,
    material_type_id: MaterialTypeId | None = None,
    genre_id: GenreId | None = None,
) -> list[Material]:
    """Circulating materials, optionally filtered by type and/or genre."""
    query = (
        select(Material)
        .where(Material.out_of_circulation_since.is_(None))
        .options(*_with_type_and_genre())
    )
    if material_type_id is not None:
        query = query.where(Material.material_type_id == material_type_id)
    if genre_id is not None:
        query = query.where(Material.genre_id == genre_id)

    result = await db.execute(query)
    return list(result.scalars().all())


async def get_material_detail(
    db: AsyncSession, material_id: MaterialId,
) -> Material:
    """Material with type, genre and checkout history (each with its patron)."""
    result = await db.execute(
        select(Material)
        .where(Material.id == material_id)
        .options(
            *_with_type_and_genre(),
            selectinload(Material.checkouts).joinedload(Checkout.patron),
        ),
    )
    material = result.scalar_one_or_none()
    if material is None:
        raise ResourceNotFoundError("Material", material_id)
    return material


async def _ensure_reference(
    db: AsyncSession, model: type, field: str,
    resource_id: MaterialTypeId | GenreId,
) -> None:
    if await db.get(model, resource_id) is None:
        raise InvalidReferenceError(field, model.__name__, resource_id)


async def create_material(db: AsyncSession, body: MaterialCreate) -> Material:
    """Insert a circulating material and return it with type and genre loaded."""
    await _ensure_reference(
        db, MaterialType, "materialTypeId", MaterialTypeId(body.material_type_id),
    )
    await _ensure_reference(db, Genre, "genreId", GenreId(body.genre_id))

    material = Material(
        material_name=body.material_name,
        material_type_id=body.material_type_id,
        genre_id=body.genre_id,
    )
    db.add(material)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Material insert rejected by constraint: {e.orig}")
        raise InvalidReferenceError("material", "Material", None) from e

    result = await db.execute(
        select(Material)
        .where(Material.id == material.id)
        .options(*_with_type_and_genre())
        .execution_options(populate_existing=True),
    )
    created = result.scalar_one()
    logger.info(
        f"Material created: {created.material_name}",
        extra={"material_id": created.id},
    )
    return created


async def withdraw_material(
    db: AsyncSession, material_id: MaterialId,
) -> Material:
    """Take a material out of circulation (soft delete)."""
    material = await db.get(Material, material_id)
    if material is None:
        raise ResourceNotFoundError("Material", material_id)

    previous = circulation_status(material.out_of_circulation_since)
    material.out_of_circulation_since = datetime.now(timezone.utc)
    await db.commit()
    logger.info(
        f"Material withdrawn (was {previous.value})",
        extra={"material_id": material_id},
    )
    return material
