"""Catalog Lookups — material types, genres and patrons.

Invariants:
    - All three listings are unfiltered
    - /api/patrons nests checkouts -> material -> (materialType, genre)
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from loncotes.core.project_catalog import (
    project_genre,
    project_material_type,
    project_patron,
)
from loncotes.infrastructure.database import get_db
from loncotes.schemas.catalog import (
    GenreResponse,
    MaterialTypeResponse,
    PatronWithCheckouts,
)
from loncotes.services import catalog as catalog_service

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/materialTypes", response_model=list[MaterialTypeResponse])
async def list_material_types(db: AsyncSession = Depends(get_db)):
    rows = await catalog_service.list_material_types(db)
    return [project_material_type(mt) for mt in rows]


@router.get("/genres", response_model=list[GenreResponse])
async def list_genres(db: AsyncSession = Depends(get_db)):
    rows = await catalog_service.list_genres(db)
    return [project_genre(g) for g in rows]


@router.get("/patrons", response_model=list[PatronWithCheckouts])
async def list_patrons(db: AsyncSession = Depends(get_db)):
    """Every patron with full checkout history."""
    rows = await catalog_service.list_patrons(db)
    return [project_patron(p) for p in rows]
