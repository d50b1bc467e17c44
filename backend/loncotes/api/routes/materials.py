"""Materials — list, detail, create and withdraw catalog items.

Invariants:
    - GET list only returns circulating materials
    - GET detail returns withdrawn materials too (outOfCirculationSince set)
    - POST answers 201 with Location /api/materials/{id}
    - PUT withdraws; request body ignored, answers 204 every time the id exists
    - Unknown ids surface as ResourceNotFoundError (empty 404, see error_handlers)
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from loncotes.core.domain_types import (
    INT4_MAX,
    INT4_MIN,
    GenreId,
    MaterialId,
    MaterialTypeId,
)
from loncotes.core.project_catalog import (
    project_material_detail,
    project_material_summary,
)
from loncotes.infrastructure.database import get_db
from loncotes.schemas.catalog import MaterialCreate, MaterialDetail, MaterialSummary
from loncotes.services import materials as material_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/materials", tags=["materials"])


@router.get("", response_model=list[MaterialSummary])
async def list_materials(
    material_type_id: int | None = Query(
        None, alias="materialTypeId", ge=INT4_MIN, le=INT4_MAX,
    ),
    genre_id: int | None = Query(None, alias="genreId", ge=INT4_MIN, le=INT4_MAX),
    db: AsyncSession = Depends(get_db),
):
    """List circulating materials, optionally by type and genre."""
    rows = await material_service.list_circulating_materials(
        db,
        material_type_id=(
            MaterialTypeId(material_type_id) if material_type_id is not None else None
        ),
        genre_id=GenreId(genre_id) if genre_id is not None else None,
    )
    return [project_material_summary(m) for m in rows]


@router.get("/{material_id}", response_model=MaterialDetail)
async def get_material(
    material_id: int = Path(ge=INT4_MIN, le=INT4_MAX),
    db: AsyncSession = Depends(get_db),
):
    """Material detail with checkout history."""
    material = await material_service.get_material_detail(db, MaterialId(material_id))
    return project_material_detail(material)


@router.post(
    "", response_model=MaterialSummary,
    status_code=status.HTTP_201_CREATED,
)
async def create_material(
    body: MaterialCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Add a material to the catalog."""
    material = await material_service.create_material(db, body)
    response.headers["Location"] = f"{router.prefix}/{material.id}"
    return project_material_summary(material)


@router.put(
    "/{material_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def withdraw_material(
    material_id: int = Path(ge=INT4_MIN, le=INT4_MAX),
    db: AsyncSession = Depends(get_db),
):
    """Take a material out of circulation."""
    await material_service.withdraw_material(db, MaterialId(material_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
