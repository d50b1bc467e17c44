"""Catalog Schemas — transfer shapes for materials, types, genres, patrons and checkouts.

Invariants:
    - Wire keys are camelCase (materialName, checkoutDays, outOfCirculationSince)
    - Nesting depth is fixed per shape: a summary never carries checkouts,
      a checkout under a material carries its patron, a checkout under a
      patron carries its material summary
    - MaterialCreate.material_name: 1-255 chars, stripped, non-empty
    - MaterialCreate reference ids fit the int4 key columns

Design Decisions:
    - One shape per nesting context instead of one shape with optional
      everything: omitted relations are absent, not null
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from loncotes.core.domain_types import INT4_MAX, INT4_MIN


class CatalogSchema(BaseModel):
    """Base for all catalog schemas — camelCase aliases, snake_case attributes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MaterialTypeResponse(CatalogSchema):
    id: int
    name: str
    checkout_days: int


class GenreResponse(CatalogSchema):
    id: int
    name: str


class PatronResponse(CatalogSchema):
    id: int
    first_name: str
    last_name: str
    address: str
    email: str
    is_active: bool


class MaterialSummary(CatalogSchema):
    """Material with its type and genre inlined; no checkout history."""
    id: int
    material_name: str
    material_type_id: int
    material_type: MaterialTypeResponse
    genre_id: int
    genre: GenreResponse
    out_of_circulation_since: datetime | None = None


class MaterialCheckout(CatalogSchema):
    """Checkout as seen from a material — inlines the borrowing patron."""
    id: int
    material_id: int
    patron_id: int
    patron: PatronResponse
    checkout_date: datetime
    return_date: datetime | None = None


class MaterialDetail(MaterialSummary):
    """Material with full checkout history."""
    checkouts: list[MaterialCheckout] = Field(default_factory=list)


class PatronCheckout(CatalogSchema):
    """Checkout as seen from a patron — inlines the material summary."""
    id: int
    material_id: int
    material: MaterialSummary
    patron_id: int
    checkout_date: datetime
    return_date: datetime | None = None


class PatronWithCheckouts(PatronResponse):
    """Patron with every checkout, returned or outstanding."""
    checkouts: list[PatronCheckout] = Field(default_factory=list)


class MaterialCreate(CatalogSchema):
    """Material creation payload."""
    material_name: str = Field(min_length=1, max_length=255)
    material_type_id: int = Field(ge=INT4_MIN, le=INT4_MAX)
    genre_id: int = Field(ge=INT4_MIN, le=INT4_MAX)

    @field_validator("material_name")
    @classmethod
    def strip_material_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("materialName cannot be empty or whitespace")
        return v
