"""Catalog schemas — camelCase wire format and MaterialCreate validation.

Invariants:
    - MaterialCreate accepts camelCase keys (and snake_case for internal callers)
    - materialName is stripped and must not be blank
    - Dumped by alias, summaries use camelCase keys
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from loncotes.schemas.catalog import (
    GenreResponse,
    MaterialCreate,
    MaterialSummary,
    MaterialTypeResponse,
)


def test_material_create_accepts_camel_case():
    body = MaterialCreate.model_validate(
        {"materialName": "Dune", "materialTypeId": 1, "genreId": 2},
    )
    assert body.material_name == "Dune"
    assert body.material_type_id == 1
    assert body.genre_id == 2


def test_material_create_accepts_snake_case():
    body = MaterialCreate(material_name="Dune", material_type_id=1, genre_id=2)
    assert body.genre_id == 2


def test_material_create_strips_name():
    body = MaterialCreate(material_name="  Dune  ", material_type_id=1, genre_id=2)
    assert body.material_name == "Dune"


def test_material_create_rejects_blank_name():
    with pytest.raises(ValidationError):
        MaterialCreate(material_name="   ", material_type_id=1, genre_id=2)


def test_material_create_requires_references():
    with pytest.raises(ValidationError):
        MaterialCreate.model_validate({"materialName": "Dune"})


def test_material_create_rejects_overlong_name():
    with pytest.raises(ValidationError):
        MaterialCreate(material_name="x" * 256, material_type_id=1, genre_id=2)


def test_summary_dumps_camel_case():
    summary = MaterialSummary(
        id=1, material_name="Dune", material_type_id=1,
        material_type=MaterialTypeResponse(id=1, name="Book", checkout_days=14),
        genre_id=2, genre=GenreResponse(id=2, name="Science Fiction"),
        out_of_circulation_since=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    dumped = summary.model_dump(by_alias=True, mode="json")
    assert set(dumped) == {
        "id", "materialName", "materialTypeId", "materialType",
        "genreId", "genre", "outOfCirculationSince",
    }
    assert dumped["outOfCirculationSince"].startswith("2024-01-01T00:00:00")


def test_material_create_rejects_ids_beyond_int4():
    with pytest.raises(ValidationError):
        MaterialCreate(material_name="Dune", material_type_id=2**31, genre_id=2)
    with pytest.raises(ValidationError):
        MaterialCreate(material_name="Dune", material_type_id=1, genre_id=-(2**31) - 1)


def test_material_create_accepts_int4_max():
    body = MaterialCreate(material_name="Dune", material_type_id=2**31 - 1, genre_id=2)
    assert body.material_type_id == 2_147_483_647
