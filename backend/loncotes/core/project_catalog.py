"""Catalog Projections — pure conversion of loaded ORM rows into transfer schemas.

Invariants:
    - Pure: reads attributes already loaded by the query, never touches a session
    - Each function only follows the relationships its shape needs:
        project_material_summary -> material_type, genre
        project_material_detail  -> + checkouts -> patron
        project_patron           -> checkouts -> material -> material_type, genre
    - Collections keep the order the query returned them in

Design Decisions:
    - Explicit field-by-field construction over from_attributes: the nesting
      depth of each response is visible at the call site
"""

from loncotes.models.checkout import Checkout
from loncotes.models.genre import Genre
from loncotes.models.material import Material
from loncotes.models.material_type import MaterialType
from loncotes.models.patron import Patron
from loncotes.schemas.catalog import (
    GenreResponse,
    MaterialCheckout,
    MaterialDetail,
    MaterialSummary,
    MaterialTypeResponse,
    PatronCheckout,
    PatronResponse,
    PatronWithCheckouts,
)


def project_material_type(material_type: MaterialType) -> MaterialTypeResponse:
    return MaterialTypeResponse(
        id=material_type.id,
        name=material_type.name,
        checkout_days=material_type.checkout_days,
    )


def project_genre(genre: Genre) -> GenreResponse:
    return GenreResponse(id=genre.id, name=genre.name)


def project_patron_contact(patron: Patron) -> PatronResponse:
    """Patron fields only — used where the patron is nested under a checkout."""
    return PatronResponse(
        id=patron.id,
        first_name=patron.first_name,
        last_name=patron.last_name,
        address=patron.address,
        email=patron.email,
        is_active=patron.is_active,
    )


def project_material_summary(material: Material) -> MaterialSummary:
    return MaterialSummary(
        id=material.id,
        material_name=material.material_name,
        material_type_id=material.material_type_id,
        material_type=project_material_type(material.material_type),
        genre_id=material.genre_id,
        genre=project_genre(material.genre),
        out_of_circulation_since=material.out_of_circulation_since,
    )


def _project_material_checkout(checkout: Checkout) -> MaterialCheckout:
    return MaterialCheckout(
        id=checkout.id,
        material_id=checkout.material_id,
        patron_id=checkout.patron_id,
        patron=project_patron_contact(checkout.patron),
        checkout_date=checkout.checkout_date,
        return_date=checkout.return_date,
    )


def project_material_detail(material: Material) -> MaterialDetail:
    summary = project_material_summary(material)
    return MaterialDetail(
        **summary.model_dump(),
        checkouts=[_project_material_checkout(co) for co in material.checkouts],
    )


def _project_patron_checkout(checkout: Checkout) -> PatronCheckout:
    return PatronCheckout(
        id=checkout.id,
        material_id=checkout.material_id,
        material=project_material_summary(checkout.material),
        patron_id=checkout.patron_id,
        checkout_date=checkout.checkout_date,
        return_date=checkout.return_date,
    )


def project_patron(patron: Patron) -> PatronWithCheckouts:
    contact = project_patron_contact(patron)
    return PatronWithCheckouts(
        **contact.model_dump(),
        checkouts=[_project_patron_checkout(co) for co in patron.checkouts],
    )
