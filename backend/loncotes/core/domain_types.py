"""Domain Types — identity types and circulation states for the catalog.

Invariants:
    - A material is CIRCULATING iff out_of_circulation_since is None
    - Ids fit a PostgreSQL integer column: INT4_MIN <= id <= INT4_MAX
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MaterialId = NewType("MaterialId", int)
MaterialTypeId = NewType("MaterialTypeId", int)
GenreId = NewType("GenreId", int)

# Bounds of the `integer` primary/foreign key columns
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class CirculationStatus(str, Enum):
    """Material lifecycle. Only CIRCULATING -> WITHDRAWN exists."""
    CIRCULATING = "circulating"
    WITHDRAWN = "withdrawn"


def circulation_status(out_of_circulation_since: datetime | None) -> CirculationStatus:
    if out_of_circulation_since is None:
        return CirculationStatus.CIRCULATING
    return CirculationStatus.WITHDRAWN
