"""Material ORM — a catalog item that patrons can check out.

Invariants:
    - material_type_id and genre_id are required foreign keys
    - out_of_circulation_since IS NULL means the material is circulating
    - Rows are never deleted; withdrawal sets out_of_circulation_since

Design Decisions:
    - Relationships use the default lazy loader; every query in services/
      declares its eager loads, so projections never trigger IO
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from loncotes.db.base import Base


class Material(Base):
    """Material entity — book, periodical, disc..."""
    __tablename__ = "materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    material_name: Mapped[str] = mapped_column(String(255), nullable=False)
    material_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("material_types.id"), nullable=False,
    )
    genre_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("genres.id"), nullable=False,
    )
    out_of_circulation_since: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Relationships
    material_type: Mapped["MaterialType"] = relationship(
        "MaterialType", back_populates="materials",
    )
    genre: Mapped["Genre"] = relationship(
        "Genre", back_populates="materials",
    )
    checkouts: Mapped[list["Checkout"]] = relationship(
        "Checkout", back_populates="material",
    )
