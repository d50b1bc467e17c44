"""Checkout ORM — one loan of a material to a patron.

Invariants:
    - Always belongs to a Material and a Patron (both FKs required)
    - return_date IS NULL means the material is currently out
    - Read-only through the API; rows come from the seed migration
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from loncotes.db.base import Base


class Checkout(Base):
    """Checkout entity — historical or active loan."""
    __tablename__ = "checkouts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    material_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("materials.id"), nullable=False,
    )
    patron_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("patrons.id"), nullable=False,
    )
    checkout_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    return_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Relationships
    material: Mapped["Material"] = relationship(
        "Material", back_populates="checkouts",
    )
    patron: Mapped["Patron"] = relationship(
        "Patron", back_populates="checkouts",
    )
