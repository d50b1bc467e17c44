"""MaterialType ORM — kind of catalog item (book, periodical, CD...) and its loan period.

Invariants:
    - checkout_days is the loan period in days for every material of this type
    - Rows are seeded by migration; the API never writes them
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from loncotes.db.base import Base


class MaterialType(Base):
    """Material type lookup row."""
    __tablename__ = "material_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    checkout_days: Mapped[int] = mapped_column(Integer, nullable=False)

    materials: Mapped[list["Material"]] = relationship(
        "Material", back_populates="material_type",
    )
