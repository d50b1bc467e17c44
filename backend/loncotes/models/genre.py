"""Genre ORM — subject classification referenced by materials."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from loncotes.db.base import Base


class Genre(Base):
    """Genre lookup row."""
    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    materials: Mapped[list["Material"]] = relationship(
        "Material", back_populates="genre",
    )
