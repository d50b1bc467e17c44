"""Patron ORM — a library member.

Invariants:
    - is_active is informational; inactive patrons are still listed
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from loncotes.db.base import Base


class Patron(Base):
    """Patron entity — owns its checkout history."""
    __tablename__ = "patrons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    checkouts: Mapped[list["Checkout"]] = relationship(
        "Checkout", back_populates="patron",
    )
