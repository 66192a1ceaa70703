"""Company ORM model."""
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional

from biztime.database.base import Base


class Company(Base):
    """Companies that invoices are billed to."""
    __tablename__ = "companies"

    # Slugified on creation, never updated
    code: Mapped[str] = mapped_column(Text, primary_key=True)

    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    invoices: Mapped[List["Invoice"]] = relationship(
        "Invoice",
        back_populates="company",
        passive_deletes=True
    )
    industries: Mapped[List["Industry"]] = relationship(
        "Industry",
        secondary="companies_industries",
        back_populates="companies",
        passive_deletes=True
    )

    def __repr__(self):
        return f"<Company(code={self.code}, name={self.name})>"
