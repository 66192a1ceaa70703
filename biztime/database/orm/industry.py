"""Industry ORM model."""
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List

from biztime.database.base import Base


class Industry(Base):
    """Industry reference data table."""
    __tablename__ = "industries"

    code: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    companies: Mapped[List["Company"]] = relationship(
        "Company",
        secondary="companies_industries",
        back_populates="industries",
        passive_deletes=True
    )

    def __repr__(self):
        return f"<Industry(code={self.code}, name={self.name})>"
