"""Invoice ORM model."""
from datetime import date
from typing import Optional

from sqlalchemy import (
    Boolean, CheckConstraint, Date, Float, ForeignKey, Integer, Text, false, func
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.database.base import Base


class Invoice(Base):
    """Invoices billed to a company."""
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amt > 0", name="invoices_amt_check"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    comp_code: Mapped[str] = mapped_column(
        Text,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False
    )
    amt: Mapped[float] = mapped_column(Float, nullable=False)
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false())
    add_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        server_default=func.current_date()
    )
    # Set exactly when paid is true
    paid_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Relationships
    company: Mapped["Company"] = relationship(
        "Company",
        back_populates="invoices"
    )

    def __repr__(self):
        return f"<Invoice(id={self.id}, comp_code={self.comp_code}, amt={self.amt})>"
