"""Company/industry association table."""
from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from biztime.database.base import Base


class CompanyIndustry(Base):
    """Membership of a company in an industry; no attributes of its own."""
    __tablename__ = "companies_industries"

    # Composite primary key makes each pair unique
    ind_code: Mapped[str] = mapped_column(
        Text,
        ForeignKey("industries.code", ondelete="CASCADE"),
        primary_key=True
    )
    comp_code: Mapped[str] = mapped_column(
        Text,
        ForeignKey("companies.code", ondelete="CASCADE"),
        primary_key=True
    )

    def __repr__(self):
        return f"<CompanyIndustry(ind_code={self.ind_code}, comp_code={self.comp_code})>"
