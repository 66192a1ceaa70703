"""SQLAlchemy ORM models for the BizTime ledger."""
from biztime.database.base import Base
from biztime.database.orm.industry import Industry
from biztime.database.orm.company import Company
from biztime.database.orm.company_industry import CompanyIndustry
from biztime.database.orm.invoice import Invoice

__all__ = [
    "Base",
    "Industry",
    "Company",
    "CompanyIndustry",
    "Invoice",
]
