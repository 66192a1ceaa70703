"""Company Pydantic models."""
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from biztime.models.invoice import InvoiceResponse
from biztime.services.slugs import slugify


class CompanyCreate(BaseModel):
    """
    Model for creating a company.

    Fields are optional at this layer: a missing name reaches the store and
    fails its NOT NULL constraint.
    """
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None

    @field_validator("code")
    @classmethod
    def slugify_code(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the code to a lowercase slug."""
        return slugify(v)


class CompanyUpdate(BaseModel):
    """Model for updating a company; the code is the lookup key, not a field."""
    name: Optional[str] = None
    description: Optional[str] = None


class CompanyResponse(BaseModel):
    """Raw company columns."""
    code: str
    name: str
    description: Optional[str] = None


class CompanyDetail(CompanyResponse):
    """Company with the names of the industries it belongs to."""
    industries: list[str] = Field(default_factory=list)


class CompanyWithInvoices(CompanyDetail):
    """Company with its invoices and industries."""
    invoices: list[InvoiceResponse] = Field(default_factory=list)


class CompanyListResponse(BaseModel):
    companies: list[CompanyResponse]


class CompanyEnvelope(BaseModel):
    company: CompanyDetail


class CompanyInvoicesEnvelope(BaseModel):
    company: CompanyWithInvoices
