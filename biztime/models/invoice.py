"""Invoice Pydantic models."""
from datetime import date
from typing import Optional
from pydantic import BaseModel


class InvoiceCreate(BaseModel):
    """
    Model for creating an invoice.

    The store enforces amt > 0, NOT NULL and the company foreign key, so
    none of those are checked here.
    """
    comp_code: Optional[str] = None
    amt: Optional[float] = None


class InvoiceUpdate(BaseModel):
    """Partial update; which fields were sent decides the UPDATE issued."""
    amt: Optional[float] = None
    paid: Optional[bool] = None


class InvoiceResponse(BaseModel):
    """Raw invoice columns."""
    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None


class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceResponse]


class InvoiceEnvelope(BaseModel):
    invoice: InvoiceResponse
