"""Pydantic models for the BizTime ledger API."""

# Common Models
from biztime.models.common import (
    HealthResponse,
    ErrorResponse,
    MessageResponse,
    DeletedResponse,
)

# Enums
from biztime.models.enums import (
    InvoiceStatus,
    InvoiceUpdateKind,
    VALID_PAYMENT_TRANSITIONS,
)

# Invoice
from biztime.models.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    InvoiceListResponse,
    InvoiceEnvelope,
)

# Company
from biztime.models.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyResponse,
    CompanyDetail,
    CompanyWithInvoices,
    CompanyListResponse,
    CompanyEnvelope,
    CompanyInvoicesEnvelope,
)

# Industry
from biztime.models.industry import (
    IndustryCreate,
    IndustryUpdate,
    IndustryCompanyCreate,
    IndustryResponse,
    IndustryListResponse,
    IndustryEnvelope,
)

__all__ = [
    # Common
    "HealthResponse",
    "ErrorResponse",
    "MessageResponse",
    "DeletedResponse",
    # Enums
    "InvoiceStatus",
    "InvoiceUpdateKind",
    "VALID_PAYMENT_TRANSITIONS",
    # Invoice
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceResponse",
    "InvoiceListResponse",
    "InvoiceEnvelope",
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyResponse",
    "CompanyDetail",
    "CompanyWithInvoices",
    "CompanyListResponse",
    "CompanyEnvelope",
    "CompanyInvoicesEnvelope",
    # Industry
    "IndustryCreate",
    "IndustryUpdate",
    "IndustryCompanyCreate",
    "IndustryResponse",
    "IndustryListResponse",
    "IndustryEnvelope",
]
