"""Invoice endpoints."""
import structlog
from fastapi import APIRouter, Depends, status

from biztime.exceptions import NotFoundError
from biztime.models import (
    InvoiceCreate, InvoiceUpdate, InvoiceResponse, InvoiceListResponse,
    InvoiceEnvelope, CompanyWithInvoices, CompanyInvoicesEnvelope,
    DeletedResponse, ErrorResponse, MessageResponse
)
from biztime.services import LedgerStore, get_store, retrieve_industries
from biztime.services.invoicing import (
    InvoiceUpdatePlan, log_payment_transition, today
)

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/invoices",
    tags=["Invoices"],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)

_INVOICE_COLS = "id, comp_code, amt, paid, add_date, paid_date"

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


@router.get(
    "",
    response_model=InvoiceListResponse,
    summary="List Invoices"
)
async def list_invoices(store: LedgerStore = Depends(get_store)):
    """List all invoices (raw columns)."""
    rows = store.execute_query(f"SELECT {_INVOICE_COLS} FROM invoices ORDER BY id")
    return InvoiceListResponse(
        invoices=[InvoiceResponse(**row) for row in rows]
    )


@router.get(
    "/companies/{code}",
    response_model=CompanyInvoicesEnvelope,
    responses=_NOT_FOUND,
    summary="Get Company Invoices"
)
async def get_company_invoices(code: str, store: LedgerStore = Depends(get_store)):
    """Get a company with all of its invoices and its industries."""
    with store.transaction() as db:
        company = db.execute_one(
            "SELECT code, name, description FROM companies WHERE code = :code",
            {"code": code}
        )
        if not company:
            raise NotFoundError.company(code)

        invoices = db.execute_query(
            f"SELECT {_INVOICE_COLS} FROM invoices WHERE comp_code = :code ORDER BY id",
            {"code": code}
        )
        return CompanyInvoicesEnvelope(
            company=CompanyWithInvoices(
                **company,
                invoices=[InvoiceResponse(**row) for row in invoices],
                industries=retrieve_industries(code, db),
            )
        )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceEnvelope,
    responses=_NOT_FOUND,
    summary="Get Invoice"
)
async def get_invoice(invoice_id: int, store: LedgerStore = Depends(get_store)):
    """Get an invoice by ID."""
    row = store.execute_one(
        f"SELECT {_INVOICE_COLS} FROM invoices WHERE id = :id",
        {"id": invoice_id}
    )
    if not row:
        raise NotFoundError.invoice(invoice_id)
    return InvoiceEnvelope(invoice=InvoiceResponse(**row))


@router.post(
    "",
    response_model=InvoiceEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Invoice"
)
async def create_invoice(invoice: InvoiceCreate, store: LedgerStore = Depends(get_store)):
    """Create an unpaid invoice dated today."""
    row = store.execute_one(
        f"""
        INSERT INTO invoices (comp_code, amt, paid, add_date, paid_date)
        VALUES (:comp_code, :amt, :paid, :add_date, NULL)
        RETURNING {_INVOICE_COLS}
        """,
        {
            "comp_code": invoice.comp_code,
            "amt": invoice.amt,
            "paid": False,
            "add_date": today().isoformat(),
        }
    )

    logger.info("invoice_created", invoice_id=row["id"], comp_code=row["comp_code"])
    return InvoiceEnvelope(invoice=InvoiceResponse(**row))


@router.put(
    "/{invoice_id}",
    response_model=InvoiceEnvelope,
    responses=_NOT_FOUND,
    summary="Update Invoice"
)
async def update_invoice(
    invoice_id: int,
    update: InvoiceUpdate,
    store: LedgerStore = Depends(get_store)
):
    """
    Update an invoice's amount and/or paid flag.

    Sending ``paid`` recomputes ``paid_date``: today when paid, null
    otherwise. Sending only ``amt`` leaves payment fields untouched.
    """
    plan = InvoiceUpdatePlan.build(
        invoice_id,
        update.model_fields_set,
        amt=update.amt,
        paid=update.paid,
    )

    with store.transaction() as db:
        before = None
        if plan.touches_payment:
            before = db.execute_one(
                "SELECT paid FROM invoices WHERE id = :id",
                {"id": invoice_id}
            )
        row = db.execute_one(plan.statement, plan.params)
        if not row:
            raise NotFoundError.invoice(invoice_id)

    logger.info("invoice_updated", invoice_id=invoice_id, kind=plan.kind.value)
    if plan.touches_payment:
        log_payment_transition(before, row)
    return InvoiceEnvelope(invoice=InvoiceResponse(**row))


@router.delete(
    "/{invoice_id}",
    response_model=DeletedResponse,
    responses=_NOT_FOUND,
    summary="Delete Invoice"
)
async def delete_invoice(invoice_id: int, store: LedgerStore = Depends(get_store)):
    """Delete an invoice."""
    row = store.execute_one(
        "DELETE FROM invoices WHERE id = :id RETURNING id",
        {"id": invoice_id}
    )
    if not row:
        raise NotFoundError.invoice(invoice_id)

    logger.info("invoice_deleted", invoice_id=invoice_id)
    return DeletedResponse()
