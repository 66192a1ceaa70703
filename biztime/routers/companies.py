"""Company CRUD endpoints."""
import structlog
from fastapi import APIRouter, Depends, status

from biztime.exceptions import NotFoundError
from biztime.models import (
    CompanyCreate, CompanyUpdate, CompanyResponse, CompanyDetail,
    CompanyListResponse, CompanyEnvelope, DeletedResponse, ErrorResponse,
    MessageResponse
)
from biztime.services import LedgerStore, get_store, retrieve_industries

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/companies",
    tags=["Companies"],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)

_COMPANY_COLS = "code, name, description"

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


def _with_industries(row: dict, db) -> CompanyDetail:
    """Build CompanyDetail from a DB row plus its industry names."""
    return CompanyDetail(**row, industries=retrieve_industries(row["code"], db))


@router.get(
    "",
    response_model=CompanyListResponse,
    summary="List Companies"
)
async def list_companies(store: LedgerStore = Depends(get_store)):
    """List all companies (raw columns, no joined data)."""
    rows = store.execute_query(f"SELECT {_COMPANY_COLS} FROM companies")
    return CompanyListResponse(
        companies=[CompanyResponse(**row) for row in rows]
    )


@router.get(
    "/{code}",
    response_model=CompanyEnvelope,
    responses=_NOT_FOUND,
    summary="Get Company"
)
async def get_company(code: str, store: LedgerStore = Depends(get_store)):
    """Get a company and the names of its industries."""
    with store.transaction() as db:
        row = db.execute_one(
            f"SELECT {_COMPANY_COLS} FROM companies WHERE code = :code",
            {"code": code}
        )
        if not row:
            raise NotFoundError.company(code)
        return CompanyEnvelope(company=_with_industries(row, db))


@router.post(
    "",
    response_model=CompanyEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Company"
)
async def create_company(company: CompanyCreate, store: LedgerStore = Depends(get_store)):
    """Create a new company; the code is stored as a slug."""
    with store.transaction() as db:
        row = db.execute_one(
            f"""
            INSERT INTO companies (code, name, description)
            VALUES (:code, :name, :description)
            RETURNING {_COMPANY_COLS}
            """,
            company.model_dump()
        )
        created = _with_industries(row, db)

    logger.info("company_created", code=created.code)
    return CompanyEnvelope(company=created)


@router.put(
    "/{code}",
    response_model=CompanyEnvelope,
    responses=_NOT_FOUND,
    summary="Update Company"
)
async def update_company(
    code: str,
    update: CompanyUpdate,
    store: LedgerStore = Depends(get_store)
):
    """Replace a company's name and description."""
    with store.transaction() as db:
        row = db.execute_one(
            f"""
            UPDATE companies SET name = :name, description = :description
            WHERE code = :code
            RETURNING {_COMPANY_COLS}
            """,
            {"code": code, "name": update.name, "description": update.description}
        )
        if not row:
            raise NotFoundError.company(code)
        updated = _with_industries(row, db)

    logger.info("company_updated", code=code)
    return CompanyEnvelope(company=updated)


@router.delete(
    "/{code}",
    response_model=DeletedResponse,
    responses=_NOT_FOUND,
    summary="Delete Company"
)
async def delete_company(code: str, store: LedgerStore = Depends(get_store)):
    """Delete a company; its invoices and industry memberships cascade."""
    row = store.execute_one(
        "DELETE FROM companies WHERE code = :code RETURNING code",
        {"code": code}
    )
    if not row:
        raise NotFoundError.company(code)

    logger.info("company_deleted", code=code)
    return DeletedResponse()
