"""Industry endpoints, including company membership."""
import structlog
from fastapi import APIRouter, Depends, status

from biztime.exceptions import NotFoundError
from biztime.models import (
    IndustryCreate, IndustryUpdate, IndustryCompanyCreate, IndustryResponse,
    IndustryListResponse, IndustryEnvelope, DeletedResponse, ErrorResponse,
    MessageResponse
)
from biztime.services import LedgerStore, get_store, retrieve_companies

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/industries",
    tags=["Industries"],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)

_INDUSTRY_COLS = "code, name"

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


def _with_companies(row: dict, db) -> IndustryResponse:
    """Build IndustryResponse from a DB row plus its company codes."""
    return IndustryResponse(**row, companies=retrieve_companies(row["code"], db))


def _require_industry(code: str, db) -> dict:
    row = db.execute_one(
        f"SELECT {_INDUSTRY_COLS} FROM industries WHERE code = :code",
        {"code": code}
    )
    if not row:
        raise NotFoundError.industry(code)
    return row


def _require_company(comp_code: str, db) -> None:
    row = db.execute_one(
        "SELECT code FROM companies WHERE code = :code",
        {"code": comp_code}
    )
    if not row:
        raise NotFoundError.company(comp_code)


@router.get(
    "",
    response_model=IndustryListResponse,
    summary="List Industries"
)
async def list_industries(store: LedgerStore = Depends(get_store)):
    """List all industries with the codes of their companies."""
    with store.transaction() as db:
        rows = db.execute_query(f"SELECT {_INDUSTRY_COLS} FROM industries")
        return IndustryListResponse(
            industries=[_with_companies(row, db) for row in rows]
        )


@router.get(
    "/{code}",
    response_model=IndustryEnvelope,
    responses=_NOT_FOUND,
    summary="Get Industry"
)
async def get_industry(code: str, store: LedgerStore = Depends(get_store)):
    """Get an industry and its member companies."""
    with store.transaction() as db:
        row = _require_industry(code, db)
        return IndustryEnvelope(industry=_with_companies(row, db))


@router.post(
    "",
    response_model=IndustryEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Industry"
)
async def create_industry(industry: IndustryCreate, store: LedgerStore = Depends(get_store)):
    """Create a new industry; the code is stored as a slug."""
    with store.transaction() as db:
        row = db.execute_one(
            f"""
            INSERT INTO industries (code, name) VALUES (:code, :name)
            RETURNING {_INDUSTRY_COLS}
            """,
            industry.model_dump()
        )
        created = _with_companies(row, db)

    logger.info("industry_created", code=created.code)
    return IndustryEnvelope(industry=created)


@router.put(
    "/{code}",
    response_model=IndustryEnvelope,
    responses=_NOT_FOUND,
    summary="Update Industry"
)
async def update_industry(
    code: str,
    update: IndustryUpdate,
    store: LedgerStore = Depends(get_store)
):
    """Rename an industry."""
    with store.transaction() as db:
        row = db.execute_one(
            f"""
            UPDATE industries SET name = :name WHERE code = :code
            RETURNING {_INDUSTRY_COLS}
            """,
            {"code": code, "name": update.name}
        )
        if not row:
            raise NotFoundError.industry(code)
        updated = _with_companies(row, db)

    logger.info("industry_updated", code=code)
    return IndustryEnvelope(industry=updated)


@router.delete(
    "/{code}",
    response_model=DeletedResponse,
    responses=_NOT_FOUND,
    summary="Delete Industry"
)
async def delete_industry(code: str, store: LedgerStore = Depends(get_store)):
    """Delete an industry; its company memberships cascade."""
    row = store.execute_one(
        "DELETE FROM industries WHERE code = :code RETURNING code",
        {"code": code}
    )
    if not row:
        raise NotFoundError.industry(code)

    logger.info("industry_deleted", code=code)
    return DeletedResponse()


@router.post(
    "/{code}/companies",
    response_model=IndustryEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_NOT_FOUND,
    summary="Add Company to Industry"
)
async def add_company(
    code: str,
    membership: IndustryCompanyCreate,
    store: LedgerStore = Depends(get_store)
):
    """
    Add a company to an industry.

    The industry is checked before the company. Re-adding an existing pair
    violates the association's primary key and fails as a store error.
    """
    with store.transaction() as db:
        industry = _require_industry(code, db)
        _require_company(membership.comp_code, db)
        db.execute_write(
            """
            INSERT INTO companies_industries (ind_code, comp_code)
            VALUES (:ind_code, :comp_code)
            """,
            {"ind_code": code, "comp_code": membership.comp_code}
        )
        result = _with_companies(industry, db)

    logger.info("industry_company_added", ind_code=code, comp_code=membership.comp_code)
    return IndustryEnvelope(industry=result)


@router.delete(
    "/{code}/companies/{comp_code}",
    response_model=DeletedResponse,
    responses=_NOT_FOUND,
    summary="Remove Company from Industry"
)
async def remove_company(
    code: str,
    comp_code: str,
    store: LedgerStore = Depends(get_store)
):
    """Remove a company from an industry."""
    with store.transaction() as db:
        _require_industry(code, db)
        _require_company(comp_code, db)
        # Rows returned by the DELETE decide whether the pair existed
        removed = db.execute_one(
            """
            DELETE FROM companies_industries
            WHERE ind_code = :ind_code AND comp_code = :comp_code
            RETURNING ind_code, comp_code
            """,
            {"ind_code": code, "comp_code": comp_code}
        )
        if not removed:
            raise NotFoundError.company_in_industry(comp_code, code)

    logger.info("industry_company_removed", ind_code=code, comp_code=comp_code)
    return DeletedResponse()
