"""Association lookups that turn companies_industries rows into flat lists."""
from typing import Union

from biztime.services.store import LedgerStore, StoreSession

Executor = Union[LedgerStore, StoreSession]


def retrieve_companies(industry_code: str, db: Executor) -> list[str]:
    """Codes of the companies that belong to an industry."""
    rows = db.execute_query(
        """
        SELECT c.code FROM companies AS c
        JOIN companies_industries AS ci ON c.code = ci.comp_code
        WHERE ci.ind_code = :ind_code
        ORDER BY c.code
        """,
        {"ind_code": industry_code}
    )
    return [row["code"] for row in rows]


def retrieve_industries(company_code: str, db: Executor) -> list[str]:
    """Names of the industries a company belongs to."""
    rows = db.execute_query(
        """
        SELECT i.name FROM industries AS i
        JOIN companies_industries AS ci ON i.code = ci.ind_code
        WHERE ci.comp_code = :comp_code
        ORDER BY i.name
        """,
        {"comp_code": company_code}
    )
    return [row["name"] for row in rows]
