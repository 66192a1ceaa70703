"""Invoice update policy.

A PUT on an invoice may carry ``amt``, ``paid``, both, or neither. The
request is classified once into an ``InvoiceUpdateKind`` and each kind maps
to exactly one UPDATE statement:

  AMOUNT_ONLY  SET amt
  PAID_ONLY    SET paid, paid_date
  BOTH         SET amt, paid, paid_date
  NEITHER      same statement as BOTH, with both values null

``paid_date`` is today's date when ``paid`` is true and null otherwise, so
an unpaid → paid transition stamps the date and paid → unpaid clears it.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

import structlog

from biztime.models.enums import (
    VALID_PAYMENT_TRANSITIONS, InvoiceStatus, InvoiceUpdateKind
)

logger = structlog.get_logger(__name__)

_RETURNING = "RETURNING id, comp_code, amt, paid, add_date, paid_date"

_STATEMENTS: dict[str, str] = {
    "amount": f"UPDATE invoices SET amt = :amt WHERE id = :id {_RETURNING}",
    "paid": (
        "UPDATE invoices SET paid = :paid, paid_date = :paid_date "
        f"WHERE id = :id {_RETURNING}"
    ),
    "all": (
        "UPDATE invoices SET amt = :amt, paid = :paid, paid_date = :paid_date "
        f"WHERE id = :id {_RETURNING}"
    ),
}


def today() -> date:
    return date.today()


def paid_date_for(paid: Optional[bool], on: Optional[date] = None) -> Optional[date]:
    """The paid_date an invoice must carry for a given paid flag."""
    return (on or today()) if paid else None


@dataclass
class InvoiceUpdatePlan:
    """One deterministic UPDATE statement for an invoice PUT."""

    kind: InvoiceUpdateKind
    statement: str
    params: dict[str, Any]

    @classmethod
    def build(
        cls,
        invoice_id: int,
        fields: set[str],
        amt: Optional[float] = None,
        paid: Optional[bool] = None,
        on: Optional[date] = None,
    ) -> "InvoiceUpdatePlan":
        """Classify the supplied fields and bind the matching statement.

        Args:
            invoice_id: Row to update.
            fields: Names of the fields present in the request body.
            amt: New amount (ignored for PAID_ONLY).
            paid: New paid flag (ignored for AMOUNT_ONLY).
            on: Date used for paid_date; defaults to today.
        """
        kind = InvoiceUpdateKind.from_fields(fields)
        params: dict[str, Any] = {"id": invoice_id}

        if kind is InvoiceUpdateKind.AMOUNT_ONLY:
            params["amt"] = amt
            return cls(kind, _STATEMENTS["amount"], params)

        stamp = paid_date_for(paid, on)
        params["paid"] = paid
        params["paid_date"] = stamp.isoformat() if stamp else None

        if kind is InvoiceUpdateKind.PAID_ONLY:
            return cls(kind, _STATEMENTS["paid"], params)

        params["amt"] = amt
        return cls(kind, _STATEMENTS["all"], params)

    @property
    def touches_payment(self) -> bool:
        return self.kind is not InvoiceUpdateKind.AMOUNT_ONLY


def log_payment_transition(before: Optional[dict], after: dict) -> None:
    """Emit an audit event when an invoice changes paid state."""
    previous = InvoiceStatus.of(before["paid"]) if before else InvoiceStatus.UNPAID
    current = InvoiceStatus.of(after["paid"])
    if current not in VALID_PAYMENT_TRANSITIONS[previous]:
        return
    logger.info(
        "invoice_paid" if current is InvoiceStatus.PAID else "invoice_unpaid",
        invoice_id=after["id"],
        comp_code=after["comp_code"],
        paid_date=str(after["paid_date"]) if after["paid_date"] else None,
    )
