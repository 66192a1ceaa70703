"""Enumeration types for the BizTime ledger."""
from enum import Enum


class InvoiceStatus(str, Enum):
    """Payment states of an invoice."""
    UNPAID = "unpaid"
    PAID = "paid"

    @classmethod
    def of(cls, paid: object) -> "InvoiceStatus":
        return cls.PAID if paid else cls.UNPAID


class InvoiceUpdateKind(str, Enum):
    """Which of the optional invoice fields a PUT request supplied."""
    AMOUNT_ONLY = "amount_only"  # amt alone; paid/paid_date untouched
    PAID_ONLY = "paid_only"  # paid plus recomputed paid_date
    BOTH = "both"
    NEITHER = "neither"  # handled like BOTH with null values

    @classmethod
    def from_fields(cls, fields: set[str]) -> "InvoiceUpdateKind":
        has_amt = "amt" in fields
        has_paid = "paid" in fields
        if has_amt and has_paid:
            return cls.BOTH
        if has_amt:
            return cls.AMOUNT_ONLY
        if has_paid:
            return cls.PAID_ONLY
        return cls.NEITHER


# Both transitions happen only through a PUT that supplies `paid`
VALID_PAYMENT_TRANSITIONS: dict[InvoiceStatus, list[InvoiceStatus]] = {
    InvoiceStatus.UNPAID: [InvoiceStatus.PAID],
    InvoiceStatus.PAID: [InvoiceStatus.UNPAID],
}
