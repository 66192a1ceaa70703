"""Error taxonomy shared by the store and the routers."""
from enum import Enum
from typing import Optional

from sqlalchemy import exc as sa_exc


class StoreErrorKind(str, Enum):
    """Internal classification of store failures (all surface as HTTP 500)."""
    CONSTRAINT_VIOLATION = "constraint_violation"
    CONNECTION_FAILURE = "connection_failure"
    DATA_ERROR = "data_error"
    PROGRAMMING_ERROR = "programming_error"
    UNKNOWN = "unknown"


class NotFoundError(Exception):
    """A lookup key (code or id) matched no row."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def company(cls, code: str) -> "NotFoundError":
        return cls(f"Company with code '{code}' not found")

    @classmethod
    def industry(cls, code: str) -> "NotFoundError":
        return cls(f"Industry with code '{code}' not found")

    @classmethod
    def invoice(cls, invoice_id: int) -> "NotFoundError":
        return cls(f"Invoice with id '{invoice_id}' not found")

    @classmethod
    def company_in_industry(cls, comp_code: str, ind_code: str) -> "NotFoundError":
        return cls(
            f"Company with code '{comp_code}' not found in industry with code '{ind_code}'"
        )


class StoreError(Exception):
    """Any failure raised by the relational store."""

    def __init__(self, message: str, kind: StoreErrorKind = StoreErrorKind.UNKNOWN):
        super().__init__(message)
        self.message = message
        self.kind = kind

    @classmethod
    def from_exception(cls, error: Exception) -> "StoreError":
        """Wrap a SQLAlchemy/DB-API exception, keeping the driver's message."""
        orig: Optional[BaseException] = getattr(error, "orig", None)
        message = str(orig) if orig is not None else str(error)
        return cls(message, classify(error))


def classify(error: Exception) -> StoreErrorKind:
    """Map a SQLAlchemy exception onto a StoreErrorKind."""
    if isinstance(error, sa_exc.IntegrityError):
        return StoreErrorKind.CONSTRAINT_VIOLATION
    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return StoreErrorKind.CONNECTION_FAILURE
    # PEP 249 OperationalError covers lost connections and failed operations
    if isinstance(
        error,
        (sa_exc.DisconnectionError, sa_exc.TimeoutError, sa_exc.InterfaceError, sa_exc.OperationalError),
    ):
        return StoreErrorKind.CONNECTION_FAILURE
    if isinstance(error, sa_exc.DataError):
        return StoreErrorKind.DATA_ERROR
    if isinstance(error, sa_exc.ProgrammingError):
        return StoreErrorKind.PROGRAMMING_ERROR
    return StoreErrorKind.UNKNOWN
