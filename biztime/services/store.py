"""Relational store access for the ledger."""
import logging
from contextlib import contextmanager
from typing import Any, Generator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from biztime.database.base import Base
from biztime.database.connection import build_engine
from biztime.exceptions import StoreError

logger = logging.getLogger(__name__)


class StoreSession:
    """Statement helpers bound to one connection inside an open transaction."""

    def __init__(self, connection: Connection):
        self._connection = connection

    def execute_query(
        self,
        query: str,
        params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """Execute a query and return results as list of dicts."""
        result = self._connection.execute(text(query), params or {})
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings()]

    def execute_one(
        self,
        query: str,
        params: Optional[dict[str, Any]] = None
    ) -> Optional[dict[str, Any]]:
        """Execute a query and return single result."""
        results = self.execute_query(query, params)
        return results[0] if results else None

    def execute_write(
        self,
        query: str,
        params: Optional[dict[str, Any]] = None
    ) -> int:
        """Execute an INSERT/UPDATE/DELETE and return affected rows."""
        result = self._connection.execute(text(query), params or {})
        return result.rowcount


class LedgerStore:
    """
    Owns the engine for the ledger database.

    Opened once at process start and closed at process stop; the FastAPI
    app holds the instance on ``app.state.store`` and hands it to routers
    through ``get_store``.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        return self.connect()

    def connect(self) -> Engine:
        """Create the engine if it is not open yet."""
        if self._engine is None:
            self._engine = build_engine(self.database_url, echo=self.echo)
            logger.info(f"Opened ledger store ({self._engine.url.get_backend_name()})")
        return self._engine

    def disconnect(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.info("Closed ledger store")

    def create_schema(self) -> None:
        """Create any missing tables."""
        # Registers every table on Base.metadata
        from biztime.database import orm  # noqa: F401

        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Schema creation failed: {e}")
            raise StoreError.from_exception(e) from e

    @contextmanager
    def transaction(self) -> Generator[StoreSession, None, None]:
        """
        Run several statements in one transaction.

        Commits when the block exits normally and rolls back on any
        exception. SQLAlchemy failures are re-raised as StoreError.
        """
        try:
            with self.engine.begin() as conn:
                yield StoreSession(conn)
        except SQLAlchemyError as e:
            error = StoreError.from_exception(e)
            logger.error(f"Database error ({error.kind.value}): {error.message}")
            raise error from e

    async def health_check(self) -> tuple[bool, Optional[str]]:
        """Check if the store connection is healthy."""
        try:
            with self.transaction() as session:
                result = session.execute_one("SELECT 1 AS ok")
                return result is not None, None
        except StoreError as e:
            return False, e.message

    def execute_query(
        self,
        query: str,
        params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """Execute a query in its own transaction and return all rows."""
        with self.transaction() as session:
            return session.execute_query(query, params)

    def execute_one(
        self,
        query: str,
        params: Optional[dict[str, Any]] = None
    ) -> Optional[dict[str, Any]]:
        """Execute a query in its own transaction and return the first row."""
        with self.transaction() as session:
            return session.execute_one(query, params)

    def execute_write(
        self,
        query: str,
        params: Optional[dict[str, Any]] = None
    ) -> int:
        """Execute a statement in its own transaction and return affected rows."""
        with self.transaction() as session:
            return session.execute_write(query, params)


def get_store(request: Request) -> LedgerStore:
    """
    Dependency function for FastAPI to get the application's store.

    Usage in FastAPI:
        @router.get("/companies")
        def list_companies(store: LedgerStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
