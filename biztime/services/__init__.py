"""Services package - store access and ledger helpers."""
from .store import LedgerStore, StoreSession, get_store
from .lookups import retrieve_companies, retrieve_industries
from .slugs import slugify

__all__ = [
    "LedgerStore",
    "StoreSession",
    "get_store",
    "retrieve_companies",
    "retrieve_industries",
    "slugify",
]
