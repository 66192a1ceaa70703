"""Declarative base for the BizTime tables."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM table definitions."""
    pass
