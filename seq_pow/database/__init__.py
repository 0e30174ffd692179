"""Persistence adapter for solved VDF instances."""

from .database import get_engine, set_engine, get_orm_base, initialize_database, save_instance
from .DatabaseService import DatabaseService

__all__ = [
    "get_engine",
    "set_engine",
    "get_orm_base",
    "initialize_database",
    "save_instance",
    "DatabaseService",
]
