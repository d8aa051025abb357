"""Database package"""

from pet_store.db.session import AsyncSessionLocal, engine, get_db, create_tables
from pet_store.models.base import Base

__all__ = ["Base", "AsyncSessionLocal", "engine", "get_db", "create_tables"]
