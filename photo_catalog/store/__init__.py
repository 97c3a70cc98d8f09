"""Persistence layer: SQL document store and flat JSON files."""

from .backend import CatalogStore, build_store
from .errors import CatalogStoreError, DataUnreadableError, StoreUnavailableError
from .json_store import JsonFileStore
from .schema import AlbumRow, Base, PhotoRow, UserRow, init_db, session_factory
from .seed import import_documents
from .sql_store import SqlCatalogStore

__all__ = [
    "AlbumRow",
    "Base",
    "CatalogStore",
    "CatalogStoreError",
    "DataUnreadableError",
    "JsonFileStore",
    "PhotoRow",
    "SqlCatalogStore",
    "StoreUnavailableError",
    "UserRow",
    "build_store",
    "import_documents",
    "init_db",
    "session_factory",
]
