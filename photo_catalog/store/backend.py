from __future__ import annotations

from typing import Mapping, Optional, Protocol

from photo_catalog.core.env import CatalogConfig
from photo_catalog.core.models import Album, Photo, User

from .json_store import JsonFileStore
from .sql_store import SqlCatalogStore


class CatalogStore(Protocol):
    def connect(self) -> None: ...

    def close(self) -> None: ...

    def __enter__(self) -> "CatalogStore": ...

    def __exit__(self, *exc_info: object) -> None: ...

    def find_photo_by_id(self, photo_id: int) -> Optional[Photo]: ...

    def update_photo_details(
        self, photo_id: int, fields: Mapping[str, object]
    ) -> Optional[Photo]: ...

    def find_album_by_name(self, name: str) -> Optional[Album]: ...

    def find_album_by_id(self, album_id: int) -> Optional[Album]: ...

    def find_all_albums(self) -> list[Album]: ...

    def find_user(self, username: str, password: str) -> Optional[User]: ...


def build_store(config: CatalogConfig) -> CatalogStore:
    """Create the (not yet connected) store selected by ``config.backend``."""
    if config.backend == "json":
        return JsonFileStore(config.data_dir)
    return SqlCatalogStore(config.database_url)
