from __future__ import annotations

import logging
from typing import Mapping, Optional

from photo_catalog.core.models import Album, Photo, User
from photo_catalog.store import CatalogStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Business rules over a catalog store.

    With ``enforce_ownership`` a photo is only visible to the user whose id
    matches ``photo.owner``. A photo the caller may not see is reported as
    missing (``None``), the same as one that does not exist.
    """

    def __init__(self, store: CatalogStore, *, enforce_ownership: bool = False):
        self.store = store
        self.enforce_ownership = enforce_ownership

    def _visible(self, photo: Optional[Photo], user: Optional[User]) -> bool:
        if photo is None:
            return False
        if not self.enforce_ownership:
            return True
        return user is not None and photo.owner is not None and photo.owner == user.id

    def login(self, username: str, password: str) -> Optional[User]:
        user = self.store.find_user(username, password)
        if user is None:
            logger.info("Rejected login for %r", username)
        return user

    def find_photo_by_id(self, photo_id: int, user: Optional[User] = None) -> Optional[Photo]:
        photo = self.store.find_photo_by_id(photo_id)
        return photo if self._visible(photo, user) else None

    def update_photo_details(
        self,
        photo_id: int,
        fields: Mapping[str, object],
        user: Optional[User] = None,
    ) -> Optional[Photo]:
        # Check and write are separate store calls; a concurrent writer may
        # land between them.
        photo = self.store.find_photo_by_id(photo_id)
        if not self._visible(photo, user):
            return None
        return self.store.update_photo_details(photo_id, fields)

    def find_album_by_name(self, name: str) -> Optional[Album]:
        return self.store.find_album_by_name(name)

    def find_album_by_id(self, album_id: int) -> Optional[Album]:
        return self.store.find_album_by_id(album_id)

    def find_all_albums(self) -> list[Album]:
        return self.store.find_all_albums()
