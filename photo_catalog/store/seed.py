from __future__ import annotations

import logging
from typing import Any, Iterable

from photo_catalog.core.models import Album, Photo

from .schema import AlbumRow, PhotoRow, UserRow
from .sql_store import SqlCatalogStore

logger = logging.getLogger(__name__)


def import_documents(
    store: SqlCatalogStore,
    photos: Iterable[Photo],
    albums: Iterable[Album],
    users: Iterable[dict[str, Any]] = (),
) -> tuple[int, int, int]:
    """Insert or replace flat-file documents in the SQL store, keyed by id."""
    counts = [0, 0, 0]
    with store.session() as session:
        for photo in photos:
            session.merge(
                PhotoRow(
                    id=photo.id,
                    filename=photo.filename,
                    title=photo.title,
                    description=photo.description,
                    date=photo.date,
                    resolution=photo.resolution,
                    albums=list(photo.albums),
                    tags=list(photo.tags),
                    owner=photo.owner,
                )
            )
            counts[0] += 1
        for album in albums:
            session.merge(AlbumRow(id=album.id, name=album.name))
            counts[1] += 1
        for user in users:
            session.merge(
                UserRow(id=int(user["id"]), username=user["username"], password=user["password"])
            )
            counts[2] += 1
        session.commit()
    logger.info("Imported %d photos, %d albums, %d users", *counts)
    return counts[0], counts[1], counts[2]
