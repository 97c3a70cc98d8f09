from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

# Scalar photo fields that an update may overwrite.
EDITABLE_PHOTO_FIELDS = frozenset({"filename", "title", "description", "date", "resolution"})


class Photo(BaseModel):
    id: int
    filename: str = ""
    title: str = ""
    description: str = ""
    date: Optional[datetime] = None
    resolution: str = ""
    albums: list[int] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    owner: Optional[int] = None

    def in_album(self, album_id: int) -> bool:
        return album_id in self.albums


class Album(BaseModel):
    """Album document; ``photos`` is derived at read time and never stored."""

    id: int
    name: str
    photos: Optional[list[Photo]] = None


class User(BaseModel):
    id: int
    username: str


def merge_photo_fields(photo: Photo, fields: dict) -> Photo:
    """Return ``photo`` with the supplied editable fields overwritten and validated."""
    locked = set(fields) - EDITABLE_PHOTO_FIELDS
    if locked:
        raise ValueError(f"Photo fields are not editable: {', '.join(sorted(locked))}")
    return Photo.model_validate({**photo.model_dump(), **fields})
