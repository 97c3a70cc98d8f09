from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from photo_catalog.core.models import Album, Photo, User, merge_photo_fields

from .errors import DataUnreadableError

logger = logging.getLogger(__name__)

PHOTOS_FILE = "photos.json"
ALBUMS_FILE = "albums.json"
USERS_FILE = "users.json"


class JsonFileStore:
    """Flat-file catalog: one JSON array per collection.

    Files are re-read on every call and ``photos.json`` is rewritten in full
    on every update, so documents keep their file order.
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        if self._connected:
            return
        if not self.data_dir.is_dir():
            raise DataUnreadableError(f"Catalog data directory not found: {self.data_dir}")
        self._connected = True
        logger.info("Using catalog data files in %s", self.data_dir)

    def close(self) -> None:
        self._connected = False

    def __enter__(self) -> "JsonFileStore":
        self.connect()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _read(self, filename: str) -> list[dict[str, Any]]:
        self.connect()
        path = self.data_dir / filename
        try:
            documents = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise DataUnreadableError(f"Catalog data file missing: {path}") from exc
        except (OSError, ValueError) as exc:
            raise DataUnreadableError(f"Could not read catalog data file {path}: {exc}") from exc
        if not isinstance(documents, list) or not all(isinstance(doc, dict) for doc in documents):
            raise DataUnreadableError(f"Catalog data file {path} must hold an array of objects")
        return documents

    def _write(self, filename: str, documents: list[dict[str, Any]]) -> None:
        path = self.data_dir / filename
        path.write_text(json.dumps(documents, indent=4), encoding="utf-8")

    def load_photos(self) -> list[Photo]:
        return [self._parse(Photo, doc, PHOTOS_FILE) for doc in self._read(PHOTOS_FILE)]

    def load_albums(self) -> list[Album]:
        return [self._parse(Album, doc, ALBUMS_FILE) for doc in self._read(ALBUMS_FILE)]

    def load_users(self) -> list[dict[str, Any]]:
        return self._read(USERS_FILE)

    @staticmethod
    def _parse(model: type, document: dict[str, Any], filename: str):
        try:
            return model.model_validate(document)
        except ValidationError as exc:
            raise DataUnreadableError(f"Invalid document in {filename}: {exc}") from exc

    def find_photo_by_id(self, photo_id: int) -> Optional[Photo]:
        for photo in self.load_photos():
            if photo.id == photo_id:
                return photo
        logger.debug("Photo %s not found", photo_id)
        return None

    def update_photo_details(self, photo_id: int, fields: Mapping[str, object]) -> Optional[Photo]:
        documents = self._read(PHOTOS_FILE)
        for document in documents:
            if document.get("id") != photo_id:
                continue
            current = self._parse(Photo, document, PHOTOS_FILE)
            merged = merge_photo_fields(current, dict(fields))
            serialized = merged.model_dump(mode="json")
            for key in fields:
                document[key] = serialized[key]
            self._write(PHOTOS_FILE, documents)
            logger.info("Updated photo %s fields: %s", photo_id, ", ".join(sorted(fields)))
            return merged
        logger.debug("Photo %s not found for update", photo_id)
        return None

    def _attach_photos(self, album: Album) -> Album:
        photos = [photo for photo in self.load_photos() if photo.in_album(album.id)]
        return album.model_copy(update={"photos": photos})

    def find_album_by_name(self, name: str) -> Optional[Album]:
        wanted = name.lower()
        for album in self.load_albums():
            if album.name.lower() == wanted:
                return self._attach_photos(album)
        logger.debug("Album named %r not found", name)
        return None

    def find_album_by_id(self, album_id: int) -> Optional[Album]:
        for album in self.load_albums():
            if album.id == album_id:
                return self._attach_photos(album)
        logger.debug("Album %s not found", album_id)
        return None

    def find_all_albums(self) -> list[Album]:
        return [album.model_copy(update={"photos": None}) for album in self.load_albums()]

    def find_user(self, username: str, password: str) -> Optional[User]:
        for document in self.load_users():
            if document.get("username") == username and document.get("password") == password:
                return User.model_validate(document)
        return None
