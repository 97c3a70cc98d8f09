from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from photo_catalog.core.models import Album, Photo, User, merge_photo_fields

from .errors import StoreUnavailableError
from .schema import AlbumRow, PhotoRow, UserRow, create_engine_from_url, init_db, session_factory

logger = logging.getLogger(__name__)

# Signed 64-bit bounds of an SQL INTEGER key; ids outside can never match.
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


def _storable_id(value: int) -> bool:
    return MIN_ROW_ID <= value <= MAX_ROW_ID


def _load_photo(row: PhotoRow) -> Photo:
    return Photo(
        id=row.id,
        filename=row.filename,
        title=row.title,
        description=row.description,
        date=row.date,
        resolution=row.resolution,
        albums=list(row.albums or []),
        tags=list(row.tags or []),
        owner=row.owner,
    )


class SqlCatalogStore:
    """Document store kept in a SQL database through SQLAlchemy.

    The engine is created on the first operation (or an explicit ``connect``)
    and reused until ``close``. Driver failures surface as
    ``StoreUnavailableError``.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self._engine: Optional[Engine] = None
        self._sessions: Optional[sessionmaker[Session]] = None

    @property
    def connected(self) -> bool:
        return self._engine is not None

    def connect(self) -> None:
        if self._engine is not None:
            return
        engine = None
        try:
            engine = create_engine_from_url(self.database_url)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            init_db(engine)
        except SQLAlchemyError as exc:
            if engine is not None:
                engine.dispose()
            self._engine = None
            self._sessions = None
            raise StoreUnavailableError(f"Could not connect to catalog database: {exc}") from exc
        self._engine = engine
        self._sessions = session_factory(engine)
        logger.info("Connected to catalog database %s", engine.url.render_as_string())

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessions = None
        logger.info("Closed catalog database connection")

    def __enter__(self) -> "SqlCatalogStore":
        self.connect()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session, converting driver errors to ``StoreUnavailableError``."""
        self.connect()
        sessions = self._sessions
        if sessions is None:
            raise StoreUnavailableError("Catalog database connection was closed")
        try:
            with sessions() as session:
                yield session
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"Catalog database operation failed: {exc}") from exc

    def find_photo_by_id(self, photo_id: int) -> Optional[Photo]:
        if not _storable_id(photo_id):
            return None
        with self.session() as session:
            row = session.get(PhotoRow, photo_id)
            if row is None:
                logger.debug("Photo %s not found", photo_id)
                return None
            return _load_photo(row)

    def update_photo_details(self, photo_id: int, fields: Mapping[str, object]) -> Optional[Photo]:
        if not _storable_id(photo_id):
            return None
        with self.session() as session:
            row = session.get(PhotoRow, photo_id)
            if row is None:
                logger.debug("Photo %s not found for update", photo_id)
                return None
            merged = merge_photo_fields(_load_photo(row), dict(fields))
            for key in fields:
                setattr(row, key, getattr(merged, key))
            session.commit()
            logger.info("Updated photo %s fields: %s", photo_id, ", ".join(sorted(fields)))
            return _load_photo(row)

    def _attach_photos(self, session: Session, row: AlbumRow) -> Album:
        # Membership lives on the photo documents; JSON containment is not
        # portable across dialects, so filter in id order here.
        rows = session.scalars(select(PhotoRow).order_by(PhotoRow.id)).all()
        photos = [_load_photo(photo) for photo in rows if row.id in (photo.albums or [])]
        return Album(id=row.id, name=row.name, photos=photos)

    def find_album_by_name(self, name: str) -> Optional[Album]:
        wanted = name.lower()
        with self.session() as session:
            # sqlite lower() only folds ASCII, so compare names in Python.
            row = next(
                (
                    album
                    for album in session.scalars(select(AlbumRow).order_by(AlbumRow.id))
                    if album.name.lower() == wanted
                ),
                None,
            )
            if row is None:
                logger.debug("Album named %r not found", name)
                return None
            return self._attach_photos(session, row)

    def find_album_by_id(self, album_id: int) -> Optional[Album]:
        if not _storable_id(album_id):
            return None
        with self.session() as session:
            row = session.get(AlbumRow, album_id)
            if row is None:
                logger.debug("Album %s not found", album_id)
                return None
            return self._attach_photos(session, row)

    def find_all_albums(self) -> list[Album]:
        with self.session() as session:
            rows = session.scalars(select(AlbumRow).order_by(AlbumRow.id)).all()
            return [Album(id=row.id, name=row.name) for row in rows]

    def find_user(self, username: str, password: str) -> Optional[User]:
        with self.session() as session:
            row = session.scalar(
                select(UserRow).where(UserRow.username == username, UserRow.password == password)
            )
            if row is None:
                return None
            return User(id=row.id, username=row.username)
