from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Integer, MetaData, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.types import TypeDecorator

convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=convention)


class IsoDateTime(TypeDecorator):
    """Datetime stored as ISO 8601 text so the UTC offset survives every dialect."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[str]:
        if value is None:
            return None
        return value.isoformat()

    def process_result_value(self, value: Optional[str], dialect) -> Optional[datetime]:
        if not value:
            return None
        return datetime.fromisoformat(value)


class PhotoRow(Base):
    """One photo document. List-valued fields are kept as JSON arrays."""

    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    filename: Mapped[str] = mapped_column(String, nullable=False, default="")
    title: Mapped[str] = mapped_column(String, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    date: Mapped[Optional[datetime]] = mapped_column(IsoDateTime)
    resolution: Mapped[str] = mapped_column(String, nullable=False, default="")
    albums: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    owner: Mapped[Optional[int]] = mapped_column(Integer)


class AlbumRow(Base):
    __tablename__ = "albums"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String, nullable=False)


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    username: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String, nullable=False)


def create_engine_from_url(database_url: str) -> Engine:
    return create_engine(database_url, future=True)


def init_db(database_url: str | Engine) -> Engine:
    engine = (
        database_url if isinstance(database_url, Engine) else create_engine_from_url(database_url)
    )
    Base.metadata.create_all(engine)
    return engine


def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False, class_=Session, future=True)
