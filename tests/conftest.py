from __future__ import annotations

import json
from pathlib import Path

import pytest

from photo_catalog.core.models import Album, Photo
from photo_catalog.store import JsonFileStore, SqlCatalogStore, import_documents

PHOTOS = [
    {
        "id": 1,
        "filename": "beach.jpg",
        "title": "Beach",
        "description": "Waves at dusk",
        "date": "2023-07-14T19:42:00",
        "resolution": "4032x3024",
        "albums": [1, 3],
        "tags": ["beach", "sunset"],
        "owner": 10,
    },
    {
        "id": 2,
        "filename": "picnic.jpg",
        "title": "Picnic",
        "description": "Lunch in the park",
        "date": "2023-05-02T12:15:00",
        "resolution": "3024x4032",
        "albums": [2],
        "tags": ["family"],
        "owner": 20,
    },
    {
        "id": 3,
        "filename": "forest.jpg",
        "title": "Forest",
        "description": "Morning walk",
        "date": "2023-09-21T08:05:00",
        "resolution": "1920x1080",
        "albums": [3, 99],
        "tags": ["trees", "hiking"],
    },
]

ALBUMS = [
    {"id": 1, "name": "Summer"},
    {"id": 2, "name": "Family"},
    {"id": 3, "name": "Nature"},
    {"id": 4, "name": "Empty"},
]

USERS = [
    {"id": 10, "username": "alice", "password": "wonderland"},
    {"id": 20, "username": "bob", "password": "builder"},
]


def write_catalog_files(directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "photos.json").write_text(json.dumps(PHOTOS, indent=4), encoding="utf-8")
    (directory / "albums.json").write_text(json.dumps(ALBUMS, indent=4), encoding="utf-8")
    (directory / "users.json").write_text(json.dumps(USERS, indent=4), encoding="utf-8")
    return directory


def seed_sql_store(store: SqlCatalogStore) -> SqlCatalogStore:
    import_documents(
        store,
        [Photo.model_validate(doc) for doc in PHOTOS],
        [Album.model_validate(doc) for doc in ALBUMS],
        USERS,
    )
    return store


@pytest.fixture
def json_store(tmp_path: Path) -> JsonFileStore:
    return JsonFileStore(write_catalog_files(tmp_path / "data"))


@pytest.fixture
def sql_store(tmp_path: Path):
    store = SqlCatalogStore(f"sqlite+pysqlite:///{tmp_path / 'catalog.db'}")
    seed_sql_store(store)
    yield store
    store.close()


@pytest.fixture(params=["sql", "json"])
def any_store(request, sql_store, json_store):
    """Run a test against both backends."""
    return sql_store if request.param == "sql" else json_store
