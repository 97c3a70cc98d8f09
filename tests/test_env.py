from __future__ import annotations

from pathlib import Path

import pytest

from photo_catalog.core.env import CatalogConfig, load_dotenv_if_present
from photo_catalog.store import JsonFileStore, SqlCatalogStore, build_store

CATALOG_VARS = [
    "CATALOG_BACKEND",
    "DATABASE_URL",
    "CATALOG_DATA_DIR",
    "CATALOG_ENFORCE_OWNERSHIP",
    "CATALOG_PUBLIC_DIR",
    "CATALOG_PHOTOS_DIR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in CATALOG_VARS:
        # setenv first so teardown also removes values loaded from .env files.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults() -> None:
    config = CatalogConfig.from_env()
    assert config.backend == "sql"
    assert config.database_url == "sqlite+pysqlite:///./photo_catalog.db"
    assert config.data_dir == Path("data")
    assert config.enforce_ownership is False


def test_from_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CATALOG_BACKEND", "JSON")
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CATALOG_ENFORCE_OWNERSHIP", "1")
    config = CatalogConfig.from_env()
    assert config.backend == "json"
    assert config.data_dir == tmp_path
    assert config.enforce_ownership is True


def test_unknown_backend(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_BACKEND", "mongo")
    with pytest.raises(ValueError):
        CatalogConfig.from_env()


def test_build_store_selects_backend(monkeypatch, tmp_path: Path) -> None:
    assert isinstance(build_store(CatalogConfig.from_env()), SqlCatalogStore)
    monkeypatch.setenv("CATALOG_BACKEND", "json")
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    store = build_store(CatalogConfig.from_env())
    assert isinstance(store, JsonFileStore)
    assert store.data_dir == tmp_path
    assert not store.connected


def test_load_dotenv_if_present(monkeypatch, tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("CATALOG_BACKEND=json\n", encoding="utf-8")
    load_dotenv_if_present(env_file)
    assert CatalogConfig.from_env().backend == "json"
    load_dotenv_if_present(tmp_path / "absent.env")
