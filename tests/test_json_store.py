from __future__ import annotations

import json
from pathlib import Path

import pytest

from photo_catalog.store import DataUnreadableError, JsonFileStore


def test_update_rewrites_photos_file(json_store: JsonFileStore) -> None:
    json_store.update_photo_details(1, {"title": "Dusk"})
    documents = json.loads((json_store.data_dir / "photos.json").read_text(encoding="utf-8"))
    assert [doc["id"] for doc in documents] == [1, 2, 3]
    assert documents[0]["title"] == "Dusk"
    assert documents[0]["tags"] == ["beach", "sunset"]
    # Keys the update did not name are written back untouched.
    assert "owner" not in documents[2]


def test_album_photos_follow_file_order(json_store: JsonFileStore) -> None:
    path = json_store.data_dir / "photos.json"
    documents = json.loads(path.read_text(encoding="utf-8"))
    path.write_text(json.dumps(list(reversed(documents))), encoding="utf-8")
    album = json_store.find_album_by_name("nature")
    assert [photo.id for photo in album.photos] == [3, 1]


def test_missing_data_directory(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "nowhere")
    with pytest.raises(DataUnreadableError):
        store.connect()
    assert not store.connected


def test_missing_file(json_store: JsonFileStore) -> None:
    (json_store.data_dir / "albums.json").unlink()
    with pytest.raises(DataUnreadableError):
        json_store.find_all_albums()
    # Photos are still readable.
    assert json_store.find_photo_by_id(2) is not None


@pytest.mark.parametrize(
    "content",
    ["{not json", '{"id": 1}', "[1, 2, 3]", '[{"filename": "no-id.jpg"}]'],
)
def test_malformed_photos_file(json_store: JsonFileStore, content: str) -> None:
    (json_store.data_dir / "photos.json").write_text(content, encoding="utf-8")
    with pytest.raises(DataUnreadableError):
        json_store.find_photo_by_id(1)
