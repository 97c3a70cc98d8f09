#!/usr/bin/env python
"""
Copy photos.json / albums.json (and users.json if present) into the SQL store.

Usage:
  python scripts/import_json.py ./data
  DATABASE_URL=sqlite+pysqlite:///./photo_catalog.db python scripts/import_json.py ./data
"""
from __future__ import annotations

import argparse
import os
from pathlib import Path

from photo_catalog.core.env import configure_logging, load_dotenv_if_present
from photo_catalog.store import JsonFileStore, SqlCatalogStore, import_documents
from photo_catalog.store.json_store import USERS_FILE


def main() -> None:
    parser = argparse.ArgumentParser(description="Import flat JSON catalog files.")
    parser.add_argument("directory", type=Path, help="Folder holding photos.json and albums.json")
    args = parser.parse_args()

    load_dotenv_if_present()
    configure_logging()
    database_url = os.getenv("DATABASE_URL", "sqlite+pysqlite:///./photo_catalog.db")
    target = args.directory
    if not target.exists() or not target.is_dir():
        raise FileNotFoundError(f"Directory not found or not a folder: {target}")

    files = JsonFileStore(target)
    users = files.load_users() if (target / USERS_FILE).exists() else []
    with SqlCatalogStore(database_url) as store:
        photos, albums, user_count = import_documents(
            store, files.load_photos(), files.load_albums(), users
        )
    print(f"Import complete: {photos} photos, {albums} albums, {user_count} users from {target}")


if __name__ == "__main__":
    main()
