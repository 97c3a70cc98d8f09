#!/usr/bin/env python
"""
Browse and edit the photo catalog from an interactive text menu.

Usage:
  python scripts/catalog_console.py
  python scripts/catalog_console.py --backend json --data-dir ./data --enforce-ownership
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from photo_catalog.catalog import CatalogService
from photo_catalog.console import CatalogConsole
from photo_catalog.core.env import CatalogConfig, configure_logging, load_dotenv_if_present
from photo_catalog.store import build_store


def main() -> int:
    parser = argparse.ArgumentParser(description="Interactive photo catalog client.")
    parser.add_argument("--backend", choices=["sql", "json"], help="Override CATALOG_BACKEND")
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    parser.add_argument("--data-dir", type=Path, help="Override CATALOG_DATA_DIR")
    parser.add_argument(
        "--enforce-ownership",
        action="store_true",
        help="Require a login and only show photos owned by that user",
    )
    args = parser.parse_args()

    load_dotenv_if_present()
    configure_logging(default_level="WARNING")
    config = CatalogConfig.from_env()
    if args.backend:
        config.backend = args.backend
    if args.database_url:
        config.database_url = args.database_url
    if args.data_dir:
        config.data_dir = args.data_dir
    if args.enforce_ownership:
        config.enforce_ownership = True

    with build_store(config) as store:
        service = CatalogService(store, enforce_ownership=config.enforce_ownership)
        return CatalogConsole(service).run()


if __name__ == "__main__":
    sys.exit(main())
