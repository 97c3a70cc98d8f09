from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

SUPPORTED_BACKENDS = ("sql", "json")


def load_dotenv_if_present(path: str | Path = ".env") -> None:
    """Load environment variables from a .env file if it exists."""
    dotenv_path = Path(path)
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path, override=False)


def configure_logging(default_level: str = "INFO") -> None:
    """Configure root logging level from LOG_LEVEL env (default INFO)."""
    level_name = os.getenv("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level)


@dataclass
class CatalogConfig:
    backend: str
    database_url: str
    data_dir: Path
    enforce_ownership: bool
    public_dir: Path
    photos_dir: Path

    def __post_init__(self) -> None:
        if self.backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unknown catalog backend {self.backend!r}; expected one of {SUPPORTED_BACKENDS}"
            )

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        return cls(
            backend=os.getenv("CATALOG_BACKEND", "sql").strip().lower(),
            database_url=os.getenv("DATABASE_URL", "sqlite+pysqlite:///./photo_catalog.db"),
            data_dir=Path(os.getenv("CATALOG_DATA_DIR", "data")).expanduser(),
            enforce_ownership=os.getenv("CATALOG_ENFORCE_OWNERSHIP", "0") == "1",
            public_dir=Path(os.getenv("CATALOG_PUBLIC_DIR", "public")).expanduser(),
            photos_dir=Path(os.getenv("CATALOG_PHOTOS_DIR", "photos")).expanduser(),
        )
