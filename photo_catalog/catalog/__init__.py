"""Business layer for the photo catalog."""

from .service import CatalogService

__all__ = ["CatalogService"]
