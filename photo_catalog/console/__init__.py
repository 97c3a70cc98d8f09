"""Interactive console client."""

from .menu import MENU, CatalogConsole

__all__ = ["MENU", "CatalogConsole"]
