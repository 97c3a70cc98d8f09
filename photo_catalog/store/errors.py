class CatalogStoreError(Exception):
    """Base class for failures of the backing catalog store."""


class StoreUnavailableError(CatalogStoreError):
    """The document store could not be reached or rejected an operation."""


class DataUnreadableError(CatalogStoreError):
    """A flat data file is missing or does not hold the expected documents."""
