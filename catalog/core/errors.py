from __future__ import annotations


class CatalogError(Exception):
    """Base class for failures raised by the catalog data sources."""


class TransportError(CatalogError):
    """Network failure, non-2xx status or undecodable body from TMDB."""


class StorageError(CatalogError):
    """Reading or writing the local cache failed."""


class NotFoundError(CatalogError):
    """No list snapshot has been stored yet."""
