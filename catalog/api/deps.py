from __future__ import annotations

from functools import lru_cache

from catalog.core.config import settings
from catalog.db.session import AsyncSessionLocal
from catalog.services.local_store import SqlLocalStore
from catalog.services.repository import MovieRepository
from catalog.services.tmdb import TmdbRemoteSource


def build_repository() -> MovieRepository:
    return MovieRepository(
        local=SqlLocalStore(AsyncSessionLocal),
        remote=TmdbRemoteSource(settings.remote_config()),
        list_page=settings.catalog_list_page,
        image_base_url=settings.tmdb_image_base_url,
    )


@lru_cache(maxsize=1)
def get_repository() -> MovieRepository:
    # One store per process so its write lock is shared by every request.
    return build_repository()
