from __future__ import annotations

import logging
from typing import Protocol

from catalog.core.errors import NotFoundError, StorageError, TransportError
from catalog.core.result import Result, Success, error_from_exception
from catalog.models.movie_list import MovieListItem, MovieListSnapshot
from catalog.schemas.catalog import Details, ListSnapshot
from catalog.schemas.tmdb import RawDetails, RawListPage
from catalog.services.mapping import (
    DEFAULT_IMAGE_BASE_URL,
    StoredSnapshot,
    raw_details_to_details,
    raw_list_to_storage,
    stored_to_list_snapshot,
)

logger = logging.getLogger(__name__)

DEFAULT_LIST_PAGE = 1


class RemoteSource(Protocol):
    async def fetch_list(self, *, include_adult: bool, include_video: bool, page: int) -> RawListPage: ...

    async def fetch_details(self, movie_id: int) -> RawDetails: ...


class LocalStore(Protocol):
    async def has_snapshot(self) -> bool: ...

    async def read_snapshot(self) -> StoredSnapshot: ...

    async def replace_snapshot(self, snapshot: MovieListSnapshot, items: list[MovieListItem]) -> None: ...


class MovieRepository:
    """Serves the latest movie list and per-movie details.

    The list is refreshed from TMDB only when asked to or when nothing has
    been cached yet; a cached page is otherwise returned as-is, however old.
    Details always come from the network. Transport and storage failures are
    returned as ``Error`` results and never raised.
    """

    def __init__(
        self,
        *,
        local: LocalStore,
        remote: RemoteSource,
        list_page: int = DEFAULT_LIST_PAGE,
        image_base_url: str = DEFAULT_IMAGE_BASE_URL,
    ) -> None:
        self._local = local
        self._remote = remote
        self._list_page = list_page
        self._image_base_url = image_base_url

    async def fetch_list(self, force_refresh: bool = False) -> Result[ListSnapshot]:
        try:
            if force_refresh or not await self._local.has_snapshot():
                raw = await self._remote.fetch_list(
                    include_adult=False,
                    include_video=False,
                    page=self._list_page,
                )
                snapshot, items = raw_list_to_storage(raw)
                await self._local.replace_snapshot(snapshot, items)
                logger.info("movie list refreshed page=%s items=%s", snapshot.page, len(items))
            stored = await self._local.read_snapshot()
        except NotFoundError:
            logger.exception("movie cache reported a snapshot but none could be read")
            raise
        except (TransportError, StorageError) as exc:
            logger.warning("fetch_list failed force_refresh=%s: %s", force_refresh, exc)
            return error_from_exception(exc)

        return Success(stored_to_list_snapshot(stored, image_base_url=self._image_base_url))

    async def fetch_details(self, movie_id: int) -> Result[Details]:
        try:
            raw = await self._remote.fetch_details(movie_id)
        except TransportError as exc:
            logger.warning("fetch_details failed movie_id=%s: %s", movie_id, exc)
            return error_from_exception(exc)

        return Success(raw_details_to_details(raw, image_base_url=self._image_base_url))
