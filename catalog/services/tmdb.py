from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from catalog.core.config import RemoteConfig
from catalog.core.errors import TransportError
from catalog.schemas.tmdb import RawDetails, RawListPage

logger = logging.getLogger(__name__)

_LIST_PATH = "/discover/movie"
_LIST_LANGUAGE = "en-US"
_LIST_SORT_BY = "popularity.desc"

ModelT = TypeVar("ModelT", bound=BaseModel)


class TmdbRemoteSource:
    """One HTTP round trip per call against the TMDB v3 API.

    Any network failure, non-2xx status or body that does not decode into the
    expected shape is raised as ``TransportError`` chained to the original
    exception.
    """

    def __init__(
        self,
        config: RemoteConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.auth_token}",
            "Accept": "application/json",
        }

    async def _get(self, path: str, params: dict[str, Any] | None, model: type[ModelT]) -> ModelT:
        try:
            async with httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            ) as client:
                r = await client.get(path, params=params, headers=self._headers())
                r.raise_for_status()
                data = r.json()
            return model.model_validate(data)
        except httpx.HTTPStatusError as exc:
            logger.warning("tmdb request failed path=%s status=%s", path, exc.response.status_code)
            raise TransportError(f"TMDB returned HTTP {exc.response.status_code} for {path}") from exc
        except httpx.HTTPError as exc:
            logger.warning("tmdb request failed path=%s error=%r", path, exc)
            raise TransportError(f"Could not reach TMDB for {path}: {exc}") from exc
        except ValueError as exc:
            # json decoding and pydantic validation both land here
            logger.warning("tmdb response malformed path=%s", path)
            raise TransportError(f"Malformed TMDB response for {path}") from exc

    async def fetch_list(
        self,
        *,
        include_adult: bool,
        include_video: bool,
        page: int,
    ) -> RawListPage:
        params = {
            "include_adult": str(include_adult).lower(),
            "include_video": str(include_video).lower(),
            "page": page,
            "language": _LIST_LANGUAGE,
            "sort_by": _LIST_SORT_BY,
        }
        return await self._get(_LIST_PATH, params, RawListPage)

    async def fetch_details(self, movie_id: int) -> RawDetails:
        return await self._get(f"/movie/{movie_id}", None, RawDetails)
