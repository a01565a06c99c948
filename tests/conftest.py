import os
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

# IMPORTANT:
# Set env vars BEFORE importing catalog.* (pydantic settings load at import time)
os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("TMDB_TOKEN", "test-token")

from catalog.api.deps import get_repository  # noqa: E402
from catalog.core.errors import TransportError  # noqa: E402
from catalog.db.session import init_db, make_engine, make_sessionmaker  # noqa: E402
from catalog.main import app as fastapi_app  # noqa: E402
from catalog.schemas.tmdb import RawDetails, RawListPage  # noqa: E402
from catalog.services.local_store import SqlLocalStore  # noqa: E402
from catalog.services.repository import MovieRepository  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


def _list_payload(*, page: int = 1, ids: tuple[int, ...] = (5, 6), prefix: str = "Movie") -> dict:
    return {
        "page": page,
        "results": [
            {
                "id": movie_id,
                "title": f"{prefix} {movie_id}",
                "overview": f"Overview {movie_id}",
                "popularity": 10.5 + movie_id,
                "poster_path": f"/{movie_id}.jpg",
                "release_date": "2024-12-19",
                "genre_ids": [28, 35],
                "adult": False,
                "video": False,
                "vote_average": 7.8,
                "vote_count": 1438,
            }
            for movie_id in ids
        ],
        "total_pages": 10,
        "total_results": 100,
    }


@pytest.fixture
def list_payload():
    return _list_payload


class FakeRemote:
    """Counts calls and serves canned TMDB payloads."""

    def __init__(self) -> None:
        self.list_page: RawListPage = RawListPage.model_validate(_list_payload())
        self.details: dict[int, RawDetails] = {}
        self.list_error: Exception | None = None
        self.details_error: Exception | None = None
        self.list_calls: list[dict] = []
        self.details_calls: list[int] = []

    async def fetch_list(self, *, include_adult: bool, include_video: bool, page: int) -> RawListPage:
        self.list_calls.append(
            {"include_adult": include_adult, "include_video": include_video, "page": page}
        )
        if self.list_error is not None:
            raise self.list_error
        return self.list_page

    async def fetch_details(self, movie_id: int) -> RawDetails:
        self.details_calls.append(movie_id)
        if self.details_error is not None:
            raise self.details_error
        if movie_id not in self.details:
            raise TransportError(f"TMDB returned HTTP 404 for /movie/{movie_id}")
        return self.details[movie_id]


@pytest.fixture
def fake_remote():
    return FakeRemote()


@pytest.fixture
async def store_engine(tmp_path):
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def local_store(store_engine):
    return SqlLocalStore(make_sessionmaker(store_engine))


@pytest.fixture
def repository(local_store, fake_remote):
    return MovieRepository(local=local_store, remote=fake_remote)


@pytest.fixture
async def client(repository):
    fastapi_app.dependency_overrides[get_repository] = lambda: repository

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    fastapi_app.dependency_overrides.pop(get_repository, None)


@pytest.fixture
def client_factory():
    @asynccontextmanager
    async def _factory():
        transport = ASGITransport(app=fastapi_app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c

    return _factory
