import httpx
import pytest

from catalog.core.errors import NotFoundError, StorageError, TransportError
from catalog.core.result import Error, Success
from catalog.schemas.tmdb import RawDetails, RawListPage
from catalog.services.repository import MovieRepository


@pytest.mark.anyio
async def test_first_fetch_on_empty_cache_goes_to_network(repository, fake_remote):
    result = await repository.fetch_list()

    assert isinstance(result, Success)
    assert len(fake_remote.list_calls) == 1
    assert [item.id for item in result.value.items] == [5, 6]


@pytest.mark.anyio
async def test_cached_list_is_served_without_network(repository, fake_remote, list_payload):
    await repository.fetch_list(force_refresh=True)
    fake_remote.list_calls.clear()
    fake_remote.list_page = RawListPage.model_validate(list_payload(ids=(99,)))

    for _ in range(3):
        result = await repository.fetch_list()
        assert isinstance(result, Success)
        assert [item.id for item in result.value.items] == [5, 6]

    assert fake_remote.list_calls == []


@pytest.mark.anyio
async def test_forced_refresh_makes_one_call_for_first_page(repository, fake_remote):
    await repository.fetch_list(force_refresh=True)
    fake_remote.list_calls.clear()

    result = await repository.fetch_list(force_refresh=True)

    assert isinstance(result, Success)
    assert result.value.page == 1
    assert fake_remote.list_calls == [{"include_adult": False, "include_video": False, "page": 1}]


@pytest.mark.anyio
async def test_forced_refresh_returns_new_page(repository, fake_remote, list_payload):
    await repository.fetch_list()
    fake_remote.list_page = RawListPage.model_validate(list_payload(ids=(7, 8, 9), prefix="Fresh"))

    result = await repository.fetch_list(force_refresh=True)

    assert isinstance(result, Success)
    assert [item.id for item in result.value.items] == [7, 8, 9]
    assert result.value.items[0].title == "Fresh 7"


@pytest.mark.anyio
async def test_repeated_forced_refresh_is_idempotent(repository):
    first = await repository.fetch_list(force_refresh=True)
    second = await repository.fetch_list(force_refresh=True)

    assert isinstance(first, Success)
    assert first == second


@pytest.mark.anyio
async def test_configured_list_page_is_requested(local_store, fake_remote, list_payload):
    fake_remote.list_page = RawListPage.model_validate(list_payload(page=4))
    repository = MovieRepository(local=local_store, remote=fake_remote, list_page=4)

    result = await repository.fetch_list(force_refresh=True)

    assert isinstance(result, Success)
    assert result.value.page == 4
    assert fake_remote.list_calls[0]["page"] == 4


@pytest.mark.anyio
async def test_list_poster_paths_are_full_urls(repository):
    result = await repository.fetch_list()

    assert isinstance(result, Success)
    assert result.value.items[0].poster_path == "https://image.tmdb.org/t/p/original//5.jpg"


@pytest.mark.anyio
async def test_transport_failure_keeps_previous_snapshot(repository, fake_remote, local_store, list_payload):
    await repository.fetch_list(force_refresh=True)
    cause = httpx.ConnectError("connection refused")
    failure = TransportError("Could not reach TMDB for /discover/movie")
    failure.__cause__ = cause
    fake_remote.list_error = failure
    fake_remote.list_page = RawListPage.model_validate(list_payload(ids=(42,)))

    result = await repository.fetch_list(force_refresh=True)

    assert isinstance(result, Error)
    assert result.message == "Could not reach TMDB for /discover/movie"
    assert result.cause is cause
    stored = await local_store.read_snapshot()
    assert [row.id for row in stored.items] == [5, 6]


@pytest.mark.anyio
async def test_transport_failure_on_empty_cache_writes_nothing(repository, fake_remote, local_store):
    fake_remote.list_error = TransportError("TMDB returned HTTP 503 for /discover/movie")

    result = await repository.fetch_list()

    assert isinstance(result, Error)
    assert result.cause is fake_remote.list_error
    assert await local_store.has_snapshot() is False


@pytest.mark.anyio
async def test_persist_failure_after_remote_success_is_error(repository, fake_remote, local_store, monkeypatch):
    async def failing_replace(snapshot, items):
        raise StorageError("Could not write the local movie cache")

    monkeypatch.setattr(local_store, "replace_snapshot", failing_replace)

    result = await repository.fetch_list(force_refresh=True)

    assert isinstance(result, Error)
    assert result.message == "Could not write the local movie cache"
    assert len(fake_remote.list_calls) == 1


class _DisagreeingStore:
    async def has_snapshot(self) -> bool:
        return True

    async def read_snapshot(self):
        raise NotFoundError("No movie list snapshot has been stored")

    async def replace_snapshot(self, snapshot, items) -> None:
        raise AssertionError("should not be called")


@pytest.mark.anyio
async def test_missing_snapshot_after_presence_check_is_fatal(fake_remote):
    repository = MovieRepository(local=_DisagreeingStore(), remote=fake_remote)

    with pytest.raises(NotFoundError):
        await repository.fetch_list()

    assert fake_remote.list_calls == []


@pytest.mark.anyio
async def test_details_always_come_from_network(repository, fake_remote, local_store):
    fake_remote.details[7] = RawDetails.model_validate(
        {"id": 7, "title": "Seven", "poster_path": "/d.jpg", "genres": None, "revenue": 1200}
    )

    first = await repository.fetch_details(7)
    second = await repository.fetch_details(7)

    assert isinstance(first, Success)
    assert first == second
    assert fake_remote.details_calls == [7, 7]
    assert first.value.genres == []
    assert "/t/p/w200//d.jpg" in first.value.poster_path
    assert first.value.revenue == 1200
    assert await local_store.has_snapshot() is False


@pytest.mark.anyio
async def test_details_failure_is_error_result(repository, fake_remote):
    result = await repository.fetch_details(404)

    assert isinstance(result, Error)
    assert result.message == "TMDB returned HTTP 404 for /movie/404"
    assert isinstance(result.cause, TransportError)
