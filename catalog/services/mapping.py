from __future__ import annotations

from dataclasses import dataclass

from catalog.models.movie_list import SNAPSHOT_SLOT, MovieListItem, MovieListSnapshot
from catalog.schemas.catalog import Details, Genre, ListItem, ListSnapshot
from catalog.schemas.tmdb import RawDetails, RawListPage, RawMovieItem

DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
LIST_POSTER_SIZE = "original"
DETAILS_POSTER_SIZE = "w200"


@dataclass
class StoredSnapshot:
    snapshot: MovieListSnapshot
    items: list[MovieListItem]


def image_url(path: str | None, *, size: str, base_url: str = DEFAULT_IMAGE_BASE_URL) -> str:
    # A missing path still yields a URL, with an empty trailing segment.
    return f"{base_url}/{size}/{path or ''}"


def _first_of_each_id(results: list[RawMovieItem]) -> list[RawMovieItem]:
    # TMDB occasionally repeats an entry within a page; keep where it first appears.
    seen: set[int] = set()
    out: list[RawMovieItem] = []
    for item in results:
        if item.id in seen:
            continue
        seen.add(item.id)
        out.append(item)
    return out


def raw_list_to_storage(raw: RawListPage) -> tuple[MovieListSnapshot, list[MovieListItem]]:
    snapshot = MovieListSnapshot(
        slot=SNAPSHOT_SLOT,
        page=raw.page,
        total_pages=raw.total_pages,
        total_results=raw.total_results,
    )
    items = [
        MovieListItem(
            id=item.id,
            position=position,
            page=raw.page,
            title=item.title,
            original_title=item.original_title,
            original_language=item.original_language,
            overview=item.overview,
            popularity=item.popularity,
            poster_path=item.poster_path,
            backdrop_path=item.backdrop_path,
            release_date=item.release_date,
            genre_ids=list(item.genre_ids) if item.genre_ids is not None else None,
            adult=item.adult,
            video=item.video,
            vote_average=item.vote_average,
            vote_count=item.vote_count,
        )
        for position, item in enumerate(_first_of_each_id(raw.results))
    ]
    return snapshot, items


def stored_to_list_snapshot(
    stored: StoredSnapshot,
    *,
    image_base_url: str = DEFAULT_IMAGE_BASE_URL,
) -> ListSnapshot:
    return ListSnapshot(
        page=stored.snapshot.page,
        total_pages=stored.snapshot.total_pages,
        total_results=stored.snapshot.total_results,
        items=[
            ListItem(
                id=row.id,
                title=row.title,
                overview=row.overview,
                popularity=row.popularity,
                poster_path=image_url(row.poster_path, size=LIST_POSTER_SIZE, base_url=image_base_url),
                release_date=row.release_date,
                vote_average=row.vote_average,
            )
            for row in stored.items
        ],
    )


def raw_details_to_details(
    raw: RawDetails,
    *,
    image_base_url: str = DEFAULT_IMAGE_BASE_URL,
) -> Details:
    return Details(
        id=raw.id,
        imdb_id=raw.imdb_id,
        homepage=raw.homepage,
        overview=raw.overview,
        poster_path=image_url(raw.poster_path, size=DETAILS_POSTER_SIZE, base_url=image_base_url),
        title=raw.title,
        revenue=raw.revenue,
        status=raw.status,
        vote_average=raw.vote_average,
        vote_count=raw.vote_count,
        genres=[Genre(id=g.id, name=g.name) for g in raw.genres or []],
        tagline=raw.tagline,
        runtime=raw.runtime,
        release_date=raw.release_date,
    )
