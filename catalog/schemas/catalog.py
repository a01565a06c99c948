from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ListItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str | None = None
    overview: str | None = None
    popularity: float | None = None
    poster_path: str | None = None
    release_date: str | None = None
    vote_average: float | None = None


class ListSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = 1
    total_pages: int
    total_results: int
    items: list[ListItem] = Field(default_factory=list)


class Genre(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str | None = None


class Details(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    imdb_id: str | None = None
    homepage: str | None = None
    overview: str | None = None
    poster_path: str | None = None
    title: str | None = None
    revenue: int | None = None
    status: str | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    genres: list[Genre] = Field(default_factory=list)

    tagline: str | None = None
    runtime: int | None = None
    release_date: str | None = None
