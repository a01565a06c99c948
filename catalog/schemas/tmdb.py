from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RawMovieItem(_Wire):
    id: int
    adult: bool | None = None
    backdrop_path: str | None = None
    genre_ids: list[int] | None = None
    original_language: str | None = None
    original_title: str | None = None
    overview: str | None = None
    popularity: float | None = None
    poster_path: str | None = None
    release_date: str | None = None
    title: str | None = None
    video: bool | None = None
    vote_average: float | None = None
    vote_count: int | None = None


class RawListPage(_Wire):
    page: int = 1
    results: list[RawMovieItem] = Field(default_factory=list)
    total_pages: int
    total_results: int


class RawGenre(_Wire):
    id: int
    name: str | None = None


class RawCollection(_Wire):
    id: int
    name: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None


class RawProductionCompany(_Wire):
    id: int
    logo_path: str | None = None
    name: str | None = None
    origin_country: str | None = None


class RawProductionCountry(_Wire):
    iso_3166_1: str | None = None
    name: str | None = None


class RawSpokenLanguage(_Wire):
    english_name: str | None = None
    iso_639_1: str | None = None
    name: str | None = None


class RawDetails(_Wire):
    id: int
    adult: bool | None = None
    backdrop_path: str | None = None
    belongs_to_collection: RawCollection | None = None
    budget: int | None = None
    genres: list[RawGenre] | None = None
    homepage: str | None = None
    imdb_id: str | None = None
    origin_country: list[str] | None = None
    original_language: str | None = None
    original_title: str | None = None
    overview: str | None = None
    popularity: float | None = None
    poster_path: str | None = None
    production_companies: list[RawProductionCompany] | None = None
    production_countries: list[RawProductionCountry] | None = None
    release_date: str | None = None
    revenue: int | None = None
    runtime: int | None = None
    spoken_languages: list[RawSpokenLanguage] | None = None
    status: str | None = None
    tagline: str | None = None
    title: str | None = None
    video: bool | None = None
    vote_average: float | None = None
    vote_count: int | None = None
