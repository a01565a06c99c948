from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query

from catalog.api.deps import get_repository
from catalog.api.http_errors import unwrap_result
from catalog.schemas.catalog import Details, ListSnapshot
from catalog.services.repository import MovieRepository

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=ListSnapshot)
async def list_movies_route(
    refresh: bool = Query(False),
    repository: MovieRepository = Depends(get_repository),
):
    result = await repository.fetch_list(force_refresh=refresh)
    return unwrap_result(result, default_detail="Could not load the movie list")


@router.get("/{movie_id}", response_model=Details)
async def movie_details_route(
    movie_id: int = Path(..., ge=1),
    repository: MovieRepository = Depends(get_repository),
):
    result = await repository.fetch_details(movie_id)
    return unwrap_result(result, default_detail="Could not load movie details")
