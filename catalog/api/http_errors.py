from __future__ import annotations

from typing import TypeVar, assert_never

from fastapi import HTTPException

from catalog.core.result import Error, Result, Success

T = TypeVar("T")

_DEFAULT_UPSTREAM_DETAIL = "Movie catalog is unavailable"


def result_error(
    err: Error,
    *,
    status_code: int = 502,
    default_detail: str = _DEFAULT_UPSTREAM_DETAIL,
) -> HTTPException:
    return HTTPException(status_code=status_code, detail=err.message or default_detail)


def unwrap_result(result: Result[T], *, default_detail: str = _DEFAULT_UPSTREAM_DETAIL) -> T:
    if isinstance(result, Success):
        return result.value
    if isinstance(result, Error):
        raise result_error(result, default_detail=default_detail)
    assert_never(result)
