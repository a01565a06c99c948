from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Error:
    message: str | None = None
    cause: BaseException | None = None


# Callers narrow with isinstance() on both arms and finish with assert_never().
Result = Union[Success[T], Error]


def error_from_exception(exc: BaseException) -> Error:
    message = str(exc) or None
    return Error(message=message, cause=exc.__cause__ or exc)
