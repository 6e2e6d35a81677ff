"""
Result values returned by service operations.

Services never raise for an expected miss; they return one of the
values below and leave the translation into status codes, bodies and
headers to the API layer.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Created(Generic[T]):
    """A new resource; ``resource_id`` is used to build its location."""

    value: T
    resource_id: int


@dataclass(frozen=True)
class NotFound:
    resource_id: int


ServiceResult = Union[Ok[T], Created[T], NotFound]
