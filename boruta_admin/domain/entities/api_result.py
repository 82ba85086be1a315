"""Outcome of a call made through the users API.

A request either yields data (``Ok``) or is diverted to a navigation route
(``Redirected``) on 404/400. Failures are raised, never returned.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful response, carrying the decoded body or the built entity."""

    value: T


@dataclass(frozen=True)
class Redirected:
    """The response was intercepted and turned into a navigation.

    ``navigation`` holds whatever the navigator returned for ``route``.
    """

    route: str
    navigation: Any = None
