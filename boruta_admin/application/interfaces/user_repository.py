"""Abstract repository interface for users (collection-level operations)."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from boruta_admin.domain.entities import Ok, Redirected, User


class UserRepository(ABC):
    """Port for loading users, implemented in the infrastructure layer."""

    @abstractmethod
    async def all(self) -> Ok[list[User]] | Redirected:
        """Retrieve every user."""
        ...

    @abstractmethod
    async def get(self, user_id: Any) -> Ok[User] | Redirected:
        """Retrieve a single user by its ID."""
        ...

    @abstractmethod
    async def current(self) -> Ok[User] | Redirected:
        """Retrieve the user the access token belongs to."""
        ...

    @abstractmethod
    def new(self, params: Mapping[str, Any] | None = None) -> User:
        """Build an unsaved user that can later be saved through this repository."""
        ...
