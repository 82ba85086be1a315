"""Abstract users API interface, the port for the HTTP adapter behind ``User``."""

from abc import ABC, abstractmethod
from typing import Any

from boruta_admin.domain.entities.api_result import Ok, Redirected


class UsersApi(ABC):
    """Port for authenticated access to ``{base_url}/api/users``.

    Paths are relative to the users collection. A 404 or 400 answer is
    returned as ``Redirected``; any other error status raises
    ``httpx.HTTPStatusError`` and transport failures raise their original
    ``httpx`` error.
    """

    @abstractmethod
    async def get(self, path: str) -> Ok[Any] | Redirected:
        ...

    @abstractmethod
    async def post(self, path: str, json: Any = None) -> Ok[Any] | Redirected:
        ...

    @abstractmethod
    async def patch(self, path: str, json: Any = None) -> Ok[Any] | Redirected:
        ...

    @abstractmethod
    async def delete(self, path: str) -> Ok[Any] | Redirected:
        ...
