"""HTTP implementation of the UserRepository port."""

import logging
from collections.abc import Mapping
from typing import Any

from boruta_admin.application.interfaces import UserRepository, UsersApi
from boruta_admin.application.schemas import UserEnvelope, UserListEnvelope
from boruta_admin.domain.entities import Ok, Redirected, User

logger = logging.getLogger(__name__)


class HttpUserRepository(UserRepository):
    """Loads users through a ``UsersApi`` and binds them to it."""

    def __init__(self, api: UsersApi):
        self._api = api

    async def all(self) -> Ok[list[User]] | Redirected:
        result = await self._api.get("/")
        if isinstance(result, Redirected):
            return result
        envelope = UserListEnvelope.model_validate(result.value)
        logger.debug("Fetched %d user(s)", len(envelope.data))
        return Ok([self.new(raw) for raw in envelope.data])

    async def get(self, user_id: Any) -> Ok[User] | Redirected:
        return await self._fetch_one(f"/{user_id}")

    async def current(self) -> Ok[User] | Redirected:
        return await self._fetch_one("/current")

    def new(self, params: Mapping[str, Any] | None = None) -> User:
        return User(params, api=self._api)

    async def _fetch_one(self, path: str) -> Ok[User] | Redirected:
        result = await self._api.get(path)
        if isinstance(result, Redirected):
            return result
        envelope = UserEnvelope.model_validate(result.value)
        return Ok(self.new(envelope.data))
