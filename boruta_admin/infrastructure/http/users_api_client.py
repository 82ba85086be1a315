"""Boruta users API client, implementing the UsersApi interface.

Talks to ``{base_url}/api/users`` over httpx with a bearer token read
once, at construction, from a token store. Every response passes through
``_intercept``: 404 and 400 answers are turned into navigations to the
``not-found`` and ``bad-request`` routes, other error statuses raise the
original ``httpx.HTTPStatusError``.
"""

import logging
from typing import Any

import httpx

from boruta_admin.application.interfaces import Navigator, TokenStore, UsersApi
from boruta_admin.domain.entities import Ok, Redirected

logger = logging.getLogger(__name__)

USERS_PATH = "/api/users"
ACCESS_TOKEN_KEY = "access_token"

ROUTE_NOT_FOUND = "not-found"
ROUTE_BAD_REQUEST = "bad-request"

_REDIRECT_ROUTES: dict[int, str] = {
    404: ROUTE_NOT_FOUND,
    400: ROUTE_BAD_REQUEST,
}


class UsersApiClient(UsersApi):
    """Infrastructure adapter for the Boruta admin users API.

    Owns one ``httpx.AsyncClient``; close it with ``aclose()`` or use the
    client as an async context manager. The token is never refreshed: a
    rotated token needs a new client.
    """

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        navigator: Navigator,
        *,
        token_key: str = ACCESS_TOKEN_KEY,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = f"{base_url.rstrip('/')}{USERS_PATH}"
        self._navigator = navigator

        access_token = token_store.get_item(token_key)
        if access_token is None:
            logger.warning("No '%s' in token store; requests will be unauthenticated", token_key)
            access_token = ""

        self._http_client = self._build(access_token, timeout, transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _build(
        self,
        access_token: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None,
    ) -> httpx.AsyncClient:
        """Create the underlying client bound to the users collection."""
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._get_headers(access_token),
            timeout=timeout,
            transport=transport,
        )

    @staticmethod
    def _get_headers(access_token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        }

    async def get(self, path: str) -> Ok[Any] | Redirected:
        return await self._request("GET", path)

    async def post(self, path: str, json: Any = None) -> Ok[Any] | Redirected:
        return await self._request("POST", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Ok[Any] | Redirected:
        return await self._request("PATCH", path, json=json)

    async def delete(self, path: str) -> Ok[Any] | Redirected:
        return await self._request("DELETE", path)

    async def _request(
        self, method: str, path: str, json: Any = None
    ) -> Ok[Any] | Redirected:
        logger.debug("%s %s%s", method, self._base_url, path)
        response = await self._http_client.request(method, path, json=json)
        return await self._intercept(response)

    async def _intercept(self, response: httpx.Response) -> Ok[Any] | Redirected:
        """Route 404/400 to navigation, raise other errors, decode the rest."""
        route = _REDIRECT_ROUTES.get(response.status_code)
        if route is not None:
            logger.info(
                "%s %s answered %d, navigating to '%s'",
                response.request.method,
                response.request.url,
                response.status_code,
                route,
            )
            navigation = await self._navigator.push(route)
            return Redirected(route=route, navigation=navigation)

        response.raise_for_status()
        return Ok(self._decode(response))

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        return response.json()

    async def aclose(self) -> None:
        await self._http_client.aclose()

    async def __aenter__(self) -> "UsersApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
