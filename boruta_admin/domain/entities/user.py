"""Domain entity for a Boruta user and its authorized scopes.

Payloads coming from the API are merged into a ``User`` field by field:
each known field stores the raw value, then applies its transform. The
set of fields is closed; an unknown key aborts the merge before anything
is written.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

import httpx

from boruta_admin.application.schemas.user import UserEnvelope
from boruta_admin.domain.entities.api_result import Ok, Redirected
from boruta_admin.domain.entities.scope import Scope, ScopeWrapper
from boruta_admin.domain.exceptions import (
    EntityNotBoundError,
    EntityNotPersistedError,
    ServerRejection,
    UnknownFieldError,
    ValidationError,
)

if TYPE_CHECKING:
    from boruta_admin.application.interfaces.users_api import UsersApi

logger = logging.getLogger(__name__)


class UserField(str, Enum):
    """Fields a user payload may carry."""

    ID = "id"
    EMAIL = "email"
    AUTHORIZED_SCOPES = "authorized_scopes"


Transform = Callable[[Any, Mapping[str, Any]], Any]


def _identity(value: Any, payload: Mapping[str, Any]) -> Any:
    return value


def _wrap_scopes(value: Any, payload: Mapping[str, Any]) -> list[ScopeWrapper]:
    return [ScopeWrapper(model=Scope.from_payload(raw)) for raw in value or []]


_FIELD_TRANSFORMS: dict[UserField, Transform] = {
    UserField.ID: _identity,
    UserField.EMAIL: _identity,
    UserField.AUTHORIZED_SCOPES: _wrap_scopes,
}

USER_DEFAULTS: dict[str, Any] = {
    "errors": None,
    "authorize_scopes": False,
    "authorized_scopes": [],
}

CANNOT_BE_EMPTY = "cannot be empty"
MUST_BE_UNIQUE = "must be unique"


class User:
    """A user of the Boruta admin API.

    ``api`` is the client used by ``save()`` and ``destroy()``; entities
    built by a repository are bound to its client. A single instance is
    expected to have at most one save or destroy in flight at a time.
    """

    id: Any
    email: str | None
    authorize_scopes: bool
    authorized_scopes: list[ScopeWrapper]
    errors: Any

    def __init__(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        api: UsersApi | None = None,
    ):
        self._api = api
        self.id = None
        self.email = None
        self.errors = USER_DEFAULTS["errors"]
        self.authorize_scopes = USER_DEFAULTS["authorize_scopes"]
        self.authorized_scopes = list(USER_DEFAULTS["authorized_scopes"])
        self.assign(params or {})

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"

    def assign(self, payload: Mapping[str, Any]) -> None:
        """Merge a raw payload into this user.

        Fields named in ``payload`` are overwritten; others are left alone.
        All transforms run before any field is written, so a payload that
        fails to merge leaves the user as it was.

        Raises:
            UnknownFieldError: If a key is not a ``UserField``.
        """
        fields: list[tuple[UserField, Any]] = []
        for key, raw_value in payload.items():
            try:
                fields.append((UserField(key), raw_value))
            except ValueError:
                raise UnknownFieldError("User", key) from None

        values = {
            field: _FIELD_TRANSFORMS[field](raw_value, payload)
            for field, raw_value in fields
        }
        for field, value in values.items():
            setattr(self, field.value, value)

    @property
    def serialized(self) -> dict[str, Any]:
        """Wire form sent on save; ``email`` and display flags are left out."""
        return {
            "id": self.id,
            "authorized_scopes": [
                wrapper.model.serialized for wrapper in self.authorized_scopes
            ],
        }

    def validate(self) -> None:
        """Check the scope list, stopping at the first offending scope.

        Raises:
            ValidationError: If a scope is not persisted or appears twice.
        """
        for wrapper in self.authorized_scopes:
            scope = wrapper.model
            if not scope.persisted:
                self._fail_validation(CANNOT_BE_EMPTY)
            same_id = [w for w in self.authorized_scopes if w.model.id == scope.id]
            if len(same_id) > 1:
                self._fail_validation(MUST_BE_UNIQUE)
        self.errors = None

    def _fail_validation(self, message: str) -> None:
        errors = {UserField.AUTHORIZED_SCOPES.value: [message]}
        self.errors = errors
        raise ValidationError(errors)

    async def save(self) -> Ok[User] | Redirected:
        """Validate, then create or update the user on the server.

        On success the response payload is merged back into ``self``.

        Raises:
            ValidationError: Local validation failed; nothing was sent.
            ServerRejection: The server answered with an ``errors`` body.
            pydantic.ValidationError: A success body is not ``{"data": {...}}``.
            httpx.HTTPError: Any other failure, unchanged.
        """
        api = self._require_api("save")
        self.errors = None
        self.validate()

        body = {"user": self.serialized}
        try:
            if self.id is not None:
                result = await api.patch(f"/{self.id}", json=body)
            else:
                result = await api.post("/", json=body)
        except httpx.HTTPStatusError as exc:
            errors = _errors_from(exc.response)
            if errors is None:
                raise
            logger.info(
                "User %s rejected by server (%d): %s",
                self.id, exc.response.status_code, errors,
            )
            self.errors = errors
            raise ServerRejection(errors, exc.response.status_code) from exc

        if isinstance(result, Redirected):
            return result

        envelope = UserEnvelope.model_validate(result.value)
        self.assign(envelope.data)
        return Ok(self)

    async def destroy(self) -> Ok[Any] | Redirected:
        """Delete the user on the server; local state is left as is."""
        api = self._require_api("destroy")
        if self.id is None:
            raise EntityNotPersistedError("User", "destroy")
        return await api.delete(f"/{self.id}")

    def _require_api(self, operation: str) -> UsersApi:
        if self._api is None:
            raise EntityNotBoundError("User", operation)
        return self._api


def _errors_from(response: httpx.Response) -> Any:
    """Return the ``errors`` member of an error body, or None if absent."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    return body.get("errors")
