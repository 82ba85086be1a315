"""Pydantic DTOs for the ``{"data": ...}`` envelopes of the users API."""

from typing import Any

from pydantic import BaseModel


class UserEnvelope(BaseModel):
    """Single-user response: ``{"data": rawUser}``."""

    data: dict[str, Any]


class UserListEnvelope(BaseModel):
    """Collection response: ``{"data": [rawUser, ...]}``."""

    data: list[dict[str, Any]]
