"""Boruta users API infrastructure package."""

from .user_repository import HttpUserRepository
from .users_api_client import UsersApiClient

__all__ = ["HttpUserRepository", "UsersApiClient"]
