from .navigator import Navigator
from .token_store import TokenStore
from .user_repository import UserRepository
from .users_api import UsersApi

__all__ = [
    "Navigator",
    "TokenStore",
    "UserRepository",
    "UsersApi",
]
