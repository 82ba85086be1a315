"""Abstract key-value store holding client credentials."""

from abc import ABC, abstractmethod


class TokenStore(ABC):
    """Port for the string store the access token is read from."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None when absent."""
        ...
