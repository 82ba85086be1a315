"""Abstract navigator, the port for the routing subsystem hit on 404/400 answers."""

from abc import ABC, abstractmethod
from typing import Any


class Navigator(ABC):
    """Port that moves the client to a named route."""

    @abstractmethod
    async def push(self, route_name: str) -> Any:
        """Navigate to ``route_name`` and return the navigation outcome."""
        ...
