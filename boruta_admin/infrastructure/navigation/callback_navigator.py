"""Navigator adapters handed to the users API client."""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from boruta_admin.application.interfaces import Navigator

logger = logging.getLogger(__name__)


class CallbackNavigator(Navigator):
    """Forwards navigation to a host-supplied callable (sync or async)."""

    def __init__(self, callback: Callable[[str], Any]):
        self._callback = callback

    async def push(self, route_name: str) -> Any:
        logger.info("Navigating to '%s'", route_name)
        outcome = self._callback(route_name)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return outcome


class LoggingNavigator(Navigator):
    """Default for headless use: records the route in the log and returns its name."""

    async def push(self, route_name: str) -> Any:
        logger.warning("Request redirected to route '%s'", route_name)
        return route_name
