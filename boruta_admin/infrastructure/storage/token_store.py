"""Token store adapters: where the client looks up its access token.

Layout of the JSON file read by ``JsonFileTokenStore``:
    {"access_token": "<bearer token>", ...}
"""

import json
import logging
from pathlib import Path

from boruta_admin.application.interfaces import TokenStore

logger = logging.getLogger(__name__)


class InMemoryTokenStore(TokenStore):
    """Dict-backed store, for scripts and tests."""

    def __init__(self, items: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileTokenStore(TokenStore):
    """Reads tokens from a JSON object on disk.

    The file is read on every lookup; a missing or malformed file means no
    token is available.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def get_item(self, key: str) -> str | None:
        if not self._path.exists():
            logger.warning("Token file not found: %s", self._path)
            return None
        try:
            items = json.loads(self._path.read_text("utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read token file %s: %s", self._path, exc)
            return None
        if not isinstance(items, dict):
            logger.warning("Token file %s does not hold a JSON object", self._path)
            return None
        value = items.get(key)
        return value if isinstance(value, str) else None
