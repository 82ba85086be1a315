"""Domain entity for an authorization scope, as nested inside a user."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class Scope:
    """An OAuth scope known to the Boruta server.

    Only ``id``, ``persisted`` and ``serialized`` are relied upon by
    ``User``; the remaining fields are carried for display.
    """

    id: Any = None
    name: str = ""
    label: str = ""
    public: bool = False
    persisted: bool = False

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "Scope":
        """Build a scope from a raw API payload, ignoring keys it does not use."""
        scope_id = raw.get("id")
        return cls(
            id=scope_id,
            name=raw.get("name") or "",
            label=raw.get("label") or "",
            public=bool(raw.get("public", False)),
            persisted=bool(raw.get("persisted", scope_id is not None)),
        )

    @property
    def serialized(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "label": self.label,
            "public": self.public,
        }


@dataclass
class ScopeWrapper:
    """Slot in a user's scope list; ``model`` is the wrapped scope."""

    model: Scope
