"""Domain-specific exceptions, framework-independent."""

from typing import Any


class UserModelError(Exception):
    """Base for errors surfaced through ``User.errors``.

    ``errors`` is the structured ``{field: [messages]}`` payload, the same
    object that is mirrored onto the entity.
    """

    def __init__(self, errors: Any):
        self.errors = errors
        super().__init__(f"User rejected: {errors}")


class ValidationError(UserModelError):
    """Raised locally, before any request, when scope invariants are violated."""


class ServerRejection(UserModelError):
    """Raised when the server answers a save with an ``errors`` body."""

    def __init__(self, errors: Any, status_code: int):
        self.status_code = status_code
        super().__init__(errors)


class UnknownFieldError(Exception):
    """Raised when a raw payload carries a field the entity does not know."""

    def __init__(self, entity_type: str, field: str):
        self.entity_type = entity_type
        self.field = field
        super().__init__(f"{entity_type} has no field '{field}'")


class EntityNotBoundError(Exception):
    """Raised when a remote operation is attempted on an entity without an API client."""

    def __init__(self, entity_type: str, operation: str):
        self.entity_type = entity_type
        self.operation = operation
        super().__init__(f"Cannot {operation} {entity_type}: no API client bound")


class EntityNotPersistedError(Exception):
    """Raised when a remote operation needs an ID the entity does not have yet."""

    def __init__(self, entity_type: str, operation: str):
        self.entity_type = entity_type
        self.operation = operation
        super().__init__(f"Cannot {operation} {entity_type}: it has not been saved")
