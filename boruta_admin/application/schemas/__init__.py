from .user import UserEnvelope, UserListEnvelope

__all__ = [
    "UserEnvelope",
    "UserListEnvelope",
]
