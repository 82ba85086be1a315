from .api_result import Ok, Redirected
from .scope import Scope, ScopeWrapper
from .user import User, UserField, USER_DEFAULTS

__all__ = [
    "Ok",
    "Redirected",
    "Scope",
    "ScopeWrapper",
    "User",
    "UserField",
    "USER_DEFAULTS",
]
