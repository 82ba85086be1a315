"""Dependency wiring: builds the users client stack from Settings."""

from boruta_admin.application.interfaces import Navigator, TokenStore
from boruta_admin.config import Settings, get_settings
from boruta_admin.infrastructure.http import HttpUserRepository, UsersApiClient
from boruta_admin.infrastructure.navigation.callback_navigator import LoggingNavigator
from boruta_admin.infrastructure.storage.token_store import JsonFileTokenStore


def get_users_api_client(
    *,
    settings: Settings | None = None,
    token_store: TokenStore | None = None,
    navigator: Navigator | None = None,
) -> UsersApiClient:
    """Provides a UsersApiClient; token store and navigator default from settings."""
    settings = settings or get_settings()
    return UsersApiClient(
        base_url=settings.boruta_base_url,
        token_store=token_store or JsonFileTokenStore(settings.token_file),
        navigator=navigator or LoggingNavigator(),
        token_key=settings.access_token_key,
        timeout=settings.http_timeout,
    )


def get_user_repository(api: UsersApiClient) -> HttpUserRepository:
    """Provides an HttpUserRepository bound to ``api``."""
    return HttpUserRepository(api)
