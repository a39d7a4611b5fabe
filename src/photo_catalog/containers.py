"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from photo_catalog.adapters.logging_notifier import LoggingNotifier
from photo_catalog.adapters.supabase_connection import SupabaseConnection
from photo_catalog.adapters.supabase_content_store import SupabaseContentStore
from photo_catalog.adapters.supabase_identity_store import SupabaseIdentityStore
from photo_catalog.config import Settings
from photo_catalog.services.albums import AlbumService
from photo_catalog.services.auth import AuthService, build_password_context
from photo_catalog.services.comments import CommentService
from photo_catalog.services.photos import PhotoService
from photo_catalog.services.search import SearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    photo_service: PhotoService
    comment_service: CommentService
    search_service: SearchService
    album_service: AlbumService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container with an open store handle."""
    resolved_settings = settings or Settings()
    connection = SupabaseConnection(
        url=resolved_settings.supabase_url,
        service_key=resolved_settings.supabase_service_key,
    )
    connection.open()
    content_store = SupabaseContentStore(connection)
    identity_store = SupabaseIdentityStore(connection)
    notifier = (
        LoggingNotifier(identity_store)
        if resolved_settings.notifications_enabled
        else None
    )

    async def close_resources() -> None:
        connection.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(
            identity_store,
            build_password_context(resolved_settings.password_schemes),
        ),
        photo_service=PhotoService(content_store),
        comment_service=CommentService(content_store, notifier=notifier),
        search_service=SearchService(content_store),
        album_service=AlbumService(content_store),
        close_resources=close_resources,
    )
