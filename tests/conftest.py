"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from photo_catalog.config import Settings
from photo_catalog.containers import AppContainer
from photo_catalog.domain.models import UserRecord
from photo_catalog.services.albums import AlbumService
from photo_catalog.services.auth import AuthService, IdentityStore
from photo_catalog.services.comments import CommentService
from photo_catalog.services.notifications import Notifier
from photo_catalog.services.photos import PhotoService
from photo_catalog.services.search import SearchService
from photo_catalog.services.store import ALBUMS, COMMENTS, PHOTOS, ContentStore, Row


@dataclass
class InMemoryContentStore(ContentStore):
    """In-memory content store for tests; ids are assigned sequentially."""

    collections: dict[str, dict[int, Row]] = field(default_factory=dict)
    writes: list[tuple[str, str, int]] = field(default_factory=list)

    def _collection(self, name: str) -> dict[int, Row]:
        return self.collections.setdefault(name, {})

    def find_by_id(self, collection: str, record_id: int) -> Row | None:
        row = self._collection(collection).get(record_id)
        return dict(row) if row is not None else None

    def find_many(
        self,
        collection: str,
        predicate: Callable[[Row], bool] | None = None,
        equals: Row | None = None,
    ) -> list[Row]:
        rows = [dict(row) for _, row in sorted(self._collection(collection).items())]
        rows = [
            row
            for row in rows
            if all(row.get(column) == value for column, value in (equals or {}).items())
        ]
        if predicate is None:
            return rows
        return [row for row in rows if predicate(row)]

    def insert(self, collection: str, record: Row) -> Row:
        rows = self._collection(collection)
        next_id = record.get("id") or max(rows, default=0) + 1
        row = {**record, "id": next_id}
        rows[int(next_id)] = row
        self.writes.append(("insert", collection, int(next_id)))
        return dict(row)

    def update_fields(self, collection: str, record_id: int, fields: Row) -> bool:
        row = self._collection(collection).get(record_id)
        if row is None:
            return False
        row.update(fields)
        self.writes.append(("update", collection, record_id))
        return True


@dataclass
class InMemoryIdentityStore(IdentityStore):
    """In-memory identity store for tests."""

    users: dict[int, UserRecord] = field(default_factory=dict)

    def find_by_email(self, email: str) -> UserRecord | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def find_by_id(self, user_id: int) -> UserRecord | None:
        return self.users.get(user_id)

    def insert(self, name: str, email: str, password_hash: str) -> UserRecord:
        user = UserRecord(
            id=max(self.users, default=0) + 1,
            name=name,
            email=email,
            password_hash=password_hash,
        )
        self.users[user.id] = user
        return user


@dataclass
class RecordingNotifier(Notifier):
    """Notifier that records every call."""

    sent: list[tuple[int, str, str]] = field(default_factory=list)
    delivered: bool = True

    def notify(self, recipient_id: int, subject: str, body: str) -> bool:
        self.sent.append((recipient_id, subject, body))
        return self.delivered


@dataclass
class FailingNotifier(Notifier):
    """Notifier whose transport always blows up."""

    def notify(self, recipient_id: int, subject: str, body: str) -> bool:
        raise ConnectionError("mail server unreachable")


OWNER_ID = 7
OTHER_ID = 9


def add_album(store: InMemoryContentStore, album_id: int, name: str) -> Row:
    return store.insert(
        ALBUMS, {"id": album_id, "name": name, "description": f"{name} photos"}
    )


def add_photo(  # noqa: PLR0913
    store: InMemoryContentStore,
    photo_id: int,
    *,
    owner: int = OWNER_ID,
    visibility: str = "private",
    title: str = "",
    description: str = "",
    tags: list[str] | None = None,
    albums: list[int] | None = None,
) -> Row:
    return store.insert(
        PHOTOS,
        {
            "id": photo_id,
            "filename": f"photo{photo_id}.jpg",
            "title": title,
            "description": description,
            "tags": list(tags or []),
            "albums": list(albums or []),
            "visibility": visibility,
            "owner": owner,
            "date": "2025-01-15T10:00:00+00:00",
        },
    )


def add_comment_row(
    store: InMemoryContentStore, comment_id: int, photo_id: int, created_at: str
) -> Row:
    return store.insert(
        COMMENTS,
        {
            "id": comment_id,
            "photo_id": photo_id,
            "user_id": OTHER_ID,
            "username": "Bob",
            "text": f"comment {comment_id}",
            "created_at": created_at,
        },
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def content_store() -> InMemoryContentStore:
    return InMemoryContentStore()


@pytest.fixture
def identity_store() -> InMemoryIdentityStore:
    return InMemoryIdentityStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def catalog(content_store: InMemoryContentStore) -> InMemoryContentStore:
    """Two albums with a mix of public and private photos."""
    add_album(content_store, 1, "Vacation")
    add_album(content_store, 2, "Family")
    add_photo(
        content_store,
        5,
        visibility="private",
        title="Lake at dawn",
        tags=["sunset"],
        albums=[1],
    )
    add_photo(
        content_store,
        6,
        owner=OTHER_ID,
        visibility="public",
        title="Mountain",
        description="Hike above the lake",
        albums=[1, 2],
    )
    add_photo(
        content_store,
        8,
        owner=OTHER_ID,
        visibility="private",
        title="Secret lake",
        albums=[1],
    )
    return content_store


@pytest.fixture
def container(
    settings: Settings,
    catalog: InMemoryContentStore,
    identity_store: InMemoryIdentityStore,
    notifier: RecordingNotifier,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_service=AuthService(identity_store),
        photo_service=PhotoService(catalog),
        comment_service=CommentService(catalog, notifier=notifier),
        search_service=SearchService(catalog),
        album_service=AlbumService(catalog),
        close_resources=close_resources,
    )
