"""Domain models for the photo catalog."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum


class Visibility(StrEnum):
    """Who may see a photo besides its owner."""

    PUBLIC = "public"
    PRIVATE = "private"


def parse_visibility(raw: object) -> Visibility | None:
    """Return the matching visibility, or None for anything else."""
    if not isinstance(raw, str):
        return None
    try:
        return Visibility(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the identity store."""

    id: int
    name: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class UserSummary:
    """Public view of a user; never carries the password hash."""

    id: int
    name: str
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserSummary":
        return cls(id=record.id, name=record.name, email=record.email)


@dataclass(frozen=True)
class Photo:
    """Photo metadata record."""

    id: int
    filename: str
    title: str
    description: str
    tags: tuple[str, ...]
    albums: tuple[int, ...]
    visibility: Visibility
    owner: int
    date: datetime | None


@dataclass(frozen=True)
class Album:
    """Named collection of photos."""

    id: int
    name: str
    description: str


@dataclass(frozen=True)
class Comment:
    """Comment left on a photo."""

    id: int
    photo_id: int
    user_id: int
    username: str
    text: str
    created_at: datetime


@dataclass(frozen=True)
class AlbumView:
    """Album together with the photos the caller is allowed to see."""

    album: Album
    photos: list[Photo] = field(default_factory=list)

    @property
    def photo_count(self) -> int:
        return len(self.photos)


@dataclass(frozen=True)
class PhotoDetails:
    """Photo with album names resolved and the caller's edit right."""

    photo: Photo
    album_names: list[str]
    can_edit: bool


@dataclass(frozen=True)
class PhotoPatch:
    """Partial update for a photo; None means leave the field unchanged."""

    title: str | None = None
    description: str | None = None
    visibility: str | None = None


def _parse_datetime(raw: object) -> datetime | None:
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def parse_photo(row: dict[str, object]) -> Photo:
    """Parse a photo row into a domain model.

    Raises ValueError when the stored visibility is not one of the known
    values; such a row is corrupt and is never coerced.
    """
    visibility = parse_visibility(row.get("visibility"))
    if visibility is None:
        raise ValueError(
            f"Photo {row.get('id')} has invalid visibility {row.get('visibility')!r}"
        )
    return Photo(
        id=int(row["id"]),
        filename=str(row.get("filename") or ""),
        title=str(row.get("title") or ""),
        description=str(row.get("description") or ""),
        tags=tuple(str(tag) for tag in row.get("tags") or []),
        albums=tuple(int(album_id) for album_id in row.get("albums") or []),
        visibility=visibility,
        owner=int(row["owner"]),
        date=_parse_datetime(row.get("date")),
    )


def parse_album(row: dict[str, object]) -> Album:
    """Parse an album row into a domain model."""
    return Album(
        id=int(row["id"]),
        name=str(row.get("name") or ""),
        description=str(row.get("description") or ""),
    )


def parse_comment(row: dict[str, object]) -> Comment:
    """Parse a comment row into a domain model."""
    created_at = _parse_datetime(row.get("created_at"))
    return Comment(
        id=int(row["id"]),
        photo_id=int(row["photo_id"]),
        user_id=int(row["user_id"]),
        username=str(row.get("username") or ""),
        text=str(row.get("text") or ""),
        created_at=created_at or datetime.min.replace(tzinfo=UTC),
    )


def parse_user(row: dict[str, object]) -> UserRecord:
    """Parse a user row into a domain model."""
    return UserRecord(
        id=int(row["id"]),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        password_hash=str(row.get("password_hash") or ""),
    )
