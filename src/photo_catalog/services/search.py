"""Free-text photo search."""

from dataclasses import dataclass

from photo_catalog.domain.models import Photo, parse_photo
from photo_catalog.services.policy import can_view
from photo_catalog.services.store import PHOTOS, ContentStore, Row


def _matches(row: Row, needle: str) -> bool:
    for key in ("title", "description"):
        value = row.get(key)
        if isinstance(value, str) and needle in value.lower():
            return True
    return any(needle in str(tag).lower() for tag in row.get("tags") or [])


@dataclass
class SearchService:
    """Case-insensitive substring search over photo metadata."""

    store: ContentStore

    def search(self, query: str, acting_user_id: int | None) -> list[Photo]:
        """Return photos matching the query that the acting user can view."""
        if not query.strip():
            return []
        needle = query.lower()
        rows = self.store.find_many(PHOTOS, lambda row: _matches(row, needle))
        photos = [parse_photo(row) for row in rows]
        return [photo for photo in photos if can_view(photo, acting_user_id)]
