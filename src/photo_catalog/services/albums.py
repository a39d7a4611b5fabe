"""Album listing filtered by photo visibility."""

from dataclasses import dataclass

from photo_catalog.domain.models import Album, AlbumView, parse_album, parse_photo
from photo_catalog.domain.results import NotFoundError, Result, Success
from photo_catalog.services.policy import can_view
from photo_catalog.services.store import ALBUMS, PHOTOS, ContentStore


@dataclass
class AlbumService:
    """Application service for albums."""

    store: ContentStore

    def list_albums(self) -> list[Album]:
        """Return all albums ordered by id."""
        albums = [parse_album(row) for row in self.store.find_many(ALBUMS)]
        return sorted(albums, key=lambda album: album.id)

    def find_album_by_name(self, name: str) -> Result[Album]:
        """Look up an album by exact name, ignoring case."""
        wanted = name.strip().casefold()
        if wanted:
            rows = self.store.find_many(
                ALBUMS, lambda row: str(row.get("name") or "").casefold() == wanted
            )
            if rows:
                return Success(parse_album(min(rows, key=lambda row: int(row["id"]))))
        return NotFoundError("Album not found")

    def get_album_with_visible_photos(
        self, album_id: int, acting_user_id: int | None
    ) -> Result[AlbumView]:
        """Return the album with only the photos the acting user can view."""
        row = self.store.find_by_id(ALBUMS, album_id)
        if row is None:
            return NotFoundError("Album not found")

        rows = self.store.find_many(
            PHOTOS, lambda photo_row: album_id in (photo_row.get("albums") or [])
        )
        photos = [parse_photo(photo_row) for photo_row in rows]
        visible = [photo for photo in photos if can_view(photo, acting_user_id)]
        return Success(AlbumView(album=parse_album(row), photos=visible))
