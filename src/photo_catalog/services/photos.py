"""Photo metadata mutations guarded by the access policy."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from photo_catalog.domain.models import (
    Photo,
    PhotoDetails,
    PhotoPatch,
    Visibility,
    parse_album,
    parse_photo,
    parse_visibility,
)
from photo_catalog.domain.results import (
    Ack,
    DuplicateTagError,
    NotFoundError,
    PermissionDeniedError,
    Result,
    Success,
    ValidationError,
)
from photo_catalog.services.policy import can_edit, can_view
from photo_catalog.services.store import ALBUMS, PHOTOS, ContentStore

logger = logging.getLogger(__name__)


@dataclass
class PhotoService:
    """Application service for reading and editing photo metadata."""

    store: ContentStore

    def get_photo(self, photo_id: int) -> Photo | None:
        """Return a photo by id, if present."""
        row = self.store.find_by_id(PHOTOS, photo_id)
        if row is None:
            return None
        return parse_photo(row)

    def get_photo_details(
        self, photo_id: int, acting_user_id: int | None
    ) -> Result[PhotoDetails]:
        """Return a viewable photo with its album names resolved."""
        photo = self.get_photo(photo_id)
        if photo is None:
            return NotFoundError("Photo not found")
        if not can_view(photo, acting_user_id):
            return PermissionDeniedError("You do not have permission to view this photo")

        album_names = []
        for album_id in photo.albums:
            row = self.store.find_by_id(ALBUMS, album_id)
            if row is not None:
                album_names.append(parse_album(row).name)
        return Success(
            PhotoDetails(
                photo=photo,
                album_names=album_names,
                can_edit=can_edit(photo, acting_user_id),
            )
        )

    def create_photo(
        self, album_id: int, owner_id: int, filename: str
    ) -> Result[Photo]:
        """Register metadata for an uploaded file in an album."""
        if not filename.strip():
            return ValidationError("Filename is required")
        if self.store.find_by_id(ALBUMS, album_id) is None:
            return NotFoundError("Album not found")

        row = self.store.insert(
            PHOTOS,
            {
                "filename": filename,
                "title": "",
                "description": "",
                "tags": [],
                "albums": [album_id],
                "visibility": Visibility.PRIVATE.value,
                "owner": owner_id,
                "date": datetime.now(tz=UTC).isoformat(),
            },
        )
        return Success(parse_photo(row))

    def update_photo(
        self, photo_id: int, acting_user_id: int | None, patch: PhotoPatch
    ) -> Result[Ack]:
        """Apply the fields present in the patch; omitted fields stay unchanged."""
        photo = self.get_photo(photo_id)
        if photo is None:
            return NotFoundError("Photo not found")
        if not can_edit(photo, acting_user_id):
            logger.info("User %s denied edit on photo %s", acting_user_id, photo_id)
            return PermissionDeniedError("You do not have permission to edit this photo")

        updates: dict[str, object] = {}
        if patch.title is not None:
            updates["title"] = patch.title
        if patch.description is not None:
            updates["description"] = patch.description
        if patch.visibility is not None:
            visibility = parse_visibility(patch.visibility)
            if visibility is None:
                return ValidationError(
                    f"Visibility must be one of: {', '.join(v.value for v in Visibility)}"
                )
            updates["visibility"] = visibility.value

        if not updates:
            return Success(Ack(photo_id=photo_id))
        if not self.store.update_fields(PHOTOS, photo_id, updates):
            return NotFoundError("Photo not found")
        return Success(Ack(photo_id=photo_id))

    def add_tag(
        self, photo_id: int, acting_user_id: int | None, tag: str
    ) -> Result[Ack]:
        """Add a tag to a photo owned by the acting user."""
        cleaned = tag.strip()
        if not cleaned:
            return ValidationError("Tag cannot be empty")

        photo = self.get_photo(photo_id)
        if photo is None:
            return NotFoundError("Photo not found")
        if not can_edit(photo, acting_user_id):
            logger.info("User %s denied tagging photo %s", acting_user_id, photo_id)
            return PermissionDeniedError("You do not have permission to tag this photo")
        if cleaned in photo.tags:
            return DuplicateTagError(f"Photo already has tag '{cleaned}'")

        tags = [*photo.tags, cleaned]
        if not self.store.update_fields(PHOTOS, photo_id, {"tags": tags}):
            return NotFoundError("Photo not found")
        return Success(Ack(photo_id=photo_id))
