"""Comment creation and listing."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from photo_catalog.domain.models import Comment, Photo, parse_comment, parse_photo
from photo_catalog.domain.results import (
    NotFoundError,
    PermissionDeniedError,
    Result,
    Success,
    ValidationError,
)
from photo_catalog.services.notifications import Notifier
from photo_catalog.services.policy import can_view
from photo_catalog.services.store import COMMENTS, PHOTOS, ContentStore

logger = logging.getLogger(__name__)


@dataclass
class CommentService:
    """Application service for photo comments."""

    store: ContentStore
    notifier: Notifier | None = None

    def add_comment(
        self,
        photo_id: int,
        acting_user_id: int | None,
        username: str,
        text: str,
    ) -> Result[Comment]:
        """Post a comment on a photo the acting user can view."""
        cleaned = text.strip()
        if not cleaned:
            return ValidationError("Comment cannot be empty")

        row = self.store.find_by_id(PHOTOS, photo_id)
        if row is None:
            return NotFoundError("Photo not found")
        photo = parse_photo(row)
        if acting_user_id is None or not can_view(photo, acting_user_id):
            logger.info("User %s denied comment on photo %s", acting_user_id, photo_id)
            return PermissionDeniedError("You cannot comment on this photo")

        created = self.store.insert(
            COMMENTS,
            {
                "photo_id": photo_id,
                "user_id": acting_user_id,
                "username": username,
                "text": cleaned,
                "created_at": datetime.now(tz=UTC).isoformat(),
            },
        )
        comment = parse_comment(created)
        self._notify_owner(photo, comment)
        return Success(comment)

    def list_comments(self, photo_id: int) -> list[Comment]:
        """Return a photo's comments in creation order."""
        rows = self.store.find_many(COMMENTS, equals={"photo_id": photo_id})
        comments = [parse_comment(row) for row in rows]
        return sorted(comments, key=lambda comment: (comment.created_at, comment.id))

    def _notify_owner(self, photo: Photo, comment: Comment) -> None:
        if self.notifier is None or comment.user_id == photo.owner:
            return
        title = photo.title or photo.filename
        try:
            delivered = self.notifier.notify(
                photo.owner,
                f"New comment on {title}",
                f"{comment.username} commented on your photo:\n\n{comment.text}",
            )
        except Exception:
            logger.exception("Failed to notify owner of photo %s", photo.id)
            return
        if not delivered:
            logger.warning("Notification for photo %s was not delivered", photo.id)
