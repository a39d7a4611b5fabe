"""Access control decisions for photos.

Both predicates are total: a missing photo never grants access, and an
absent acting user is treated as unauthenticated.
"""

from photo_catalog.domain.models import Photo, Visibility


def can_view(photo: Photo | None, acting_user_id: int | None) -> bool:
    """Return True when the acting user may see the photo."""
    if photo is None:
        return False
    if photo.visibility is Visibility.PUBLIC:
        return True
    return acting_user_id is not None and acting_user_id == photo.owner


def can_edit(photo: Photo | None, acting_user_id: int | None) -> bool:
    """Return True when the acting user owns the photo."""
    if photo is None or acting_user_id is None:
        return False
    return acting_user_id == photo.owner
