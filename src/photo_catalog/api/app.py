"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TypeVar

from fastapi import FastAPI, Header, HTTPException, Request, status

from photo_catalog.api.models import (
    CommentRequest,
    LoginRequest,
    PhotoUpdateRequest,
    RegisterRequest,
    TagRequest,
)
from photo_catalog.app_logging import configure_logging
from photo_catalog.containers import AppContainer
from photo_catalog.domain.models import Album, Comment, Photo, PhotoPatch, UserSummary
from photo_catalog.domain.results import (
    DuplicateEmailError,
    DuplicateTagError,
    Failure,
    InvalidCredentialsError,
    NotFoundError,
    PermissionDeniedError,
    Result,
    ValidationError,
)

T = TypeVar("T")

_FAILURE_STATUS: dict[type[Failure], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateEmailError: status.HTTP_409_CONFLICT,
    DuplicateTagError: status.HTTP_409_CONFLICT,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/users/register", status_code=status.HTTP_201_CREATED)
    async def register(payload: RegisterRequest, request: Request) -> dict[str, object]:
        """Register a new user."""
        result = _container(request).auth_service.register(
            payload.name, payload.email, payload.password
        )
        return {"user": _serialize_user(_unwrap(result))}

    @app.post("/users/login")
    async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
        """Check credentials and return the user summary."""
        result = _container(request).auth_service.login(
            payload.email, payload.password
        )
        return {"user": _serialize_user(_unwrap(result))}

    @app.get("/albums")
    async def list_albums(request: Request) -> dict[str, object]:
        """Return every album."""
        albums = _container(request).album_service.list_albums()
        return {"albums": [_serialize_album(album) for album in albums]}

    @app.get("/albums/{album_id}")
    async def album_detail(
        album_id: int,
        request: Request,
        x_user_id: int | None = Header(default=None),
    ) -> dict[str, object]:
        """Return an album with the photos visible to the caller."""
        view = _unwrap(
            _container(request).album_service.get_album_with_visible_photos(
                album_id, x_user_id
            )
        )
        return {
            "album": _serialize_album(view.album),
            "photos": [_serialize_photo(photo) for photo in view.photos],
            "photo_count": view.photo_count,
        }

    @app.get("/photos/{photo_id}")
    async def photo_detail(
        photo_id: int,
        request: Request,
        x_user_id: int | None = Header(default=None),
    ) -> dict[str, object]:
        """Return a photo the caller can view, with its comments."""
        container = _container(request)
        details = _unwrap(
            container.photo_service.get_photo_details(photo_id, x_user_id)
        )
        comments = container.comment_service.list_comments(photo_id)
        return {
            "photo": _serialize_photo(details.photo),
            "albums": details.album_names,
            "can_edit": details.can_edit,
            "comments": [_serialize_comment(comment) for comment in comments],
        }

    @app.patch("/photos/{photo_id}")
    async def update_photo(
        photo_id: int,
        payload: PhotoUpdateRequest,
        request: Request,
        x_user_id: int | None = Header(default=None),
    ) -> dict[str, object]:
        """Apply a partial update to a photo owned by the caller."""
        patch = PhotoPatch(
            title=payload.title,
            description=payload.description,
            visibility=payload.visibility,
        )
        ack = _unwrap(
            _container(request).photo_service.update_photo(photo_id, x_user_id, patch)
        )
        return {"photo_id": ack.photo_id, "status": "updated"}

    @app.post("/photos/{photo_id}/tags")
    async def add_tag(
        photo_id: int,
        payload: TagRequest,
        request: Request,
        x_user_id: int | None = Header(default=None),
    ) -> dict[str, object]:
        """Add a tag to a photo owned by the caller."""
        ack = _unwrap(
            _container(request).photo_service.add_tag(photo_id, x_user_id, payload.tag)
        )
        return {"photo_id": ack.photo_id, "status": "tagged"}

    @app.get("/photos/{photo_id}/comments")
    async def list_comments(
        photo_id: int,
        request: Request,
        x_user_id: int | None = Header(default=None),
    ) -> dict[str, object]:
        """Return comments on a photo the caller can view."""
        container = _container(request)
        _unwrap(container.photo_service.get_photo_details(photo_id, x_user_id))
        comments = container.comment_service.list_comments(photo_id)
        return {"comments": [_serialize_comment(comment) for comment in comments]}

    @app.post("/photos/{photo_id}/comments", status_code=status.HTTP_201_CREATED)
    async def add_comment(
        photo_id: int,
        payload: CommentRequest,
        request: Request,
        x_user_id: int | None = Header(default=None),
    ) -> dict[str, object]:
        """Post a comment as the caller, under the caller's registered name."""
        container = _container(request)
        user = _unwrap(container.auth_service.get_user(x_user_id))
        comment = _unwrap(
            container.comment_service.add_comment(
                photo_id, user.id, user.name, payload.text
            )
        )
        return {"comment": _serialize_comment(comment)}

    @app.get("/search")
    async def search(
        request: Request,
        q: str = "",
        x_user_id: int | None = Header(default=None),
    ) -> dict[str, object]:
        """Search photo metadata visible to the caller."""
        photos = _container(request).search_service.search(q, x_user_id)
        return {
            "query": q,
            "results": [_serialize_photo(photo) for photo in photos],
        }

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _unwrap(result: Result[T]) -> T:
    """Return the success payload or raise the matching HTTP error."""
    if isinstance(result, Failure):
        raise HTTPException(
            status_code=_FAILURE_STATUS.get(
                type(result), status.HTTP_500_INTERNAL_SERVER_ERROR
            ),
            detail=result.message,
        )
    return result.value


def _serialize_user(user: UserSummary) -> dict[str, object]:
    return {"id": user.id, "name": user.name, "email": user.email}


def _serialize_album(album: Album) -> dict[str, object]:
    return {"id": album.id, "name": album.name, "description": album.description}


def _serialize_photo(photo: Photo) -> dict[str, object]:
    return {
        "id": photo.id,
        "filename": photo.filename,
        "title": photo.title,
        "description": photo.description,
        "tags": list(photo.tags),
        "albums": list(photo.albums),
        "visibility": photo.visibility.value,
        "owner": photo.owner,
        "date": photo.date.isoformat() if photo.date else None,
    }


def _serialize_comment(comment: Comment) -> dict[str, object]:
    return {
        "id": comment.id,
        "photo_id": comment.photo_id,
        "user_id": comment.user_id,
        "username": comment.username,
        "text": comment.text,
        "created_at": comment.created_at.isoformat(),
    }
