"""Pydantic models for API request payloads."""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Registration form payload."""

    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Login form payload."""

    email: str
    password: str


class PhotoUpdateRequest(BaseModel):
    """Partial photo update; omitted fields are left unchanged."""

    title: str | None = None
    description: str | None = None
    visibility: str | None = None


class TagRequest(BaseModel):
    """Tag to add to a photo."""

    tag: str


class CommentRequest(BaseModel):
    """Comment posted by the acting user."""

    text: str
