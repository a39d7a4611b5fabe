"""Registration and credential checks."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from passlib.context import CryptContext

from photo_catalog.domain.models import UserRecord, UserSummary
from photo_catalog.domain.results import (
    DuplicateEmailError,
    InvalidCredentialsError,
    PermissionDeniedError,
    Result,
    Success,
    ValidationError,
)

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid email or password"


class IdentityStore(Protocol):
    """Persistence interface for user records."""

    def find_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the exact email, if present."""

    def find_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with the id, if present."""

    def insert(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create a user and return it with its assigned id."""


def build_password_context(schemes: str = "pbkdf2_sha256") -> CryptContext:
    """Build a passlib context from a comma separated scheme list."""
    names = [scheme.strip() for scheme in schemes.split(",") if scheme.strip()]
    return CryptContext(schemes=names, deprecated="auto")


@dataclass
class AuthService:
    """Application service for registration and login."""

    identity_store: IdentityStore
    password_context: CryptContext = field(default_factory=build_password_context)

    def register(self, name: str, email: str, password: str) -> Result[UserSummary]:
        """Register a new user, storing only a salted hash of the password."""
        if not name.strip() or not email.strip() or not password:
            return ValidationError("All fields are required")

        if self.identity_store.find_by_email(email) is not None:
            return DuplicateEmailError("Email already registered")

        password_hash = self.password_context.hash(password)
        user = self.identity_store.insert(
            name=name, email=email, password_hash=password_hash
        )
        logger.info("Registered user %s", user.id)
        return Success(UserSummary.from_record(user))

    def login(self, email: str, password: str) -> Result[UserSummary]:
        """Verify credentials and return the authenticated user."""
        if not email.strip() or not password:
            return ValidationError("Email and password are required")

        user = self.identity_store.find_by_email(email)
        if user is None:
            # Equalize timing with the wrong-password path.
            self.password_context.dummy_verify()
            return InvalidCredentialsError(_INVALID_CREDENTIALS)

        if not self.password_context.verify(password, user.password_hash):
            return InvalidCredentialsError(_INVALID_CREDENTIALS)

        return Success(UserSummary.from_record(user))

    def get_user(self, user_id: int | None) -> Result[UserSummary]:
        """Resolve an acting user id to its summary."""
        if user_id is None:
            return PermissionDeniedError("Sign in required")
        user = self.identity_store.find_by_id(user_id)
        if user is None:
            return PermissionDeniedError("Unknown user")
        return Success(UserSummary.from_record(user))
