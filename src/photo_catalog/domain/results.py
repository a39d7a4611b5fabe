"""Result values returned by catalog operations.

Expected failures are returned rather than raised. Every operation returns
either a ``Success`` wrapping its payload or one ``Failure`` subclass.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying the operation payload."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Base for expected failure outcomes."""

    message: str

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class ValidationError(Failure):
    """Input was malformed or empty."""


@dataclass(frozen=True)
class NotFoundError(Failure):
    """A referenced id does not exist."""


@dataclass(frozen=True)
class PermissionDeniedError(Failure):
    """The access policy denied the operation."""


@dataclass(frozen=True)
class DuplicateEmailError(Failure):
    """A user with the email is already registered."""


@dataclass(frozen=True)
class DuplicateTagError(Failure):
    """The photo already carries the tag."""


@dataclass(frozen=True)
class InvalidCredentialsError(Failure):
    """Unknown email or wrong password; the two are not told apart."""


Result = Success[T] | Failure


@dataclass(frozen=True)
class Ack:
    """Acknowledgement of a mutation on a photo."""

    photo_id: int
