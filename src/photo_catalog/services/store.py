"""Persistence interface for catalog content."""

from collections.abc import Callable
from typing import Protocol

PHOTOS = "photos"
ALBUMS = "albums"
COMMENTS = "comments"

Row = dict[str, object]


class ContentStore(Protocol):
    """Document store holding photos, albums and comments keyed by numeric id."""

    def find_by_id(self, collection: str, record_id: int) -> Row | None:
        """Return the record with the id, if present."""

    def find_many(
        self,
        collection: str,
        predicate: Callable[[Row], bool] | None = None,
        equals: Row | None = None,
    ) -> list[Row]:
        """Return every record whose columns equal ``equals`` and that
        satisfies the predicate; no filter means all records."""

    def insert(self, collection: str, record: Row) -> Row:
        """Insert a record and return it with its store-assigned id."""

    def update_fields(self, collection: str, record_id: int, fields: Row) -> bool:
        """Set the given fields on a record; return True when it matched."""
