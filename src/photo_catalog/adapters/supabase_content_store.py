"""Supabase-backed content store for photos, albums and comments."""

from collections.abc import Callable
from dataclasses import dataclass

from photo_catalog.adapters.supabase_connection import SupabaseConnection
from photo_catalog.services.store import ContentStore, Row


@dataclass
class SupabaseContentStore(ContentStore):
    """Supabase implementation of the content store.

    Tables use identity columns for ``id`` so inserts receive sequential ids
    from the database.
    """

    connection: SupabaseConnection
    page_size: int = 1000

    def find_by_id(self, collection: str, record_id: int) -> Row | None:
        """Return the row with the id, if present."""
        response = (
            self.connection.client.table(collection)
            .select("*")
            .eq("id", record_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return dict(response.data[0])

    def find_many(
        self,
        collection: str,
        predicate: Callable[[Row], bool] | None = None,
        equals: Row | None = None,
    ) -> list[Row]:
        """Return rows matching the filters and predicate, ordered by id.

        PostgREST caps each response at its max-rows setting, so rows are
        fetched page by page until a short page comes back.
        """
        rows: list[Row] = []
        start = 0
        while True:
            query = self.connection.client.table(collection).select("*")
            for column, value in (equals or {}).items():
                query = query.eq(column, value)
            response = (
                query.order("id").range(start, start + self.page_size - 1).execute()
            )
            page = response.data or []
            rows.extend(dict(row) for row in page)
            if len(page) < self.page_size:
                break
            start += self.page_size
        if predicate is None:
            return rows
        return [row for row in rows if predicate(row)]

    def insert(self, collection: str, record: Row) -> Row:
        """Insert a row and return it with its assigned id."""
        response = self.connection.client.table(collection).insert(record).execute()
        if not response.data:
            raise RuntimeError(f"Failed to insert into {collection}")
        return dict(response.data[0])

    def update_fields(self, collection: str, record_id: int, fields: Row) -> bool:
        """Update the given columns; return True when a row matched."""
        response = (
            self.connection.client.table(collection)
            .update(fields)
            .eq("id", record_id)
            .execute()
        )
        return bool(response.data)
