"""Supabase-backed identity store."""

from dataclasses import dataclass

from photo_catalog.adapters.supabase_connection import SupabaseConnection
from photo_catalog.domain.models import UserRecord, parse_user
from photo_catalog.services.auth import IdentityStore

_USER_COLUMNS = "id, name, email, password_hash"


@dataclass
class SupabaseIdentityStore(IdentityStore):
    """Supabase implementation for user persistence."""

    connection: SupabaseConnection

    def find_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the exact email, if present."""
        response = (
            self.connection.client.table("users")
            .select(_USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return parse_user(response.data[0])
        return None

    def find_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with the id, if present."""
        response = (
            self.connection.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return parse_user(response.data[0])
        return None

    def insert(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create a user row and return it."""
        response = (
            self.connection.client.table("users")
            .insert({"name": name, "email": email, "password_hash": password_hash})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return parse_user(response.data[0])
