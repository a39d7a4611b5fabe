"""Explicitly managed Supabase client handle."""

import logging
from dataclasses import dataclass, field

from supabase import Client, create_client

logger = logging.getLogger(__name__)


@dataclass
class SupabaseConnection:
    """Owns the Supabase client for the lifetime of the application."""

    url: str
    service_key: str
    _client: Client | None = field(default=None, init=False, repr=False)

    def open(self) -> Client:
        """Create the client if needed and return it."""
        if self._client is None:
            self._client = create_client(self.url, self.service_key)
            logger.info("Opened Supabase connection to %s", self.url)
        return self._client

    def close(self) -> None:
        """Drop the client; later use of ``client`` fails until reopened."""
        if self._client is None:
            return
        self._client = None
        logger.info("Closed Supabase connection to %s", self.url)

    @property
    def is_open(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> Client:
        if self._client is None:
            raise RuntimeError("Supabase connection is not open")
        return self._client
