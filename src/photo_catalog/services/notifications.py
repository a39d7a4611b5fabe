"""Notification interface used after comments are posted."""

from typing import Protocol


class Notifier(Protocol):
    """Delivers a short message to a user."""

    def notify(self, recipient_id: int, subject: str, body: str) -> bool:
        """Send a notification and return True when it was accepted."""
