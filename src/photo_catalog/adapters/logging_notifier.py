"""Notifier that writes messages to the application log."""

import logging
from dataclasses import dataclass

from photo_catalog.services.auth import IdentityStore
from photo_catalog.services.notifications import Notifier

logger = logging.getLogger(__name__)


@dataclass
class LoggingNotifier(Notifier):
    """Logs an email-style notification addressed to the recipient."""

    identity_store: IdentityStore

    def notify(self, recipient_id: int, subject: str, body: str) -> bool:
        """Log the notification; return False when it cannot be addressed."""
        if not subject or not body:
            logger.warning("Notification missing subject or body")
            return False
        recipient = self.identity_store.find_by_id(recipient_id)
        if recipient is None:
            logger.warning("No user %s to notify", recipient_id)
            return False
        logger.info("Email to %s: %s\n%s", recipient.email, subject, body)
        return True
