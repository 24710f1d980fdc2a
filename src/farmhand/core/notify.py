"""User-facing error notifications for failed mutations."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

# A notifier receives one message per call; its return value is ignored
Notifier = Callable[[str], None]


def log_notifier(message: str) -> None:
    """Default notifier: write the message to the log."""
    logger.warning("Notification: %s", message)


def send_notification(notifier: Notifier, message: str) -> None:
    """Deliver a message without letting a broken notifier affect the caller."""
    try:
        notifier(message)
    except Exception:
        logger.exception("Notifier failed for message: %s", message)
