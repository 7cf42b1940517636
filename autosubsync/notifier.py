"""User-facing notifications, mirrored to the log."""

import logging

from .session import HostSession

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
}

class Notifier:
    """Shows messages on the player's OSD and writes them to the log."""

    def __init__(self, session: HostSession):
        self.session = session

    def notify(self, message: str, level: str = "info", duration: float = 1) -> None:
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown notification level: {level}")
        logger.log(LOG_LEVELS[level], message)
        self.session.show_message(message, duration)
