"""Concrete notification handlers.

Each handler exposes ``update(payload)`` and satisfies
NotificationHandlerProtocol structurally.
"""

from src.infrastructure.events.handlers.console_notification_handler import (
    ConsoleNotificationHandler,
)
from src.infrastructure.events.handlers.logging_notification_handler import (
    LoggingNotificationHandler,
)

__all__ = ["ConsoleNotificationHandler", "LoggingNotificationHandler"]
