"""Notification channel event types.

Well-known event types used by the EventEmitter facade. Any hashable value can
route notifications through the registry; these are the ones the application
layer publishes to.

Usage:
    from src.domain.enums import NotificationChannel

    registry.subscribe(NotificationChannel.EMAIL, handler)
"""

from enum import Enum


class NotificationChannel(str, Enum):
    """Channel an emitted notification is routed on.

    String Enum:
        Inherits from str, so NotificationChannel.EMAIL == "email" and both
        hash identically. Subscribing with the member and publishing with the
        plain string reach the same handlers.
    """

    EMAIL = "email"
    """Notification addressed to an email address."""

    SMS = "sms"
    """Notification addressed to a phone number."""
