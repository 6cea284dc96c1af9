"""Domain enums.

Available Enums:
    - NotificationChannel: Event types published by the EventEmitter
"""

from src.domain.enums.notification_channel import NotificationChannel

__all__ = ["NotificationChannel"]
