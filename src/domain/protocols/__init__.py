"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import (
        NotificationHandlerProtocol,
        SubscriptionRegistryProtocol,
    )
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_handler_protocol import (
    NotificationHandlerProtocol,
)
from src.domain.protocols.subscription_registry_protocol import (
    EventType,
    SubscriptionRegistryProtocol,
)

__all__ = [
    "EventType",
    "LoggerProtocol",
    "NotificationHandlerProtocol",
    "SubscriptionRegistryProtocol",
]
