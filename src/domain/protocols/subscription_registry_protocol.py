"""Subscription registry protocol (port) for in-process notifications.

This module defines the SubscriptionRegistryProtocol interface that registry
implementations must satisfy. The domain defines the port, infrastructure
provides the adapter.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements the adapter (in-memory)
    - Container (src/core/container/) provides factory functions

Implementations:
    - InMemorySubscriptionRegistry:
      src/infrastructure/events/in_memory_subscription_registry.py

Usage:
    >>> from src.core.container import create_registry
    >>> from src.domain.enums import NotificationChannel
    >>>
    >>> registry = create_registry()
    >>> registry.subscribe(NotificationChannel.EMAIL, email_handler)
    >>> registry.publish(NotificationChannel.EMAIL, "me@example.com")
"""

from collections.abc import Hashable
from typing import Any, Protocol

from src.domain.protocols.notification_handler_protocol import (
    NotificationHandlerProtocol,
)

EventType = Hashable
"""Type alias for event type identifiers.

Any hashable, equality-compared value routes notifications (typically a
NotificationChannel member or a plain string). No ordering is implied.
"""


class SubscriptionRegistryProtocol(Protocol):
    """Protocol for subscription registry implementations.

    The registry maps each event type to an ordered list of handlers and
    dispatches published payloads to them synchronously.

    Key Requirements:
        1. **Registration order**: Handlers are invoked first-subscribed,
           first-notified. This is a contract, not an implementation detail.
        2. **Duplicates allowed**: Each subscribe call adds one entry; the same
           handler subscribed twice is notified twice.
        3. **Silent no-ops**: Publishing to, or unsubscribing from, an unknown
           event type never raises.
        4. **Propagate-and-abort**: A handler exception reaches the publisher
           unchanged and skips the remaining handlers of that round. Registry
           state is left intact.

    Methods:
        subscribe: Register handler for an event type
        unsubscribe: Remove every entry of a handler for an event type
        publish: Dispatch a payload to all handlers of an event type
        notify: Alias of publish
    """

    def subscribe(
        self,
        event_type: EventType,
        handler: NotificationHandlerProtocol,
    ) -> None:
        """Append handler to the list for event_type.

        Args:
            event_type: Event type identifier. The list is created lazily on
                first subscription.
            handler: Object exposing ``update(payload)``. Referenced, never
                owned, by the registry.
        """
        ...

    def unsubscribe(
        self,
        event_type: EventType,
        handler: NotificationHandlerProtocol,
    ) -> None:
        """Remove handler from the list for event_type.

        Every entry identical to handler (``is``) is removed in a single pass.
        Unknown event type or absent handler is a no-op.

        Args:
            event_type: Event type identifier.
            handler: Previously subscribed handler.
        """
        ...

    def publish(self, event_type: EventType, payload: Any) -> None:
        """Invoke ``update(payload)`` on every handler of event_type.

        Args:
            event_type: Event type identifier.
            payload: Opaque value passed to each handler unchanged.

        Raises:
            Exception: Whatever the first failing handler raised.
        """
        ...

    def notify(self, event_type: EventType, payload: Any) -> None:
        """Alias of publish()."""
        ...
