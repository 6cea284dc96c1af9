"""Notification handler protocol (port).

A handler is anything that can receive a published payload. The registry
never inspects the payload and never looks at the handler beyond calling its
single ``update`` capability.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Concrete handlers live in src/infrastructure/events/handlers/
    - Handler identity is object identity: two equal-looking handlers
      subscribed separately are distinct entries

Usage:
    >>> class AuditTrail:
    ...     def update(self, payload: object) -> None:
    ...         records.append(payload)
    >>>
    >>> registry.subscribe(NotificationChannel.EMAIL, AuditTrail())
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NotificationHandlerProtocol(Protocol):
    """Protocol for notification handlers.

    Handlers must:
        - Expose ``update(payload)`` returning None (side-effects only)
        - Run synchronously; dispatch blocks until ``update`` returns
        - Raise to abort the remainder of the current dispatch round
    """

    def update(self, payload: Any) -> None:
        """Receive a published payload.

        Args:
            payload: Opaque value passed through from the publisher unchanged.
        """
        ...
