"""Infrastructure notification implementations.

Registry:
    - InMemorySubscriptionRegistry: Ordered, synchronous, propagate-and-abort

Handlers (see handlers/):
    - ConsoleNotificationHandler: Prints an acknowledgement line
    - LoggingNotificationHandler: Structured log entry per payload

Usage:
    >>> from src.infrastructure.events import InMemorySubscriptionRegistry
    >>> from src.infrastructure.events.handlers import ConsoleNotificationHandler
    >>>
    >>> registry = InMemorySubscriptionRegistry(logger=logger)
    >>> registry.subscribe("email", ConsoleNotificationHandler(label="A"))
"""

from src.infrastructure.events.in_memory_subscription_registry import (
    InMemorySubscriptionRegistry,
)

__all__ = ["InMemorySubscriptionRegistry"]
