"""Subscription registry and emitter factories.

Unlike the logger, these are NOT cached: every call builds a fresh instance.
There is no process-global registry; callers own the registry they create
and inject it wherever notifications are emitted.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.services.event_emitter import EventEmitter
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.subscription_registry_protocol import (
        SubscriptionRegistryProtocol,
    )


def create_registry(
    logger: "LoggerProtocol | None" = None,
) -> "SubscriptionRegistryProtocol":
    """Build a new, empty subscription registry.

    Returns the adapter selected by the REGISTRY_TYPE environment variable:
        - 'in-memory' (default): InMemorySubscriptionRegistry

    Args:
        logger: Logger to inject. Defaults to the application logger.

    Returns:
        Registry implementing SubscriptionRegistryProtocol.

    Raises:
        ValueError: If REGISTRY_TYPE names an unsupported adapter.
    """
    import os

    from src.core.container.infrastructure import get_logger
    from src.infrastructure.events.in_memory_subscription_registry import (
        InMemorySubscriptionRegistry,
    )

    registry_type = os.getenv("REGISTRY_TYPE", "in-memory")

    if registry_type != "in-memory":
        raise ValueError(
            f"Unsupported REGISTRY_TYPE: {registry_type}. Supported: 'in-memory'"
        )

    return InMemorySubscriptionRegistry(
        logger=logger if logger is not None else get_logger()
    )


def create_event_emitter(registry: "SubscriptionRegistryProtocol") -> "EventEmitter":
    """Build an EventEmitter bound to registry.

    Args:
        registry: Registry the emitter publishes to.

    Returns:
        EventEmitter instance.
    """
    from src.application.services.event_emitter import EventEmitter

    return EventEmitter(registry)
