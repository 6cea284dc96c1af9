"""In-memory subscription registry implementation.

This module implements SubscriptionRegistryProtocol using a dictionary-based
registry. Handlers are invoked synchronously on the publisher's thread.

Architecture:
    - Implements SubscriptionRegistryProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type → list of handlers)
    - Sequential dispatch in registration order
    - Propagate-and-abort behavior (first handler failure stops the round)
    - Registry-wide lock with snapshot-then-dispatch

Usage:
    >>> registry = InMemorySubscriptionRegistry(logger=get_logger())
    >>> registry.subscribe(NotificationChannel.EMAIL, subscriber_a)
    >>> registry.publish(NotificationChannel.EMAIL, "me@example.com")
"""

import threading
from typing import Any

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_handler_protocol import (
    NotificationHandlerProtocol,
)
from src.domain.protocols.subscription_registry_protocol import EventType


def _handler_name(handler: object) -> str:
    return getattr(handler, "__name__", type(handler).__name__)


def _event_label(event_type: EventType) -> str:
    # Enum members log by value ("email"), everything else by str().
    return str(getattr(event_type, "value", event_type))


class InMemorySubscriptionRegistry:
    """In-memory subscription registry with ordered, synchronous dispatch.

    Implements SubscriptionRegistryProtocol. Handlers for an event type are
    kept in subscription order and invoked one after another; publish() does
    not return until every handler has run.

    Thread Safety:
        - subscribe/unsubscribe mutate the mapping under a single RLock
        - publish copies the handler list under the lock, then dispatches
          outside it, so handlers may (un)subscribe re-entrantly
        - A handler removed mid-round still receives that round's payload

    Attributes:
        _handlers: Mapping from event type to ordered list of handlers.
            Keys are created on first subscription and dropped once their
            list becomes empty.
        _logger: Logger for subscription changes and handler failures.
        _lock: Guards _handlers.

    Design Decisions:
        - **Duplicates allowed**: Same handler subscribed twice runs twice
        - **Unsubscribe removes all**: Every identical entry goes in one pass
        - **Propagate-and-abort**: Handler exceptions are logged, then
          re-raised unchanged; later handlers in that round are skipped
        - **Non-owning**: The registry only references handlers
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize registry with an empty mapping.

        Args:
            logger: Logger for subscription changes (debug level) and handler
                failures (warning level).
        """
        self._handlers: dict[EventType, list[NotificationHandlerProtocol]] = {}
        self._logger = logger
        self._lock = threading.RLock()

    def subscribe(
        self,
        event_type: EventType,
        handler: NotificationHandlerProtocol,
    ) -> None:
        """Append handler to the list for event_type.

        Args:
            event_type: Event type identifier (hashable).
            handler: Object exposing ``update(payload)``.

        Notes:
            - No duplicate detection (same handler can be registered twice)
            - Always succeeds
        """
        with self._lock:
            handlers = self._handlers.setdefault(event_type, [])
            handlers.append(handler)
            count = len(handlers)

        self._logger.debug(
            "subscription_added",
            event_type=_event_label(event_type),
            handler_name=_handler_name(handler),
            handler_count=count,
        )

    def unsubscribe(
        self,
        event_type: EventType,
        handler: NotificationHandlerProtocol,
    ) -> None:
        """Remove every entry identical to handler from event_type's list.

        Matching is by identity (``is``), not equality. Unknown event types
        and handlers that were never subscribed are silent no-ops.

        Args:
            event_type: Event type identifier.
            handler: Handler to remove.
        """
        with self._lock:
            handlers = self._handlers.get(event_type)
            if not handlers:
                return

            remaining = [h for h in handlers if h is not handler]
            removed = len(handlers) - len(remaining)
            if not removed:
                return

            if remaining:
                self._handlers[event_type] = remaining
            else:
                del self._handlers[event_type]

        self._logger.debug(
            "subscription_removed",
            event_type=_event_label(event_type),
            handler_name=_handler_name(handler),
            removed_count=removed,
            handler_count=len(remaining),
        )

    def publish(self, event_type: EventType, payload: Any) -> None:
        """Invoke ``update(payload)`` on each handler of event_type in order.

        Flow:
            1. Snapshot the handler list under the lock
            2. If empty, return immediately (no-op)
            3. Call each handler's update(payload) sequentially
            4. On failure: log warning, re-raise, skip remaining handlers

        Args:
            event_type: Event type identifier.
            payload: Opaque value passed to each handler unchanged.

        Raises:
            Exception: The first exception raised by a handler, unchanged.
        """
        with self._lock:
            handlers = tuple(self._handlers.get(event_type, ()))

        if not handlers:
            return

        self._logger.debug(
            "notification_publishing",
            event_type=_event_label(event_type),
            handler_count=len(handlers),
        )

        for position, handler in enumerate(handlers):
            try:
                handler.update(payload)
            except Exception as e:
                # Exception goes to the logger as-is; rendering it must not
                # replace the one being re-raised.
                self._logger.warning(
                    "subscription_handler_failed",
                    error=e,
                    event_type=_event_label(event_type),
                    handler_name=_handler_name(handler),
                    handler_position=position,
                    skipped_count=len(handlers) - position - 1,
                )
                raise

    def notify(self, event_type: EventType, payload: Any) -> None:
        """Alias of publish(), used by the EventEmitter facade."""
        self.publish(event_type, payload)

    def subscribers(
        self, event_type: EventType
    ) -> tuple[NotificationHandlerProtocol, ...]:
        """Return a snapshot of event_type's handlers in registration order.

        Args:
            event_type: Event type identifier.

        Returns:
            Tuple of handlers (empty if none are subscribed).
        """
        with self._lock:
            return tuple(self._handlers.get(event_type, ()))

    def event_types(self) -> tuple[EventType, ...]:
        """Return event types that currently have at least one handler."""
        with self._lock:
            return tuple(self._handlers)
