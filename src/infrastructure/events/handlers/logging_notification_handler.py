"""Logging notification handler.

Records every payload it receives as a structured INFO log entry. Useful as
an always-on observer next to handlers with real side effects.

Structured Fields:
    - handler: Label given at construction
    - channel: Event type the handler was built for (optional)
    - payload: repr() of the received payload

Usage:
    >>> handler = LoggingNotificationHandler(
    ...     logger=get_logger(), label="audit", channel=NotificationChannel.SMS
    ... )
    >>> registry.subscribe(NotificationChannel.SMS, handler)
"""

from typing import Any

from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingNotificationHandler:
    """Handler that logs received payloads through LoggerProtocol.

    The payload is logged via repr() since the registry treats it as opaque
    and it may not be JSON-serializable.

    Attributes:
        label: Handler label included in every log entry.
        _logger: Logger with handler (and channel) context pre-bound.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        label: str = "logging",
        channel: object | None = None,
    ) -> None:
        """Initialize logging handler.

        Args:
            logger: Logger protocol implementation from container.
            label: Name identifying this handler in log output.
            channel: Event type this instance is subscribed to, if any. Only
                used as log context; the registry does not pass it.
        """
        self.label = label
        context: dict[str, Any] = {"handler": label}
        if channel is not None:
            context["channel"] = str(getattr(channel, "value", channel))
        self._logger = logger.bind(**context)

    def update(self, payload: Any) -> None:
        """Log the payload (INFO level).

        Args:
            payload: Opaque notification payload.
        """
        self._logger.info("notification_received", payload=repr(payload))
