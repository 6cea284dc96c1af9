"""LoggerProtocol definition for structured logging.

The registry and the logging handler depend on this port instead of a concrete
logging backend. Implementations MUST emit structured logs (message plus
key-value context).

Levels used by the dispatcher:
    - DEBUG: Subscription changes, dispatch rounds
    - INFO: Payloads recorded by LoggingNotificationHandler
    - WARNING: Handler failures during dispatch (with the exception attached)

Usage:
    from src.core.container import get_logger
    from src.domain.protocols.logger_protocol import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.warning("subscription_handler_failed", error=exc, event_type="sms")

    # Handler-scoped logging with bind()
    handler_logger = logger.bind(handler="audit")
    handler_logger.info("notification_received")  # handler auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event-style message (snake_case, no f-strings).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a warning-level message with optional exception details.

        Args:
            message: Event-style message.
            error: Optional exception; implementations add error_type and
                error_message fields and MUST NOT raise while rendering it.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...
