"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/production: JSON renderer for machine parsing

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def describe_error(error: BaseException) -> dict[str, str]:
    """Flatten an exception into error_type/error_message fields.

    Never raises: an exception whose ``__str__`` fails is described by its
    type name only, so the caller's exception stays the one in flight.

    Args:
        error: Exception to describe.

    Returns:
        dict with error_type and error_message.
    """
    try:
        message = str(error)
    except Exception:
        message = f"<unprintable {type(error).__name__}>"
    return {"error_type": type(error).__name__, "error_message": message}


class ConsoleAdapter:
    """Console logger backed by structlog.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(
                getattr(logging, level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    @classmethod
    def _wrapping(cls, bound_logger: Any) -> ConsoleAdapter:
        # Skips __init__: a bound child must not re-run structlog.configure.
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a warning, flattening error via describe_error()."""
        if error is not None:
            context.update(describe_error(error))
        self._logger.warning(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter sharing this adapter's configuration.
        """
        return ConsoleAdapter._wrapping(self._logger.bind(**context))
