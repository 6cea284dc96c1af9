"""Infrastructure dependency factories.

Application-scoped singletons for ambient infrastructure services:
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    The minimum level comes from settings.log_level.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
