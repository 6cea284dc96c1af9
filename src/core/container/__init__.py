"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, create_registry

The container is organized into modules by concern:
- infrastructure: Ambient services (logging)
- events: Subscription registry and event emitter
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger

# Registry and emitter
from src.core.container.events import create_event_emitter, create_registry

__all__ = [
    "create_event_emitter",
    "create_registry",
    "get_logger",
]
