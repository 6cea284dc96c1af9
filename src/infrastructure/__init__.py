"""Infrastructure layer - Adapters for domain ports.

Structure:
- events/: In-memory subscription registry and concrete handlers
- logging/: structlog-backed LoggerProtocol adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
