"""Application layer - Orchestration over domain ports.

Structure:
- services/: EventEmitter facade (named notifications over the registry)

The application layer depends only on domain protocols.
"""
