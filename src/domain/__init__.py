"""Domain layer - Pure notification contracts.

This layer contains the protocols (ports) and enums of the notification
dispatcher. It has NO dependencies on any framework or infrastructure.

Structure:
- protocols/: Handler, registry and logger ports
- enums/: Well-known event types (notification channels)

The domain layer defines WHAT gets dispatched, not HOW.
"""
