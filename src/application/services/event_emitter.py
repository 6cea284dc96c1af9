"""Event emitter service.

Domain-flavored entry points over the subscription registry. Each method
takes only the payload and forwards it to the registry on a fixed
NotificationChannel.

Architecture:
    - Application service (depends only on the registry port)
    - Registry injected via constructor (no global registry)
    - No state beyond the registry reference

Usage:
    emitter = EventEmitter(registry)
    emitter.email_notification("me@example.com")
    emitter.sms_notification("123456789")
"""

from typing import Any

from src.domain.enums import NotificationChannel
from src.domain.protocols.subscription_registry_protocol import (
    SubscriptionRegistryProtocol,
)


class EventEmitter:
    """Facade that publishes payloads on named channels.

    Errors are those of the registry's publish: a failing handler's exception
    propagates out of the emitter call unchanged.

    Dependencies (injected via constructor):
        - SubscriptionRegistryProtocol: Registry that dispatches payloads
    """

    def __init__(self, registry: SubscriptionRegistryProtocol) -> None:
        self._registry = registry

    def email_notification(self, email: Any) -> None:
        """Publish email on NotificationChannel.EMAIL.

        Args:
            email: Email payload (typically an address), passed through as-is.
        """
        self._registry.notify(NotificationChannel.EMAIL, email)

    def sms_notification(self, number: Any) -> None:
        """Publish number on NotificationChannel.SMS.

        Args:
            number: SMS payload (typically a phone number), passed through as-is.
        """
        self._registry.notify(NotificationChannel.SMS, number)
