"""Demo wiring for the notification dispatcher.

Builds a registry explicitly, subscribes handler A to email and handler B to
sms, then emits one notification on each channel:

    $ python -m src.main
    A needs to handle this payload: me@example.com
    B needs to handle this payload: 123456789
"""

from typing import TextIO

from src.core.container import create_event_emitter, create_registry, get_logger
from src.domain.enums import NotificationChannel
from src.infrastructure.events.handlers.console_notification_handler import (
    ConsoleNotificationHandler,
)


def main(stream: TextIO | None = None) -> None:
    """Run the email/sms demo.

    Args:
        stream: Where handlers write. Defaults to stdout.
    """
    logger = get_logger().bind(component="demo")

    subscriber_a = ConsoleNotificationHandler(label="A", stream=stream)
    subscriber_b = ConsoleNotificationHandler(label="B", stream=stream)

    registry = create_registry(logger=logger)
    registry.subscribe(NotificationChannel.EMAIL, subscriber_a)
    registry.subscribe(NotificationChannel.SMS, subscriber_b)

    emitter = create_event_emitter(registry)
    emitter.email_notification("me@example.com")
    emitter.sms_notification("123456789")


if __name__ == "__main__":
    main()
