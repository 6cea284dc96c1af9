"""Console notification handler.

Writes a one-line acknowledgement for every payload it receives. This is the
handler variant the demo wiring subscribes as "A" and "B".

Output format:
    "<label> needs to handle this payload: <payload>"

Usage:
    >>> handler = ConsoleNotificationHandler(label="A")
    >>> registry.subscribe(NotificationChannel.EMAIL, handler)
    >>> registry.publish(NotificationChannel.EMAIL, "me@example.com")
    A needs to handle this payload: me@example.com
"""

import sys
from typing import Any, TextIO


class ConsoleNotificationHandler:
    """Handler that renders payloads to a text stream.

    Attributes:
        label: Name printed at the start of each line.
        _stream: Destination stream. Resolved at write time when None so
            that redirected stdout (e.g., pytest capsys) is honored.
    """

    def __init__(self, label: str, stream: TextIO | None = None) -> None:
        self.label = label
        self._stream = stream

    def update(self, payload: Any) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"{self.label} needs to handle this payload: {payload}", file=stream)

    def __repr__(self) -> str:
        return f"ConsoleNotificationHandler(label={self.label!r})"
