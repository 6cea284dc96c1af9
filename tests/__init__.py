"""Test suite for the notification dispatcher.

Test structure follows the test pyramid:
- unit/: Unit tests - Components in isolation with mocked loggers
- integration/: Integration tests - Real structlog, real wiring
"""
