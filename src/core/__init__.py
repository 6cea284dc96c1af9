"""Core shared kernel.

This module provides foundational pieces used across all architectural layers:
- Settings (pydantic-settings) and environment enums
- Container factories (composition root)

The core module has NO dependencies on infrastructure at import time.
"""
