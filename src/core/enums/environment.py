"""Runtime environment types.

Defines the environments the dispatcher can run in. Settings uses the value
to pick environment-specific behavior (log renderer selection).

Environments:
- DEVELOPMENT: Local runs, human-readable colored logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Deployed process, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
