"""Authorization gate configuration.

Environment Variables:
- QUORUM_SUDO_ENVIRONMENT: 'production' (JSON logs) or 'development' (default: production)
- QUORUM_SUDO_DIRECTORY_URL: Base URL of the HTTP authority directory
  (default: unset, the in-memory stub is used)
- QUORUM_SUDO_DIRECTORY_TIMEOUT: Seconds before a directory query is
  treated as failed (default: 5.0)
- QUORUM_SUDO_INITIAL_NONCE: Nonce a redeployed engine resumes from (default: 0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENVIRONMENT_ENV = "QUORUM_SUDO_ENVIRONMENT"
DIRECTORY_URL_ENV = "QUORUM_SUDO_DIRECTORY_URL"
DIRECTORY_TIMEOUT_ENV = "QUORUM_SUDO_DIRECTORY_TIMEOUT"
INITIAL_NONCE_ENV = "QUORUM_SUDO_INITIAL_NONCE"

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})


def _get_nonce_env(key: str, default: int) -> int:
    """Get the resume nonce from the environment.

    A set but unparseable value never falls back to the default.

    Raises:
        ValueError: If the variable is set but is not an integer.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class SudoGateConfig:
    """Configuration for the authorization engine and its collaborators.

    Attributes:
        environment: Logging mode, 'production' or 'development'.
        directory_url: HTTP authority directory base URL, or None for the stub.
        directory_timeout_seconds: Bound on a single directory query.
        initial_nonce: Nonce the engine starts from.
    """

    environment: str = "production"
    directory_url: str | None = None
    directory_timeout_seconds: float = 5.0
    initial_nonce: int = 0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.directory_timeout_seconds <= 0:
            raise ValueError(
                "directory_timeout_seconds must be positive, "
                f"got {self.directory_timeout_seconds}"
            )
        if self.initial_nonce < 0:
            raise ValueError(
                f"initial_nonce must be non-negative, got {self.initial_nonce}"
            )

    @classmethod
    def from_environment(cls) -> "SudoGateConfig":
        """Create config from environment variables with defaults.

        An invalid timeout falls back to its default. An unparseable
        initial nonce raises ValueError. An empty directory URL counts as
        unset.
        """
        return cls(
            environment=os.environ.get(ENVIRONMENT_ENV, "production"),
            directory_url=os.environ.get(DIRECTORY_URL_ENV) or None,
            directory_timeout_seconds=_get_float_env(DIRECTORY_TIMEOUT_ENV, 5.0),
            initial_nonce=_get_nonce_env(INITIAL_NONCE_ENV, 0),
        )


# Default configuration for production
DEFAULT_SUDO_GATE_CONFIG = SudoGateConfig()

# Test configuration: console logs, short directory timeout
TEST_SUDO_GATE_CONFIG = SudoGateConfig(
    environment="development",
    directory_timeout_seconds=0.5,
)
