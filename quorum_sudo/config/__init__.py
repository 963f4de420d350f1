"""Configuration module for Quorum Sudo.

Available Configurations:
- SudoGateConfig: Engine, directory and logging settings
"""

from quorum_sudo.config.sudo_config import (
    DEFAULT_SUDO_GATE_CONFIG,
    TEST_SUDO_GATE_CONFIG,
    SudoGateConfig,
)

__all__ = [
    "SudoGateConfig",
    "DEFAULT_SUDO_GATE_CONFIG",
    "TEST_SUDO_GATE_CONFIG",
]
