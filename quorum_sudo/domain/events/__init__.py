"""Domain events emitted by the authorization engine."""

from quorum_sudo.domain.events.sudo_command import (
    SET_BALANCE_EVENT_TYPE,
    SET_CODE_EVENT_TYPE,
    SET_STORAGE_EVENT_TYPE,
    SUDO_COMMAND_SCHEMA_VERSION,
    SetBalanceCommand,
    SetCodeCommand,
    SetStorageCommand,
    SudoCommand,
)

__all__: list[str] = [
    "SET_BALANCE_EVENT_TYPE",
    "SET_CODE_EVENT_TYPE",
    "SET_STORAGE_EVENT_TYPE",
    "SUDO_COMMAND_SCHEMA_VERSION",
    "SetBalanceCommand",
    "SetCodeCommand",
    "SetStorageCommand",
    "SudoCommand",
]
