"""Authorized sudo command events.

These are commands, not confirmations: the engine emits one after a
majority of authorities signed the operation and the nonce advanced.
Applying it to account state is the external executor's job.

Each command carries the operation fields plus the nonce the signatures
were bound to and the resulting operation hash, so an executor can
apply every command exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Event type constants
SET_BALANCE_EVENT_TYPE: str = "sudo.set_balance"
SET_CODE_EVENT_TYPE: str = "sudo.set_code"
SET_STORAGE_EVENT_TYPE: str = "sudo.set_storage"

# Schema version for command payloads
SUDO_COMMAND_SCHEMA_VERSION: str = "1.0.0"


def _hex(value: bytes) -> str:
    return "0x" + value.hex()


def _unhex(value: str) -> bytes:
    return bytes.fromhex(value[2:] if value.startswith("0x") else value)


@dataclass(frozen=True, eq=True)
class SetBalanceCommand:
    """Authorized command to set a target account's balance.

    Attributes:
        target: Account address.
        new_balance: Balance to set.
        nonce: Nonce the authorizing signatures were bound to.
        op_hash: Operation hash that was signed.
    """

    target: str
    new_balance: int
    nonce: int
    op_hash: bytes

    event_type = SET_BALANCE_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert command to dict for delivery to the executor."""
        return {
            "event_type": self.event_type,
            "target": self.target,
            "new_balance": str(self.new_balance),
            "nonce": self.nonce,
            "op_hash": _hex(self.op_hash),
            "schema_version": SUDO_COMMAND_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SetBalanceCommand:
        return cls(
            target=data["target"],
            new_balance=int(data["new_balance"]),
            nonce=data["nonce"],
            op_hash=_unhex(data["op_hash"]),
        )


@dataclass(frozen=True, eq=True)
class SetCodeCommand:
    """Authorized command to replace a target account's code.

    Attributes:
        target: Account address.
        new_code: Replacement code bytes.
        nonce: Nonce the authorizing signatures were bound to.
        op_hash: Operation hash that was signed.
    """

    target: str
    new_code: bytes
    nonce: int
    op_hash: bytes

    event_type = SET_CODE_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert command to dict for delivery to the executor."""
        return {
            "event_type": self.event_type,
            "target": self.target,
            "new_code": _hex(self.new_code),
            "nonce": self.nonce,
            "op_hash": _hex(self.op_hash),
            "schema_version": SUDO_COMMAND_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SetCodeCommand:
        return cls(
            target=data["target"],
            new_code=_unhex(data["new_code"]),
            nonce=data["nonce"],
            op_hash=_unhex(data["op_hash"]),
        )


@dataclass(frozen=True, eq=True)
class SetStorageCommand:
    """Authorized command to write one storage slot of a target account.

    Attributes:
        target: Account address.
        key: 32-byte storage slot.
        value: 32-byte value.
        nonce: Nonce the authorizing signatures were bound to.
        op_hash: Operation hash that was signed.
    """

    target: str
    key: bytes
    value: bytes
    nonce: int
    op_hash: bytes

    event_type = SET_STORAGE_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert command to dict for delivery to the executor."""
        return {
            "event_type": self.event_type,
            "target": self.target,
            "key": _hex(self.key),
            "value": _hex(self.value),
            "nonce": self.nonce,
            "op_hash": _hex(self.op_hash),
            "schema_version": SUDO_COMMAND_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SetStorageCommand:
        return cls(
            target=data["target"],
            key=_unhex(data["key"]),
            value=_unhex(data["value"]),
            nonce=data["nonce"],
            op_hash=_unhex(data["op_hash"]),
        )


SudoCommand = SetBalanceCommand | SetCodeCommand | SetStorageCommand
