"""Operation requests gated by the authorization engine.

Each request describes one privileged mutation of a target account.
The engine never performs the mutation; it only authorizes it and emits
the matching command.

Field rules:
- target: 20-byte address (normalized on construction)
- new_balance: uint256 integer
- new_code: arbitrary bytes (may be empty)
- key / value: 32-byte storage words
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quorum_sudo.domain.errors.operation import MalformedOperationError
from quorum_sudo.domain.models.identity import normalize_address

WORD_LENGTH: int = 32
UINT256_MAX: int = 2**256 - 1


class OperationKind(Enum):
    """Supported privileged operations.

    The value is the one-byte tag that prefixes the canonical hash
    preimage of each kind.
    """

    SET_BALANCE = 0x01
    SET_CODE = 0x02
    SET_STORAGE = 0x03


def _validate_word(value: bytes, field_name: str) -> None:
    if not isinstance(value, (bytes, bytearray)):
        raise MalformedOperationError(field_name, "must be bytes")
    if len(value) != WORD_LENGTH:
        raise MalformedOperationError(
            field_name, f"must be {WORD_LENGTH} bytes, got {len(value)}"
        )


@dataclass(frozen=True)
class SetBalanceRequest:
    """Request to set the balance of a target account.

    Attributes:
        target: Account whose balance is replaced.
        new_balance: The balance to set (uint256).
    """

    target: str
    new_balance: int

    kind = OperationKind.SET_BALANCE

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", normalize_address(self.target, "target"))
        if isinstance(self.new_balance, bool) or not isinstance(self.new_balance, int):
            raise MalformedOperationError("new_balance", "must be an integer")
        if not 0 <= self.new_balance <= UINT256_MAX:
            raise MalformedOperationError(
                "new_balance", "must be within the uint256 range"
            )


@dataclass(frozen=True)
class SetCodeRequest:
    """Request to replace the code of a target account.

    Attributes:
        target: Account whose code is replaced.
        new_code: The replacement code bytes.
    """

    target: str
    new_code: bytes

    kind = OperationKind.SET_CODE

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", normalize_address(self.target, "target"))
        if not isinstance(self.new_code, (bytes, bytearray)):
            raise MalformedOperationError("new_code", "must be bytes")
        object.__setattr__(self, "new_code", bytes(self.new_code))


@dataclass(frozen=True)
class SetStorageRequest:
    """Request to write one storage slot of a target account.

    Attributes:
        target: Account whose storage is written.
        key: 32-byte storage slot.
        value: 32-byte value to store.
    """

    target: str
    key: bytes
    value: bytes

    kind = OperationKind.SET_STORAGE

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", normalize_address(self.target, "target"))
        _validate_word(self.key, "key")
        _validate_word(self.value, "value")
        object.__setattr__(self, "key", bytes(self.key))
        object.__setattr__(self, "value", bytes(self.value))


OperationRequest = SetBalanceRequest | SetCodeRequest | SetStorageRequest
