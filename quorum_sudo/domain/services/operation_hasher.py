"""Canonical, nonce-bound operation hashes.

The operation hash is both the payload authorities sign and the replay
key: folding the current nonce into it makes every collected signature
set single-use.

Canonical encoding (tight packing, BLAKE3-256 over the preimage):

    SetBalance:  0x01 || target(20) || uint256 new_balance(32) || uint256 nonce(32)
    SetCode:     0x02 || target(20) || new_code(variable)      || uint256 nonce(32)
    SetStorage:  0x03 || target(20) || key(32) || value(32)    || uint256 nonce(32)

new_code is the only variable-length field and the nonce that follows it
has a fixed width, so the preimage is unambiguous within a kind. The
leading kind tag separates kinds whose packed lengths could coincide.
"""

from __future__ import annotations

import blake3

from quorum_sudo.domain.errors.operation import MalformedOperationError
from quorum_sudo.domain.models.identity import address_to_bytes
from quorum_sudo.domain.models.operation import (
    UINT256_MAX,
    WORD_LENGTH,
    OperationRequest,
    SetBalanceRequest,
    SetCodeRequest,
    SetStorageRequest,
)

OP_HASH_LENGTH: int = 32


def encode_uint256(value: int, field_name: str = "value") -> bytes:
    """Encode an unsigned integer as a 32-byte big-endian word.

    Raises:
        MalformedOperationError: If value is negative or exceeds uint256.
    """
    if not 0 <= value <= UINT256_MAX:
        raise MalformedOperationError(field_name, "must be within the uint256 range")
    return value.to_bytes(WORD_LENGTH, "big")


def encode_operation(request: OperationRequest, nonce: int) -> bytes:
    """Build the canonical preimage for an operation bound to a nonce.

    Args:
        request: The operation to encode.
        nonce: Nonce value to bind the operation to.

    Returns:
        Tightly packed preimage bytes.
    """
    parts: list[bytes] = [bytes([request.kind.value]), address_to_bytes(request.target)]
    if isinstance(request, SetBalanceRequest):
        parts.append(encode_uint256(request.new_balance, "new_balance"))
    elif isinstance(request, SetCodeRequest):
        parts.append(request.new_code)
    elif isinstance(request, SetStorageRequest):
        parts.append(request.key)
        parts.append(request.value)
    else:
        raise TypeError(f"Unsupported operation request: {type(request).__name__}")
    parts.append(encode_uint256(nonce, "nonce"))
    return b"".join(parts)


def compute_operation_hash(request: OperationRequest, nonce: int) -> bytes:
    """Compute the 32-byte operation hash authorities sign.

    Pure function of (operation fields, nonce).
    """
    return blake3.blake3(encode_operation(request, nonce)).digest()
