"""Signature codec: split a raw 65-byte signature into its components.

Layout (big-endian, no transformation):
    bytes [0, 32)  -> r
    bytes [32, 64) -> s
    byte  64       -> recovery id (v)

Scalars are copied byte for byte. Reassembling each scalar from
right-shifted single-byte words yields the identical arrangement, so
signatures produced for that scheme decode unchanged.
"""

from __future__ import annotations

from quorum_sudo.domain.errors.signature import MalformedSignatureError
from quorum_sudo.domain.models.signature import (
    SCALAR_LENGTH,
    SIGNATURE_LENGTH,
    DecomposedSignature,
    SignatureBatch,
)


def decompose_signature(signature: bytes) -> DecomposedSignature:
    """Decompose a raw signature into (recovery_id, r, s).

    Args:
        signature: Exactly 65 signature bytes.

    Returns:
        DecomposedSignature with the recovery id and both scalars.

    Raises:
        MalformedSignatureError: If the signature is not 65 bytes long.
    """
    if len(signature) != SIGNATURE_LENGTH:
        raise MalformedSignatureError(length=len(signature))
    return DecomposedSignature(
        recovery_id=signature[2 * SCALAR_LENGTH],
        r=bytes(signature[:SCALAR_LENGTH]),
        s=bytes(signature[SCALAR_LENGTH : 2 * SCALAR_LENGTH]),
    )


def compose_signature(signature: DecomposedSignature) -> bytes:
    """Inverse of decompose_signature."""
    return signature.r + signature.s + bytes([signature.recovery_id])


def batch_from_signatures(signatures: list[bytes]) -> SignatureBatch:
    """Build a SignatureBatch from raw 65-byte signatures, preserving order.

    Raises:
        MalformedSignatureError: If any signature is not 65 bytes long.
    """
    return SignatureBatch.from_components(decompose_signature(sig) for sig in signatures)
