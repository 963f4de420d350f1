"""Signer recovery port.

Recovers the identity that produced a signature over a 32-byte digest
without a pre-shared public key.
"""

from __future__ import annotations

from typing import Protocol


class SignerRecoveryProtocol(Protocol):
    """Protocol for recovering a signer address from a signature."""

    def recover(self, digest: bytes, recovery_id: int, r: bytes, s: bytes) -> str | None:
        """Recover the signing address.

        Args:
            digest: 32-byte message digest that was signed (not re-hashed).
            recovery_id: Signature recovery byte.
            r: First 32-byte scalar.
            s: Second 32-byte scalar.

        Returns:
            Normalized signer address, or None if the signature does not
            recover to a valid public key.

        Note:
            This method does NOT raise on invalid signatures. The caller
            decides how a failed recovery is handled.
        """
        ...

    def get_algorithm(self) -> str:
        """Get the signature algorithm name."""
        ...
