"""secp256k1 signer recovery adapter.

Implements SignerRecoveryProtocol with libsecp256k1 (via coincurve).
The digest is used as-is: it is already the 32-byte operation hash, so
no further hashing is applied before recovery.

Recovery id convention: the signature's final byte is 27 or 28. Any other
value does not recover to an identity.

Address derivation: the last 20 bytes of the BLAKE3-256 digest of the
64-byte uncompressed public key (X || Y, without the 0x04 prefix).
"""

from __future__ import annotations

import blake3
from coincurve import PublicKey
from structlog import get_logger

from quorum_sudo.domain.models.identity import ADDRESS_LENGTH
from quorum_sudo.domain.models.signature import SCALAR_LENGTH

logger = get_logger()

SIG_ALG_NAME: str = "secp256k1"

# Offset applied to the raw 0/1 recovery id in the trailing signature byte
RECOVERY_ID_OFFSET: int = 27
VALID_RECOVERY_IDS: frozenset[int] = frozenset({27, 28})


def address_from_public_key(public_key: PublicKey) -> str:
    """Derive the normalized address of a secp256k1 public key."""
    uncompressed = public_key.format(compressed=False)
    digest = blake3.blake3(uncompressed[1:]).digest()
    return "0x" + digest[-ADDRESS_LENGTH:].hex()


class Secp256k1SignerRecovery:
    """Recovers signer addresses from recoverable secp256k1 signatures."""

    def recover(self, digest: bytes, recovery_id: int, r: bytes, s: bytes) -> str | None:
        """Recover the signing address, or None if the signature is invalid.

        Args:
            digest: 32-byte signed digest.
            recovery_id: 27 or 28.
            r: 32-byte r scalar.
            s: 32-byte s scalar.

        Returns:
            Normalized signer address, or None.
        """
        if recovery_id not in VALID_RECOVERY_IDS:
            logger.debug("signer_recovery_bad_recovery_id", recovery_id=recovery_id)
            return None
        if len(digest) != 32 or len(r) != SCALAR_LENGTH or len(s) != SCALAR_LENGTH:
            logger.debug(
                "signer_recovery_bad_lengths",
                digest_length=len(digest),
                r_length=len(r),
                s_length=len(s),
            )
            return None

        compact = r + s + bytes([recovery_id - RECOVERY_ID_OFFSET])
        try:
            public_key = PublicKey.from_signature_and_message(compact, digest, hasher=None)
        except ValueError as e:
            logger.debug("signer_recovery_failed", error=str(e))
            return None
        return address_from_public_key(public_key)

    def get_algorithm(self) -> str:
        """Get the signature algorithm name."""
        return SIG_ALG_NAME
