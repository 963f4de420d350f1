"""Signature errors for Quorum Sudo.

Provides exception classes for malformed signature input and
signatures that fail cryptographic recovery.

Constraints:
- A raw signature is exactly 65 bytes (r || s || v)
- A signature batch carries three parallel arrays of equal length
- One unrecoverable signature rejects the whole authorization attempt
"""

from __future__ import annotations

from quorum_sudo.domain.exceptions import SudoGateError


class SignatureError(SudoGateError):
    """Base class for signature-related errors."""

    pass


class MalformedSignatureError(SignatureError):
    """Raised when a raw signature blob is not exactly 65 bytes.

    Attributes:
        length: Length of the rejected signature in bytes.
        expected_length: Required signature length in bytes.
    """

    def __init__(self, length: int, expected_length: int = 65) -> None:
        self.length = length
        self.expected_length = expected_length
        super().__init__(
            f"Malformed signature - expected {expected_length} bytes, got {length}"
        )


class MalformedBatchError(SignatureError):
    """Raised when signature batch component arrays differ in length.

    The batch is rejected before any cryptographic work is done.

    Attributes:
        recovery_id_count: Number of recovery ids submitted.
        r_count: Number of r scalars submitted.
        s_count: Number of s scalars submitted.
    """

    def __init__(self, recovery_id_count: int, r_count: int, s_count: int) -> None:
        self.recovery_id_count = recovery_id_count
        self.r_count = r_count
        self.s_count = s_count
        super().__init__(
            "Malformed signature batch - component arrays must have equal length "
            f"(recovery_ids={recovery_id_count}, r={r_count}, s={s_count})"
        )


class InvalidSignerError(SignatureError):
    """Raised when a signature does not recover to a valid signer.

    There is no partial credit: one invalid signature aborts the
    entire authorization attempt.

    Attributes:
        signature_index: Position of the failing signature in the batch.
    """

    def __init__(self, signature_index: int) -> None:
        self.signature_index = signature_index
        super().__init__(
            f"Invalid signer - signature at index {signature_index} "
            "does not recover to a valid identity"
        )
