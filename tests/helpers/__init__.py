"""Test helpers for Quorum Sudo tests.

This package contains reusable test utilities for signing operation
hashes with deterministic secp256k1 keys.

Helpers:
    TestSigner: Deterministic authority key that signs operation hashes
    make_signers: Build N signers with stable, distinct keys
    batch_for: Assemble a SignatureBatch from signers in a given order

Usage:
    from tests.helpers import make_signers, batch_for
"""

from tests.helpers.signing import TestSigner, batch_for, make_signers

__all__ = ["TestSigner", "batch_for", "make_signers"]
