"""
Quorum Sudo - Majority-signature authorization gate

Privileged account operations (balance adjustment, code replacement,
storage write) are authorized only when a majority of the current
authority set has signed the exact, nonce-bound operation. Authorized
operations are emitted as declarative commands for an external executor.

Operating Rules:
- No single key has unilateral power
- Every authorization is single-use (nonce-bound)
- Failed attempts change nothing
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
