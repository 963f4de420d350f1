"""Authorization errors for Quorum Sudo.

Failures that end a submission after the request itself was well formed:
the authority directory could not be queried, the signer count stayed
below threshold, or the authorized command could not be emitted.

All of these are terminal for the current call. The nonce is left
untouched and callers retry with a corrected submission.
"""

from __future__ import annotations

from quorum_sudo.domain.exceptions import SudoGateError


class AuthorizationError(SudoGateError):
    """Base class for authorization failures."""

    pass


class DirectoryUnavailableError(AuthorizationError):
    """Raised when the authority directory query fails or returns bad data.

    A failed query is never replaced by an empty or cached list.

    Attributes:
        reason: Short description of the failure.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Authority directory unavailable - {reason}")


class InsufficientSignaturesError(AuthorizationError):
    """Raised when matched signers did not reach the majority threshold.

    Attributes:
        matched: Number of signatures matched against the authority list.
        threshold: Number of matches required.
        authority_count: Size of the authority list used for the decision.
    """

    def __init__(self, matched: int, threshold: int, authority_count: int) -> None:
        self.matched = matched
        self.threshold = threshold
        self.authority_count = authority_count
        super().__init__(
            f"Insufficient signatures - matched {matched} of {threshold} required "
            f"({authority_count} authorities)"
        )


class CommandEmissionError(AuthorizationError):
    """Raised when an authorized command could not be handed to the executor.

    The nonce increment is rolled back before the engine lock is released,
    so the failed commit is never observable.

    Attributes:
        command_type: Event type of the command that failed to emit.
    """

    def __init__(self, command_type: str, reason: str) -> None:
        self.command_type = command_type
        self.reason = reason
        super().__init__(f"Failed to emit {command_type} command - {reason}")
