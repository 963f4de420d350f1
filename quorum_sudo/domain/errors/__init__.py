"""Domain errors for Quorum Sudo.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from SudoGateError.
"""

from quorum_sudo.domain.errors.authorization import (
    AuthorizationError,
    CommandEmissionError,
    DirectoryUnavailableError,
    InsufficientSignaturesError,
)
from quorum_sudo.domain.errors.operation import MalformedOperationError
from quorum_sudo.domain.errors.signature import (
    InvalidSignerError,
    MalformedBatchError,
    MalformedSignatureError,
    SignatureError,
)

__all__: list[str] = [
    "AuthorizationError",
    "CommandEmissionError",
    "DirectoryUnavailableError",
    "InsufficientSignaturesError",
    "InvalidSignerError",
    "MalformedBatchError",
    "MalformedOperationError",
    "MalformedSignatureError",
    "SignatureError",
]
