"""Operation request errors for Quorum Sudo."""

from __future__ import annotations

from quorum_sudo.domain.exceptions import SudoGateError


class MalformedOperationError(SudoGateError):
    """Raised when an operation request field cannot be canonically encoded.

    Examples: a target that is not a 20-byte address, a balance outside
    the uint256 range, or a storage key that is not a 32-byte word.

    Attributes:
        field_name: Name of the offending field.
    """

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Malformed operation - {field_name}: {reason}")
