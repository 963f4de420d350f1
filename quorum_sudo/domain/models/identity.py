"""Account identity helpers.

Authorities and operation targets are 20-byte account addresses. The
canonical text form is lowercase, 0x-prefixed hex so that identities
compare equal regardless of how a caller or directory capitalised them.
"""

from __future__ import annotations

from quorum_sudo.domain.errors.operation import MalformedOperationError

ADDRESS_LENGTH: int = 20


def normalize_address(value: str, field_name: str = "address") -> str:
    """Return the canonical form of a 20-byte hex address.

    Args:
        value: Hex address, with or without 0x prefix, any case.
        field_name: Field name reported if the value is rejected.

    Returns:
        Lowercase 0x-prefixed 40-character hex string.

    Raises:
        MalformedOperationError: If value is not a 20-byte hex string.
    """
    if not isinstance(value, str):
        raise MalformedOperationError(field_name, "address must be a hex string")
    digits = value[2:] if value[:2].lower() == "0x" else value
    if len(digits) != ADDRESS_LENGTH * 2:
        raise MalformedOperationError(
            field_name, f"address must be {ADDRESS_LENGTH} bytes, got {value!r}"
        )
    try:
        bytes.fromhex(digits)
    except ValueError:
        raise MalformedOperationError(
            field_name, f"address is not valid hex: {value!r}"
        ) from None
    return "0x" + digits.lower()


def address_to_bytes(address: str) -> bytes:
    """Convert a normalized address to its 20 raw bytes."""
    return bytes.fromhex(normalize_address(address)[2:])
