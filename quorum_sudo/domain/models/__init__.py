"""Domain models for Quorum Sudo."""

from quorum_sudo.domain.models.identity import (
    ADDRESS_LENGTH,
    address_to_bytes,
    normalize_address,
)
from quorum_sudo.domain.models.operation import (
    UINT256_MAX,
    WORD_LENGTH,
    OperationKind,
    OperationRequest,
    SetBalanceRequest,
    SetCodeRequest,
    SetStorageRequest,
)
from quorum_sudo.domain.models.signature import (
    SCALAR_LENGTH,
    SIGNATURE_LENGTH,
    DecomposedSignature,
    SignatureBatch,
)

__all__: list[str] = [
    "ADDRESS_LENGTH",
    "SCALAR_LENGTH",
    "SIGNATURE_LENGTH",
    "UINT256_MAX",
    "WORD_LENGTH",
    "DecomposedSignature",
    "OperationKind",
    "OperationRequest",
    "SetBalanceRequest",
    "SetCodeRequest",
    "SetStorageRequest",
    "SignatureBatch",
    "address_to_bytes",
    "normalize_address",
]
