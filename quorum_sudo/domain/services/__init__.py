"""Pure domain services: signature codec, operation hasher, threshold matcher."""

from quorum_sudo.domain.services.operation_hasher import (
    OP_HASH_LENGTH,
    compute_operation_hash,
    encode_operation,
    encode_uint256,
)
from quorum_sudo.domain.services.signature_codec import (
    batch_from_signatures,
    compose_signature,
    decompose_signature,
)
from quorum_sudo.domain.services.threshold_matcher import (
    RecoverFn,
    ThresholdMatch,
    majority_threshold,
    match_threshold,
)

__all__: list[str] = [
    "OP_HASH_LENGTH",
    "RecoverFn",
    "ThresholdMatch",
    "batch_from_signatures",
    "compose_signature",
    "compute_operation_hash",
    "decompose_signature",
    "encode_operation",
    "encode_uint256",
    "majority_threshold",
    "match_threshold",
]
