"""Ordered majority matching of recovered signers against authorities.

Signatures must be submitted in the same relative order as the authority
list. A single forward cursor walks the authority list while signatures
are consumed in submission order, which keeps the scan linear in
(signatures + authorities). The cursor never rewinds, so an out-of-order
batch under-counts even when every signature is genuine.

Rules:
- threshold = len(authorities) // 2 + 1 (1 for an empty list, never reachable)
- scanning stops as soon as matched == threshold; remaining signatures
  are not examined at all
- a signature that fails recovery aborts the whole match
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from quorum_sudo.domain.errors.signature import InvalidSignerError
from quorum_sudo.domain.models.signature import SignatureBatch

# (digest, recovery_id, r, s) -> address, or None when recovery fails
RecoverFn = Callable[[bytes, int, bytes, bytes], "str | None"]


def majority_threshold(authority_count: int) -> int:
    """Number of matching signers required for a list of this size."""
    return authority_count // 2 + 1


@dataclass(frozen=True)
class ThresholdMatch:
    """Outcome of one threshold match.

    Attributes:
        matched: Signatures matched to an authority.
        threshold: Matches required.
        authority_count: Size of the authority list.
        signatures_examined: Signatures recovered before the scan ended.
    """

    matched: int
    threshold: int
    authority_count: int
    signatures_examined: int

    @property
    def satisfied(self) -> bool:
        return self.matched >= self.threshold


def match_threshold(
    digest: bytes,
    batch: SignatureBatch,
    authorities: Sequence[str],
    recover: RecoverFn,
) -> ThresholdMatch:
    """Count signatures from distinct, in-order authorities up to majority.

    Args:
        digest: The operation hash the signatures must cover.
        batch: Well-formed signature batch in submission order.
        authorities: Current ordered authority list (normalized addresses).
        recover: Signer recovery function.

    Returns:
        ThresholdMatch describing the outcome.

    Raises:
        InvalidSignerError: If any examined signature fails recovery.
    """
    threshold = majority_threshold(len(authorities))
    matched = 0
    cursor = 0
    examined = 0

    for index, signature in enumerate(batch):
        if matched == threshold:
            break
        examined += 1
        signer = recover(digest, signature.recovery_id, signature.r, signature.s)
        if signer is None:
            raise InvalidSignerError(signature_index=index)

        while cursor < len(authorities):
            candidate = authorities[cursor]
            cursor += 1
            if candidate == signer:
                matched += 1
                break

    return ThresholdMatch(
        matched=matched,
        threshold=threshold,
        authority_count=len(authorities),
        signatures_examined=examined,
    )
