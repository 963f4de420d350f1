"""Signature value objects.

A raw signature is 65 bytes laid out as r (32) || s (32) || v (1).
Submitters pass signatures as a SignatureBatch: three parallel arrays
holding the recovery ids, r scalars and s scalars in submission order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

SIGNATURE_LENGTH: int = 65
SCALAR_LENGTH: int = 32


@dataclass(frozen=True)
class DecomposedSignature:
    """The three components of one signature.

    Attributes:
        recovery_id: Final signature byte (27 or 28 for a valid signature).
        r: First 32-byte scalar.
        s: Second 32-byte scalar.
    """

    recovery_id: int
    r: bytes
    s: bytes


@dataclass(frozen=True, init=False)
class SignatureBatch:
    """Parallel arrays describing a set of signatures.

    The arrays are not validated on construction: a batch with unequal
    lengths is a legitimate input that the engine must reject with
    MalformedBatchError before any cryptographic work.

    Attributes:
        recovery_ids: Recovery id per signature.
        r: First scalar per signature.
        s: Second scalar per signature.
    """

    recovery_ids: tuple[int, ...]
    r: tuple[bytes, ...]
    s: tuple[bytes, ...]

    def __init__(
        self,
        recovery_ids: Sequence[int],
        r: Sequence[bytes],
        s: Sequence[bytes],
    ) -> None:
        object.__setattr__(self, "recovery_ids", tuple(recovery_ids))
        object.__setattr__(self, "r", tuple(bytes(x) for x in r))
        object.__setattr__(self, "s", tuple(bytes(x) for x in s))

    @property
    def is_well_formed(self) -> bool:
        """True when all three component arrays have the same length."""
        return len(self.recovery_ids) == len(self.r) == len(self.s)

    def __len__(self) -> int:
        return len(self.recovery_ids)

    def __iter__(self) -> Iterator[DecomposedSignature]:
        for recovery_id, r, s in zip(self.recovery_ids, self.r, self.s, strict=True):
            yield DecomposedSignature(recovery_id=recovery_id, r=r, s=s)

    @classmethod
    def from_components(
        cls, signatures: Iterable[DecomposedSignature]
    ) -> "SignatureBatch":
        """Build a batch from already decomposed signatures."""
        items = list(signatures)
        return cls(
            recovery_ids=[sig.recovery_id for sig in items],
            r=[sig.r for sig in items],
            s=[sig.s for sig in items],
        )
