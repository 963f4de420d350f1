"""Sudo API request/response models.

Pydantic models for the authorization gate endpoints. Binary values
(addresses excepted) travel as 0x-prefixed hex strings; uint256 values
are accepted as JSON integers or decimal strings and returned as decimal
strings.

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic handles schema and hex validation (422)
2. DOMAIN RULES IN DOMAIN - Address/word-length checks raise domain errors (400)
3. FAIL LOUD - Rejections return RFC 7807 style problem details
"""

from typing import Annotated, Union

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer


def _decode_hex(value: object) -> bytes:
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        raise ValueError("expected a hex string")
    digits = value[2:] if value[:2].lower() == "0x" else value
    try:
        return bytes.fromhex(digits)
    except ValueError:
        raise ValueError("invalid hex string") from None


def _parse_uint(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError("expected an unsigned integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 0) if value[:2].lower() == "0x" else int(value)
        except ValueError:
            raise ValueError("expected an unsigned integer string") from None
    raise ValueError("expected an unsigned integer")


HexBytes = Annotated[
    bytes,
    BeforeValidator(_decode_hex),
    PlainSerializer(lambda v: "0x" + v.hex(), return_type=str),
]

UintValue = Annotated[int, BeforeValidator(_parse_uint)]


class SignatureBatchModel(BaseModel):
    """Parallel signature arrays, ordered like the authority list.

    Unequal lengths are accepted here and rejected by the engine (400).
    """

    recovery_ids: list[int] = Field(..., description="Recovery id (v) per signature")
    r: list[HexBytes] = Field(..., description="32-byte r scalar per signature")
    s: list[HexBytes] = Field(..., description="32-byte s scalar per signature")


class SetBalanceOpHashRequest(BaseModel):
    """Operation fields for a balance adjustment."""

    target: str = Field(..., description="Target account address")
    new_balance: UintValue = Field(..., description="Balance to set (uint256)")


class SetBalanceSubmitRequest(SetBalanceOpHashRequest):
    """Balance adjustment with its authorizing signatures."""

    signatures: SignatureBatchModel


class SetCodeOpHashRequest(BaseModel):
    """Operation fields for a code replacement."""

    target: str = Field(..., description="Target account address")
    new_code: HexBytes = Field(..., description="Replacement code (hex)")


class SetCodeSubmitRequest(SetCodeOpHashRequest):
    """Code replacement with its authorizing signatures."""

    signatures: SignatureBatchModel


class SetStorageOpHashRequest(BaseModel):
    """Operation fields for a storage write."""

    target: str = Field(..., description="Target account address")
    key: HexBytes = Field(..., description="32-byte storage slot (hex)")
    value: HexBytes = Field(..., description="32-byte value (hex)")


class SetStorageSubmitRequest(SetStorageOpHashRequest):
    """Storage write with its authorizing signatures."""

    signatures: SignatureBatchModel


class OpHashResponse(BaseModel):
    """The payload authorities must sign.

    Attributes:
        op_hash: 32-byte operation hash (hex).
        nonce: Nonce the hash is bound to.
    """

    op_hash: HexBytes
    nonce: int


class CommittedResponse(BaseModel):
    """Response after a successful authorization.

    Attributes:
        command: The emitted command as delivered to the executor.
        new_nonce: Nonce after the commit.
    """

    command: dict[str, Union[str, int]]
    new_nonce: int


class NonceResponse(BaseModel):
    """Current replay-protection nonce."""

    nonce: int


class AuthoritiesResponse(BaseModel):
    """Current authority list and the matching threshold."""

    authorities: list[str]
    threshold: int


class DecomposeSignatureRequest(BaseModel):
    """A raw 65-byte signature (hex)."""

    signature: HexBytes


class DecomposeSignatureResponse(BaseModel):
    """Signature components ready for a SignatureBatchModel."""

    recovery_id: int
    r: HexBytes
    s: HexBytes


class SudoErrorResponse(BaseModel):
    """RFC 7807 problem details for authorization failures."""

    type: str
    title: str
    status: int
    detail: str
    instance: str
