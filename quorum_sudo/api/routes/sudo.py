"""Sudo API routes.

FastAPI router exposing the authorization gate. Any caller may compute
operation hashes or submit signed operations; the signature majority
check is the only access control.

Error mapping (RFC 7807 problem details):
- 400: malformed signature, batch or operation; invalid signer
- 403: insufficient signatures
- 503: authority directory unavailable
- 500: authorized command could not be emitted
"""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request

from quorum_sudo.api.dependencies.sudo import get_sudo_authorization_service
from quorum_sudo.api.models.sudo import (
    AuthoritiesResponse,
    CommittedResponse,
    DecomposeSignatureRequest,
    DecomposeSignatureResponse,
    NonceResponse,
    OpHashResponse,
    SetBalanceOpHashRequest,
    SetBalanceSubmitRequest,
    SetCodeOpHashRequest,
    SetCodeSubmitRequest,
    SetStorageOpHashRequest,
    SetStorageSubmitRequest,
    SignatureBatchModel,
    SudoErrorResponse,
)
from quorum_sudo.application.services.sudo_authorization_service import (
    SudoAuthorizationService,
)
from quorum_sudo.domain.errors import (
    CommandEmissionError,
    DirectoryUnavailableError,
    InsufficientSignaturesError,
    InvalidSignerError,
    MalformedBatchError,
    MalformedOperationError,
    MalformedSignatureError,
)
from quorum_sudo.domain.events.sudo_command import SudoCommand
from quorum_sudo.domain.models.signature import SignatureBatch

router = APIRouter(prefix="/v1/sudo", tags=["sudo"])

_ERROR_RESPONSES = {
    400: {"model": SudoErrorResponse, "description": "Malformed input or invalid signer"},
    403: {"model": SudoErrorResponse, "description": "Signature majority not reached"},
    500: {"model": SudoErrorResponse, "description": "Command emission failed"},
    503: {"model": SudoErrorResponse, "description": "Authority directory unavailable"},
}

# exception type -> (status, urn suffix, title)
_PROBLEMS: list[tuple[type[Exception], int, str, str]] = [
    (MalformedSignatureError, 400, "signature:malformed", "Malformed Signature"),
    (MalformedBatchError, 400, "signature:malformed-batch", "Malformed Signature Batch"),
    (MalformedOperationError, 400, "operation:malformed", "Malformed Operation"),
    (InvalidSignerError, 400, "signature:invalid-signer", "Invalid Signer"),
    (InsufficientSignaturesError, 403, "authorization:insufficient", "Insufficient Signatures"),
    (DirectoryUnavailableError, 503, "directory:unavailable", "Authority Directory Unavailable"),
    (CommandEmissionError, 500, "command:emission-failed", "Command Emission Failed"),
]


def _raise_problem(error: Exception, request: Request) -> NoReturn:
    for error_type, status, urn, title in _PROBLEMS:
        if isinstance(error, error_type):
            raise HTTPException(
                status_code=status,
                detail={
                    "type": f"urn:quorum-sudo:{urn}",
                    "title": title,
                    "status": status,
                    "detail": str(error),
                    "instance": str(request.url),
                },
            ) from None
    raise error


def _to_batch(model: SignatureBatchModel) -> SignatureBatch:
    return SignatureBatch(recovery_ids=model.recovery_ids, r=model.r, s=model.s)


def _committed(command: SudoCommand) -> CommittedResponse:
    # The commit advanced the nonce past the one the command was bound to.
    return CommittedResponse(command=command.to_dict(), new_nonce=command.nonce + 1)


@router.get("/nonce", response_model=NonceResponse, summary="Current nonce")
async def get_nonce(
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> NonceResponse:
    return NonceResponse(nonce=service.nonce)


@router.get(
    "/authorities",
    response_model=AuthoritiesResponse,
    responses={503: _ERROR_RESPONSES[503]},
    summary="Current authority list and threshold",
)
async def get_authorities(
    request: Request,
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> AuthoritiesResponse:
    """Return the ordered authority list signatures must follow."""
    try:
        snapshot = await service.get_authority_snapshot()
    except DirectoryUnavailableError as e:
        _raise_problem(e, request)
    return AuthoritiesResponse(
        authorities=list(snapshot.authorities), threshold=snapshot.threshold
    )


@router.post(
    "/set-balance/op-hash",
    response_model=OpHashResponse,
    responses={400: _ERROR_RESPONSES[400]},
    summary="Hash to sign for a balance adjustment",
)
async def set_balance_op_hash(
    request_data: SetBalanceOpHashRequest,
    request: Request,
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> OpHashResponse:
    try:
        nonce = service.nonce
        op_hash = service.set_balance_op_hash(request_data.target, request_data.new_balance)
    except MalformedOperationError as e:
        _raise_problem(e, request)
    return OpHashResponse(op_hash=op_hash, nonce=nonce)


@router.post(
    "/set-balance",
    response_model=CommittedResponse,
    responses=_ERROR_RESPONSES,
    summary="Authorize a balance adjustment",
)
async def set_balance(
    request_data: SetBalanceSubmitRequest,
    request: Request,
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> CommittedResponse:
    try:
        command = await service.set_balance(
            request_data.target,
            request_data.new_balance,
            _to_batch(request_data.signatures),
        )
    except Exception as e:
        _raise_problem(e, request)
    return _committed(command)


@router.post(
    "/set-code/op-hash",
    response_model=OpHashResponse,
    responses={400: _ERROR_RESPONSES[400]},
    summary="Hash to sign for a code replacement",
)
async def set_code_op_hash(
    request_data: SetCodeOpHashRequest,
    request: Request,
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> OpHashResponse:
    try:
        nonce = service.nonce
        op_hash = service.set_code_op_hash(request_data.target, request_data.new_code)
    except MalformedOperationError as e:
        _raise_problem(e, request)
    return OpHashResponse(op_hash=op_hash, nonce=nonce)


@router.post(
    "/set-code",
    response_model=CommittedResponse,
    responses=_ERROR_RESPONSES,
    summary="Authorize a code replacement",
)
async def set_code(
    request_data: SetCodeSubmitRequest,
    request: Request,
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> CommittedResponse:
    try:
        command = await service.set_code(
            request_data.target,
            request_data.new_code,
            _to_batch(request_data.signatures),
        )
    except Exception as e:
        _raise_problem(e, request)
    return _committed(command)


@router.post(
    "/set-storage/op-hash",
    response_model=OpHashResponse,
    responses={400: _ERROR_RESPONSES[400]},
    summary="Hash to sign for a storage write",
)
async def set_storage_op_hash(
    request_data: SetStorageOpHashRequest,
    request: Request,
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> OpHashResponse:
    try:
        nonce = service.nonce
        op_hash = service.set_storage_op_hash(
            request_data.target, request_data.key, request_data.value
        )
    except MalformedOperationError as e:
        _raise_problem(e, request)
    return OpHashResponse(op_hash=op_hash, nonce=nonce)


@router.post(
    "/set-storage",
    response_model=CommittedResponse,
    responses=_ERROR_RESPONSES,
    summary="Authorize a storage write",
)
async def set_storage(
    request_data: SetStorageSubmitRequest,
    request: Request,
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> CommittedResponse:
    try:
        command = await service.set_storage(
            request_data.target,
            request_data.key,
            request_data.value,
            _to_batch(request_data.signatures),
        )
    except Exception as e:
        _raise_problem(e, request)
    return _committed(command)


@router.post(
    "/decompose-signature",
    response_model=DecomposeSignatureResponse,
    responses={400: _ERROR_RESPONSES[400]},
    summary="Split a raw 65-byte signature",
)
async def decompose_signature(
    request_data: DecomposeSignatureRequest,
    request: Request,
    service: SudoAuthorizationService = Depends(get_sudo_authorization_service),
) -> DecomposeSignatureResponse:
    try:
        parts = service.decompose_sig(request_data.signature)
    except MalformedSignatureError as e:
        _raise_problem(e, request)
    return DecomposeSignatureResponse(recovery_id=parts.recovery_id, r=parts.r, s=parts.s)
