"""Sudo Authorization Service.

Orchestrates majority-signature authorization of privileged operations:
hash the operation against the current nonce, fetch the authority list,
recover and match signers, then advance the nonce and emit the command.

Operating Rules:
- The nonce advances by exactly 1 per successful submission and is never
  decreased, skipped on failure, or reset
- Every submission hashes with the nonce read at verification time, not
  a value supplied by the caller
- Submissions are serialized: nonce read, authority fetch, verification
  and nonce increment form one atomic unit per engine instance
- Any failure, cancellation included, is terminal for the call and leaves
  no observable change

State machine (per submission):
    IDLE -> HASHING -> VERIFYING -> COMMITTED | REJECTED
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

from structlog import get_logger

from quorum_sudo.application.ports.authority_directory import (
    AuthorityDirectoryProtocol,
)
from quorum_sudo.application.ports.signer_recovery import SignerRecoveryProtocol
from quorum_sudo.application.ports.sudo_command_emitter import SudoCommandEmitterPort
from quorum_sudo.domain.errors import (
    CommandEmissionError,
    DirectoryUnavailableError,
    InsufficientSignaturesError,
    InvalidSignerError,
    MalformedBatchError,
    MalformedOperationError,
)
from quorum_sudo.domain.events.sudo_command import (
    SetBalanceCommand,
    SetCodeCommand,
    SetStorageCommand,
    SudoCommand,
)
from quorum_sudo.domain.models.identity import normalize_address
from quorum_sudo.domain.models.operation import (
    OperationRequest,
    SetBalanceRequest,
    SetCodeRequest,
    SetStorageRequest,
)
from quorum_sudo.domain.models.signature import DecomposedSignature, SignatureBatch
from quorum_sudo.domain.services.operation_hasher import compute_operation_hash
from quorum_sudo.domain.services.signature_codec import decompose_signature
from quorum_sudo.domain.services.threshold_matcher import (
    majority_threshold,
    match_threshold,
)

logger = get_logger()

DEFAULT_DIRECTORY_TIMEOUT_SECONDS: float = 5.0


class AuthorizationState(Enum):
    """Lifecycle of a single submission."""

    IDLE = "idle"
    HASHING = "hashing"
    VERIFYING = "verifying"
    COMMITTED = "committed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class AuthoritySnapshot:
    """Authority list and threshold as seen at one moment.

    Attributes:
        authorities: Ordered authority addresses.
        threshold: Signatures required against this list.
    """

    authorities: tuple[str, ...]
    threshold: int


class SudoAuthorizationService:
    """Majority-signature authorization engine.

    This service provides:
    1. *_op_hash(): the payload authorities must sign for an operation
    2. set_balance() / set_code() / set_storage(): authorize and emit
    3. decompose_sig(): split a raw 65-byte signature for batch assembly

    The replay-protection nonce is owned by the instance. Run exactly one
    engine per governed ledger.

    Attributes:
        _directory: Source of the current ordered authority list.
        _recovery: Signer recovery implementation.
        _emitter: Destination for authorized commands.
    """

    def __init__(
        self,
        directory: AuthorityDirectoryProtocol,
        recovery: SignerRecoveryProtocol,
        emitter: SudoCommandEmitterPort,
        initial_nonce: int = 0,
        directory_timeout_seconds: float = DEFAULT_DIRECTORY_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the authorization service.

        Args:
            directory: Authority directory port.
            recovery: Signer recovery port.
            emitter: Command emitter port.
            initial_nonce: Nonce to resume from (0 for a fresh deployment).
            directory_timeout_seconds: Upper bound on one directory query.

        Raises:
            ValueError: If initial_nonce is negative or timeout not positive.
        """
        if initial_nonce < 0:
            raise ValueError(f"initial_nonce must be non-negative, got {initial_nonce}")
        if directory_timeout_seconds <= 0:
            raise ValueError(
                "directory_timeout_seconds must be positive, "
                f"got {directory_timeout_seconds}"
            )
        self._directory = directory
        self._recovery = recovery
        self._emitter = emitter
        self._nonce = initial_nonce
        self._directory_timeout_seconds = directory_timeout_seconds
        self._state = AuthorizationState.IDLE
        self._lock = asyncio.Lock()

    @property
    def nonce(self) -> int:
        """Current replay-protection nonce."""
        return self._nonce

    @property
    def state(self) -> AuthorizationState:
        """State of the current (or most recent) submission."""
        return self._state

    # ------------------------------------------------------------------
    # Operation hashes (pure reads of the current nonce)
    # ------------------------------------------------------------------

    def compute_op_hash(self, request: OperationRequest) -> bytes:
        """Operation hash for a request bound to the current nonce.

        Calling this any number of times without an intervening successful
        submission returns the same value.
        """
        return compute_operation_hash(request, self._nonce)

    def set_balance_op_hash(self, target: str, new_balance: int) -> bytes:
        return self.compute_op_hash(
            SetBalanceRequest(target=target, new_balance=new_balance)
        )

    def set_code_op_hash(self, target: str, new_code: bytes) -> bytes:
        return self.compute_op_hash(SetCodeRequest(target=target, new_code=new_code))

    def set_storage_op_hash(self, target: str, key: bytes, value: bytes) -> bytes:
        return self.compute_op_hash(
            SetStorageRequest(target=target, key=key, value=value)
        )

    def decompose_sig(self, signature: bytes) -> DecomposedSignature:
        """Split a raw 65-byte signature into (recovery_id, r, s).

        Raises:
            MalformedSignatureError: If the signature is not 65 bytes.
        """
        return decompose_signature(signature)

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------

    async def set_balance(
        self, target: str, new_balance: int, signatures: SignatureBatch
    ) -> SetBalanceCommand:
        command = await self.submit(
            SetBalanceRequest(target=target, new_balance=new_balance), signatures
        )
        return cast(SetBalanceCommand, command)

    async def set_code(
        self, target: str, new_code: bytes, signatures: SignatureBatch
    ) -> SetCodeCommand:
        command = await self.submit(
            SetCodeRequest(target=target, new_code=new_code), signatures
        )
        return cast(SetCodeCommand, command)

    async def set_storage(
        self, target: str, key: bytes, value: bytes, signatures: SignatureBatch
    ) -> SetStorageCommand:
        command = await self.submit(
            SetStorageRequest(target=target, key=key, value=value), signatures
        )
        return cast(SetStorageCommand, command)

    async def submit(
        self, request: OperationRequest, signatures: SignatureBatch
    ) -> SudoCommand:
        """Authorize an operation and emit its command.

        Args:
            request: The operation to authorize.
            signatures: Signature batch ordered like the authority list.

        Returns:
            The emitted command.

        Raises:
            MalformedBatchError: Signature arrays differ in length.
            DirectoryUnavailableError: Authority list could not be fetched.
            InvalidSignerError: A signature failed recovery.
            InsufficientSignaturesError: Majority not reached.
            CommandEmissionError: The command could not be emitted.
        """
        log = logger.bind(
            operation="submit",
            kind=request.kind.name,
            target=request.target,
            signature_count=len(signatures.recovery_ids),
        )

        async with self._lock:
            self._transition(AuthorizationState.HASHING, log)

            if not signatures.is_well_formed:
                log.warning(
                    "sudo_rejected_malformed_batch",
                    recovery_ids=len(signatures.recovery_ids),
                    r=len(signatures.r),
                    s=len(signatures.s),
                )
                self._transition(AuthorizationState.REJECTED, log)
                raise MalformedBatchError(
                    recovery_id_count=len(signatures.recovery_ids),
                    r_count=len(signatures.r),
                    s_count=len(signatures.s),
                )

            nonce = self._nonce
            op_hash = compute_operation_hash(request, nonce)
            log = log.bind(nonce=nonce, op_hash=op_hash.hex())

            self._transition(AuthorizationState.VERIFYING, log)
            try:
                authorities = await self._fetch_authorities(log)
                result = match_threshold(
                    op_hash, signatures, authorities, self._recovery.recover
                )
            except (DirectoryUnavailableError, asyncio.CancelledError):
                self._transition(AuthorizationState.REJECTED, log)
                raise
            except InvalidSignerError as e:
                log.warning(
                    "sudo_rejected_invalid_signer",
                    signature_index=e.signature_index,
                )
                self._transition(AuthorizationState.REJECTED, log)
                raise

            if not result.satisfied:
                log.warning(
                    "sudo_rejected_insufficient_signatures",
                    matched=result.matched,
                    threshold=result.threshold,
                    authority_count=result.authority_count,
                )
                self._transition(AuthorizationState.REJECTED, log)
                raise InsufficientSignaturesError(
                    matched=result.matched,
                    threshold=result.threshold,
                    authority_count=result.authority_count,
                )

            command = self._build_command(request, nonce, op_hash)
            self._nonce = nonce + 1
            try:
                await self._emitter.emit_command(command)
            except asyncio.CancelledError:
                self._nonce = nonce
                log.warning(
                    "sudo_command_emission_cancelled",
                    event_type=command.event_type,
                )
                self._transition(AuthorizationState.REJECTED, log)
                raise
            except Exception as e:
                # Nothing outside the lock has seen the increment yet.
                self._nonce = nonce
                log.error(
                    "sudo_command_emission_failed",
                    event_type=command.event_type,
                    error=str(e),
                )
                self._transition(AuthorizationState.REJECTED, log)
                raise CommandEmissionError(command.event_type, str(e)) from e

            self._transition(AuthorizationState.COMMITTED, log)
            log.info(
                "sudo_committed",
                event_type=command.event_type,
                matched=result.matched,
                threshold=result.threshold,
                new_nonce=self._nonce,
            )
            return command

    async def get_authority_snapshot(self) -> AuthoritySnapshot:
        """Fetch the current authority list and its threshold.

        Submitters use this to order collected signatures before submitting.

        Raises:
            DirectoryUnavailableError: Authority list could not be fetched.
        """
        log = logger.bind(operation="get_authority_snapshot")
        authorities = await self._fetch_authorities(log)
        return AuthoritySnapshot(
            authorities=tuple(authorities),
            threshold=majority_threshold(len(authorities)),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _fetch_authorities(self, log: Any) -> list[str]:
        """Query the directory with a bounded wait and validate the result."""
        try:
            raw = await asyncio.wait_for(
                self._directory.get_authorities(),
                timeout=self._directory_timeout_seconds,
            )
        except DirectoryUnavailableError as e:
            log.error("authority_directory_failed", reason=e.reason)
            raise
        except asyncio.TimeoutError:
            log.error(
                "authority_directory_timeout",
                timeout_seconds=self._directory_timeout_seconds,
            )
            raise DirectoryUnavailableError(
                f"query timed out after {self._directory_timeout_seconds}s"
            ) from None
        except Exception as e:
            log.error("authority_directory_failed", reason=str(e))
            raise DirectoryUnavailableError(str(e)) from e

        if not isinstance(raw, (list, tuple)):
            log.error("authority_directory_malformed", response_type=type(raw).__name__)
            raise DirectoryUnavailableError("response is not a list of addresses")
        try:
            authorities = [normalize_address(entry, "authority") for entry in raw]
        except MalformedOperationError as e:
            log.error("authority_directory_malformed", reason=e.reason)
            raise DirectoryUnavailableError(
                f"malformed authority entry: {e.reason}"
            ) from e

        log.debug("authorities_fetched", authority_count=len(authorities))
        return authorities

    def _transition(self, state: AuthorizationState, log: Any) -> None:
        log.debug(
            "authorization_state_changed",
            from_state=self._state.value,
            to_state=state.value,
        )
        self._state = state

    @staticmethod
    def _build_command(
        request: OperationRequest, nonce: int, op_hash: bytes
    ) -> SudoCommand:
        if isinstance(request, SetBalanceRequest):
            return SetBalanceCommand(
                target=request.target,
                new_balance=request.new_balance,
                nonce=nonce,
                op_hash=op_hash,
            )
        if isinstance(request, SetCodeRequest):
            return SetCodeCommand(
                target=request.target,
                new_code=request.new_code,
                nonce=nonce,
                op_hash=op_hash,
            )
        return SetStorageCommand(
            target=request.target,
            key=request.key,
            value=request.value,
            nonce=nonce,
            op_hash=op_hash,
        )

