"""Bootstrap wiring for authorization engine dependencies.

Singletons are created lazily from SudoGateConfig. The directory is the
HTTP adapter when a directory URL is configured, otherwise the in-memory
stub. The engine is a single shared instance: it owns the nonce, so
exactly one must serve a governed ledger.
"""

from __future__ import annotations

from quorum_sudo.application.ports.authority_directory import (
    AuthorityDirectoryProtocol,
)
from quorum_sudo.application.ports.signer_recovery import SignerRecoveryProtocol
from quorum_sudo.application.ports.sudo_command_emitter import SudoCommandEmitterPort
from quorum_sudo.application.services.sudo_authorization_service import (
    SudoAuthorizationService,
)
from quorum_sudo.config.sudo_config import SudoGateConfig
from quorum_sudo.infrastructure.adapters.http_authority_directory import (
    HttpAuthorityDirectory,
)
from quorum_sudo.infrastructure.adapters.secp256k1_signer_recovery import (
    Secp256k1SignerRecovery,
)
from quorum_sudo.infrastructure.stubs.authority_directory_stub import (
    AuthorityDirectoryStub,
)
from quorum_sudo.infrastructure.stubs.sudo_command_emitter_stub import (
    SudoCommandEmitterStub,
)

_config: SudoGateConfig | None = None
_authority_directory: AuthorityDirectoryProtocol | None = None
_signer_recovery: SignerRecoveryProtocol | None = None
_command_emitter: SudoCommandEmitterPort | None = None
_authorization_service: SudoAuthorizationService | None = None


def get_sudo_config() -> SudoGateConfig:
    """Get the gate configuration (read from environment on first use)."""
    global _config
    if _config is None:
        _config = SudoGateConfig.from_environment()
    return _config


def get_authority_directory() -> AuthorityDirectoryProtocol:
    """Get authority directory instance."""
    global _authority_directory
    if _authority_directory is None:
        config = get_sudo_config()
        if config.directory_url:
            _authority_directory = HttpAuthorityDirectory(
                base_url=config.directory_url,
                timeout=config.directory_timeout_seconds,
            )
        else:
            _authority_directory = AuthorityDirectoryStub()
    return _authority_directory


def get_signer_recovery() -> SignerRecoveryProtocol:
    """Get signer recovery instance."""
    global _signer_recovery
    if _signer_recovery is None:
        _signer_recovery = Secp256k1SignerRecovery()
    return _signer_recovery


def get_command_emitter() -> SudoCommandEmitterPort:
    """Get command emitter instance."""
    global _command_emitter
    if _command_emitter is None:
        _command_emitter = SudoCommandEmitterStub()
    return _command_emitter


def get_authorization_service() -> SudoAuthorizationService:
    """Get the shared authorization engine."""
    global _authorization_service
    if _authorization_service is None:
        config = get_sudo_config()
        _authorization_service = SudoAuthorizationService(
            directory=get_authority_directory(),
            recovery=get_signer_recovery(),
            emitter=get_command_emitter(),
            initial_nonce=config.initial_nonce,
            directory_timeout_seconds=config.directory_timeout_seconds,
        )
    return _authorization_service


def set_sudo_config(config: SudoGateConfig) -> None:
    """Set gate configuration (for testing)."""
    global _config
    _config = config


def set_authority_directory(directory: AuthorityDirectoryProtocol) -> None:
    """Set authority directory (for testing)."""
    global _authority_directory
    _authority_directory = directory


def set_command_emitter(emitter: SudoCommandEmitterPort) -> None:
    """Set command emitter (for testing)."""
    global _command_emitter
    _command_emitter = emitter


def set_authorization_service(service: SudoAuthorizationService) -> None:
    """Set authorization service (for testing)."""
    global _authorization_service
    _authorization_service = service


def reset_sudo_dependencies() -> None:
    """Reset all singletons (for testing)."""
    global _config
    global _authority_directory
    global _signer_recovery
    global _command_emitter
    global _authorization_service
    _config = None
    _authority_directory = None
    _signer_recovery = None
    _command_emitter = None
    _authorization_service = None


async def close_sudo_dependencies() -> None:
    """Release resources held by the wired singletons (application shutdown).

    Only the HTTP directory owns a connection pool. The engine and its nonce
    are left in place.
    """
    if isinstance(_authority_directory, HttpAuthorityDirectory):
        await _authority_directory.close()
