"""
Pytest configuration and shared fixtures for Quorum Sudo tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
"""

import pytest

from quorum_sudo.application.services.sudo_authorization_service import (
    SudoAuthorizationService,
)
from quorum_sudo.bootstrap.sudo import reset_sudo_dependencies
from quorum_sudo.infrastructure.adapters.secp256k1_signer_recovery import (
    Secp256k1SignerRecovery,
)
from quorum_sudo.infrastructure.stubs import (
    AuthorityDirectoryStub,
    SudoCommandEmitterStub,
)
from tests.helpers import TestSigner, make_signers

TARGET = "0x" + "11" * 20


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from quorum_sudo import __version__

    return __version__


@pytest.fixture
def target() -> str:
    """A valid target account address."""
    return TARGET


@pytest.fixture
def signers() -> list[TestSigner]:
    """Three authority signers, in authority-list order."""
    return make_signers(3)


@pytest.fixture
def directory(signers: list[TestSigner]) -> AuthorityDirectoryStub:
    """Directory stub serving the three signers' addresses."""
    return AuthorityDirectoryStub([s.address for s in signers])


@pytest.fixture
def emitter() -> SudoCommandEmitterStub:
    return SudoCommandEmitterStub()


@pytest.fixture
def service(
    directory: AuthorityDirectoryStub, emitter: SudoCommandEmitterStub
) -> SudoAuthorizationService:
    """Engine wired to in-memory stubs and real secp256k1 recovery."""
    return SudoAuthorizationService(
        directory=directory,
        recovery=Secp256k1SignerRecovery(),
        emitter=emitter,
        directory_timeout_seconds=0.5,
    )


@pytest.fixture(autouse=True)
def _reset_bootstrap():
    """Keep bootstrap singletons from leaking between tests."""
    reset_sudo_dependencies()
    yield
    reset_sudo_dependencies()
