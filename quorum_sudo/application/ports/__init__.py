"""Application ports (abstract interfaces) for Quorum Sudo.

Infrastructure adapters and stubs implement these.
"""

from quorum_sudo.application.ports.authority_directory import (
    AuthorityDirectoryProtocol,
)
from quorum_sudo.application.ports.signer_recovery import SignerRecoveryProtocol
from quorum_sudo.application.ports.sudo_command_emitter import SudoCommandEmitterPort

__all__: list[str] = [
    "AuthorityDirectoryProtocol",
    "SignerRecoveryProtocol",
    "SudoCommandEmitterPort",
]
