"""Infrastructure stubs for development and testing.

Available stubs:
- AuthorityDirectoryStub: In-memory, rotatable authority list with
  injectable failure and delay
- SudoCommandEmitterStub: Captures emitted commands for assertions

WARNING: These stubs are NOT for production use.
Production implementations are in quorum_sudo/infrastructure/adapters/.
"""

from quorum_sudo.infrastructure.stubs.authority_directory_stub import (
    AuthorityDirectoryStub,
)
from quorum_sudo.infrastructure.stubs.sudo_command_emitter_stub import (
    SudoCommandEmitterStub,
)

__all__: list[str] = [
    "AuthorityDirectoryStub",
    "SudoCommandEmitterStub",
]
