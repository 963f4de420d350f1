"""Sudo Command Emitter port.

Hands authorized commands to the external privileged executor. Emission
is the engine's only externally visible effect besides advancing the
nonce; the executor alone applies commands to account state.

Developer Golden Rules:
1. EMIT ONCE - One command per successful authorization
2. FAIL LOUD - Emission failures MUST raise, never return silently
"""

from __future__ import annotations

from typing import Protocol

from quorum_sudo.domain.events.sudo_command import SudoCommand


class SudoCommandEmitterPort(Protocol):
    """Protocol for delivering authorized commands to the executor."""

    async def emit_command(self, command: SudoCommand) -> None:
        """Emit an authorized command.

        Args:
            command: SetBalanceCommand, SetCodeCommand or SetStorageCommand.

        Raises:
            Exception: Any failure to deliver; the engine rolls back the
                authorization when this raises.
        """
        ...
