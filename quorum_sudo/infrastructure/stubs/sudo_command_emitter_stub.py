"""Stub implementation of SudoCommandEmitterPort.

Captures emitted commands in memory instead of delivering them to a
privileged executor. Also serves local development, where commands are
only logged.

Usage in tests:
    stub = SudoCommandEmitterStub()
    service = SudoAuthorizationService(..., emitter=stub)

    await service.set_balance(target, 100, batch)

    assert len(stub.emitted_commands) == 1
    assert stub.emitted_commands[0].new_balance == 100
"""

from __future__ import annotations

import asyncio

from structlog import get_logger

from quorum_sudo.application.ports.sudo_command_emitter import SudoCommandEmitterPort
from quorum_sudo.domain.events.sudo_command import SudoCommand

logger = get_logger()


class SudoCommandEmitterStub(SudoCommandEmitterPort):
    """Records emitted commands for assertions.

    Attributes:
        emitted_commands: Every command emitted, in order.
        fail_exception: If set, emit_command() raises this exception.
        delay_seconds: If set, emit_command() sleeps this long first.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty state."""
        self.emitted_commands: list[SudoCommand] = []
        self.fail_exception: Exception | None = None
        self.delay_seconds: float | None = None

    async def emit_command(self, command: SudoCommand) -> None:
        """Capture a command.

        Raises:
            Exception: If fail_exception is set.
        """
        if self.delay_seconds is not None:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_exception is not None:
            raise self.fail_exception
        self.emitted_commands.append(command)
        logger.info("sudo_command_emitted", **command.to_dict())

    def reset(self) -> None:
        """Clear captured commands and failure configuration."""
        self.emitted_commands.clear()
        self.fail_exception = None
        self.delay_seconds = None
