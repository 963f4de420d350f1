"""Unit tests for the in-memory directory and emitter stubs."""

import pytest

from quorum_sudo.domain.errors import DirectoryUnavailableError
from quorum_sudo.domain.events.sudo_command import SetBalanceCommand
from quorum_sudo.infrastructure.stubs import (
    AuthorityDirectoryStub,
    SudoCommandEmitterStub,
)

A = "0x" + "01" * 20
B = "0x" + "02" * 20


class TestAuthorityDirectoryStub:
    """Tests for AuthorityDirectoryStub."""

    @pytest.mark.asyncio
    async def test_returns_copy_of_list(self) -> None:
        stub = AuthorityDirectoryStub([A, B])

        result = await stub.get_authorities()
        result.append("0xdead")

        assert await stub.get_authorities() == [A, B]
        assert stub.query_count == 2

    @pytest.mark.asyncio
    async def test_defaults_to_empty(self) -> None:
        assert await AuthorityDirectoryStub().get_authorities() == []

    @pytest.mark.asyncio
    async def test_rotation(self) -> None:
        stub = AuthorityDirectoryStub([A])
        stub.set_authorities([B, A])

        assert await stub.get_authorities() == [B, A]

    @pytest.mark.asyncio
    async def test_fail_exception(self) -> None:
        stub = AuthorityDirectoryStub([A])
        stub.fail_exception = DirectoryUnavailableError("down")

        with pytest.raises(DirectoryUnavailableError):
            await stub.get_authorities()


class TestSudoCommandEmitterStub:
    """Tests for SudoCommandEmitterStub."""

    @pytest.mark.asyncio
    async def test_captures_commands(self) -> None:
        stub = SudoCommandEmitterStub()
        command = SetBalanceCommand(target=A, new_balance=1, nonce=0, op_hash=b"\x00" * 32)

        await stub.emit_command(command)

        assert stub.emitted_commands == [command]

    @pytest.mark.asyncio
    async def test_failure_captures_nothing(self) -> None:
        stub = SudoCommandEmitterStub()
        stub.fail_exception = RuntimeError("offline")
        command = SetBalanceCommand(target=A, new_balance=1, nonce=0, op_hash=b"\x00" * 32)

        with pytest.raises(RuntimeError):
            await stub.emit_command(command)

        assert stub.emitted_commands == []

    def test_reset(self) -> None:
        stub = SudoCommandEmitterStub()
        stub.emitted_commands.append(
            SetBalanceCommand(target=A, new_balance=1, nonce=0, op_hash=b"\x00" * 32)
        )
        stub.fail_exception = RuntimeError("offline")

        stub.reset()

        assert stub.emitted_commands == []
        assert stub.fail_exception is None
