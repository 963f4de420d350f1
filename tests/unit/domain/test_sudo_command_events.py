"""Unit tests for authorized sudo command events."""

from quorum_sudo.domain.events.sudo_command import (
    SET_BALANCE_EVENT_TYPE,
    SET_CODE_EVENT_TYPE,
    SET_STORAGE_EVENT_TYPE,
    SUDO_COMMAND_SCHEMA_VERSION,
    SetBalanceCommand,
    SetCodeCommand,
    SetStorageCommand,
)

TARGET = "0x" + "ab" * 20
OP_HASH = b"\x99" * 32


class TestSetBalanceCommand:
    """Tests for SetBalanceCommand."""

    def test_to_dict(self) -> None:
        command = SetBalanceCommand(target=TARGET, new_balance=2**200, nonce=3, op_hash=OP_HASH)

        data = command.to_dict()

        assert data["event_type"] == SET_BALANCE_EVENT_TYPE
        assert data["new_balance"] == str(2**200)
        assert data["nonce"] == 3
        assert data["op_hash"] == "0x" + "99" * 32
        assert data["schema_version"] == SUDO_COMMAND_SCHEMA_VERSION

    def test_from_dict_restores_command(self) -> None:
        command = SetBalanceCommand(target=TARGET, new_balance=5, nonce=0, op_hash=OP_HASH)

        assert SetBalanceCommand.from_dict(command.to_dict()) == command


class TestSetCodeCommand:
    """Tests for SetCodeCommand."""

    def test_to_dict_hex_encodes_code(self) -> None:
        command = SetCodeCommand(target=TARGET, new_code=b"\x60\x00", nonce=1, op_hash=OP_HASH)

        data = command.to_dict()

        assert data["event_type"] == SET_CODE_EVENT_TYPE
        assert data["new_code"] == "0x6000"
        assert SetCodeCommand.from_dict(data) == command


class TestSetStorageCommand:
    """Tests for SetStorageCommand."""

    def test_to_dict(self) -> None:
        command = SetStorageCommand(
            target=TARGET, key=b"\x01" * 32, value=b"\x02" * 32, nonce=9, op_hash=OP_HASH
        )

        data = command.to_dict()

        assert data["event_type"] == SET_STORAGE_EVENT_TYPE
        assert data["key"] == "0x" + "01" * 32
        assert SetStorageCommand.from_dict(data) == command
