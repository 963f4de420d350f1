"""Tests for the quorum-sudo CLI.

Tests for CLI commands: set-balance-hash, set-code-hash,
set-storage-hash, decompose-sig.
"""

import json

from typer.testing import CliRunner

from quorum_sudo.cli import app
from quorum_sudo.domain.models.operation import (
    SetBalanceRequest,
    SetCodeRequest,
    SetStorageRequest,
)
from quorum_sudo.domain.services.operation_hasher import compute_operation_hash

runner = CliRunner()

TARGET = "0x" + "ab" * 20


class TestCLIVersion:
    """Tests for version flag."""

    def test_cli_version_command(self):
        """Verify --version flag shows version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "quorum-sudo version" in result.stdout
        assert "0.1.0" in result.stdout


class TestCLISetBalanceHash:
    """Tests for set-balance-hash command."""

    def test_json_output_matches_domain_hash(self):
        expected = compute_operation_hash(SetBalanceRequest(TARGET, 1000), 7)

        result = runner.invoke(
            app,
            ["set-balance-hash", "-t", TARGET, "-b", "1000", "-n", "7", "--format", "json"],
        )

        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert output["op_hash"] == "0x" + expected.hex()
        assert output["kind"] == "SET_BALANCE"
        assert output["nonce"] == 7

    def test_text_output(self):
        result = runner.invoke(
            app, ["set-balance-hash", "-t", TARGET, "-b", "1", "-n", "0"]
        )

        assert result.exit_code == 0
        assert "op_hash" in result.stdout

    def test_bad_target_fails(self):
        result = runner.invoke(
            app, ["set-balance-hash", "-t", "0x12", "-b", "1", "-n", "0"]
        )

        assert result.exit_code == 1

    def test_negative_nonce_rejected(self):
        result = runner.invoke(
            app, ["set-balance-hash", "-t", TARGET, "-b", "1", "-n", "-1"]
        )

        assert result.exit_code != 0


class TestCLISetCodeHash:
    """Tests for set-code-hash command."""

    def test_code_from_hex(self):
        expected = compute_operation_hash(SetCodeRequest(TARGET, b"\x60\x00"), 2)

        result = runner.invoke(
            app,
            ["set-code-hash", "-t", TARGET, "-c", "0x6000", "-n", "2", "-o", "json"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["op_hash"] == "0x" + expected.hex()

    def test_code_from_file(self, tmp_path):
        code_file = tmp_path / "code.bin"
        code_file.write_bytes(b"\x60\x00")
        expected = compute_operation_hash(SetCodeRequest(TARGET, b"\x60\x00"), 2)

        result = runner.invoke(
            app,
            ["set-code-hash", "-t", TARGET, "-f", str(code_file), "-n", "2", "-o", "json"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["op_hash"] == "0x" + expected.hex()

    def test_requires_exactly_one_code_source(self):
        result = runner.invoke(app, ["set-code-hash", "-t", TARGET, "-n", "0"])

        assert result.exit_code != 0


class TestCLISetStorageHash:
    """Tests for set-storage-hash command."""

    def test_json_output(self):
        key = b"\x01" * 32
        value = b"\x02" * 32
        expected = compute_operation_hash(SetStorageRequest(TARGET, key, value), 0)

        result = runner.invoke(
            app,
            [
                "set-storage-hash",
                "-t", TARGET,
                "-k", "0x" + key.hex(),
                "--value", value.hex(),
                "-n", "0",
                "-o", "json",
            ],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["op_hash"] == "0x" + expected.hex()

    def test_short_key_fails(self):
        result = runner.invoke(
            app,
            ["set-storage-hash", "-t", TARGET, "-k", "0x01", "--value", "00" * 32, "-n", "0"],
        )

        assert result.exit_code == 1


class TestCLIDecomposeSig:
    """Tests for decompose-sig command."""

    def test_json_output(self):
        sig = "0x" + "aa" * 32 + "bb" * 32 + "1b"

        result = runner.invoke(app, ["decompose-sig", sig, "-o", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "recovery_id": 27,
            "r": "0x" + "aa" * 32,
            "s": "0x" + "bb" * 32,
        }

    def test_wrong_length_fails(self):
        result = runner.invoke(app, ["decompose-sig", "0x" + "aa" * 64])

        assert result.exit_code == 1
