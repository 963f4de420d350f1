"""CLI for Quorum Sudo signers.

Computes operation hashes offline so authorities can sign without
talking to the engine, and splits raw signatures into batch components.
The nonce must be given explicitly: use the value reported by
GET /v1/sudo/nonce at signing time.

Commands:
    set-balance-hash   Hash to sign for a balance adjustment
    set-code-hash      Hash to sign for a code replacement
    set-storage-hash   Hash to sign for a storage write
    decompose-sig      Split a 65-byte signature into (v, r, s)
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from quorum_sudo import __version__
from quorum_sudo.domain.exceptions import SudoGateError
from quorum_sudo.domain.models.operation import (
    OperationRequest,
    SetBalanceRequest,
    SetCodeRequest,
    SetStorageRequest,
)
from quorum_sudo.domain.services.operation_hasher import compute_operation_hash
from quorum_sudo.domain.services.signature_codec import decompose_signature


class OutputFormat(str, Enum):
    """Output format options."""

    text = "text"
    json = "json"


app = typer.Typer(
    name="quorum-sudo",
    help="Signer toolkit for the Quorum Sudo authorization gate",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"quorum-sudo version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Quorum Sudo signer toolkit."""
    pass


def _hex_arg(value: str, name: str) -> bytes:
    digits = value[2:] if value[:2].lower() == "0x" else value
    try:
        return bytes.fromhex(digits)
    except ValueError:
        raise typer.BadParameter(f"{name} is not valid hex") from None


def _fail(error: SudoGateError) -> None:
    err_console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(code=1)


def _output_hash(request: OperationRequest, nonce: int, output_format: OutputFormat) -> None:
    try:
        op_hash = compute_operation_hash(request, nonce)
    except SudoGateError as e:
        _fail(e)
        return
    if output_format == OutputFormat.json:
        console.print_json(
            json.dumps(
                {
                    "kind": request.kind.name,
                    "target": request.target,
                    "nonce": nonce,
                    "op_hash": "0x" + op_hash.hex(),
                }
            )
        )
        return
    table = Table(title=f"{request.kind.name} operation hash")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("target", request.target)
    table.add_row("nonce", str(nonce))
    table.add_row("op_hash", "0x" + op_hash.hex())
    console.print(table)


@app.command()
def set_balance_hash(
    target: str = typer.Option(..., "--target", "-t", help="Target account address"),
    balance: str = typer.Option(..., "--balance", "-b", help="New balance (uint256)"),
    nonce: int = typer.Option(..., "--nonce", "-n", min=0, help="Current engine nonce"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", "-o", help="Output format: text or json"
    ),
) -> None:
    """Compute the hash to sign for a balance adjustment.

    Example:
        quorum-sudo set-balance-hash -t 0x00...01 -b 1000 -n 7
    """
    try:
        amount = int(balance, 0)
    except ValueError:
        raise typer.BadParameter("balance must be an integer") from None
    try:
        request = SetBalanceRequest(target=target, new_balance=amount)
    except SudoGateError as e:
        _fail(e)
        return
    _output_hash(request, nonce, output_format)


@app.command()
def set_code_hash(
    target: str = typer.Option(..., "--target", "-t", help="Target account address"),
    code: Optional[str] = typer.Option(None, "--code", "-c", help="New code (hex)"),
    code_file: Optional[Path] = typer.Option(
        None, "--code-file", "-f", help="File holding the raw new code bytes"
    ),
    nonce: int = typer.Option(..., "--nonce", "-n", min=0, help="Current engine nonce"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", "-o", help="Output format: text or json"
    ),
) -> None:
    """Compute the hash to sign for a code replacement.

    Exactly one of --code or --code-file is required.
    """
    if (code is None) == (code_file is None):
        raise typer.BadParameter("pass exactly one of --code or --code-file")
    new_code = _hex_arg(code, "code") if code is not None else code_file.read_bytes()
    try:
        request = SetCodeRequest(target=target, new_code=new_code)
    except SudoGateError as e:
        _fail(e)
        return
    _output_hash(request, nonce, output_format)


@app.command()
def set_storage_hash(
    target: str = typer.Option(..., "--target", "-t", help="Target account address"),
    key: str = typer.Option(..., "--key", "-k", help="32-byte storage slot (hex)"),
    value: str = typer.Option(..., "--value", help="32-byte value (hex)"),
    nonce: int = typer.Option(..., "--nonce", "-n", min=0, help="Current engine nonce"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", "-o", help="Output format: text or json"
    ),
) -> None:
    """Compute the hash to sign for a storage write."""
    try:
        request = SetStorageRequest(
            target=target, key=_hex_arg(key, "key"), value=_hex_arg(value, "value")
        )
    except SudoGateError as e:
        _fail(e)
        return
    _output_hash(request, nonce, output_format)


@app.command()
def decompose_sig(
    signature: str = typer.Argument(..., help="65-byte signature (hex)"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", "-o", help="Output format: text or json"
    ),
) -> None:
    """Split a raw signature into recovery id, r and s."""
    try:
        parts = decompose_signature(_hex_arg(signature, "signature"))
    except SudoGateError as e:
        _fail(e)
        return
    if output_format == OutputFormat.json:
        console.print_json(
            json.dumps(
                {
                    "recovery_id": parts.recovery_id,
                    "r": "0x" + parts.r.hex(),
                    "s": "0x" + parts.s.hex(),
                }
            )
        )
        return
    console.print(f"recovery_id: {parts.recovery_id}")
    console.print(f"r: 0x{parts.r.hex()}")
    console.print(f"s: 0x{parts.s.hex()}")


if __name__ == "__main__":
    app()
