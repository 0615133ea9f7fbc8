"""CLI para inspeccionar y convertir ficheros de fees."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from blockchaindb.adapters.json_exporter import dumps_blockchain_fees, export_blockchain_fees_json
from blockchaindb.adapters.json_loader import load_blockchain_fees
from blockchaindb.cli.ui_components import build_fees_table
from blockchaindb.core.config import AppSettings
from blockchaindb.core.domain.models import BlockchainFee
from blockchaindb.core.logging_setup import configure_logging

app = typer.Typer(no_args_is_help=True, help="Inspect and convert blockchain-db fee files.")

_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log rejected records at DEBUG level."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print("[red]Invalid BLOCKCHAINDB_* settings:[/red]")
        for err in exc.errors():
            field = ".".join(str(p) for p in err.get("loc", ()))
            _err_console.print(f"  {field}: {err.get('msg', 'invalid')}", markup=False)
        raise typer.Exit(code=1) from exc

    ctx.obj = settings
    configure_logging("DEBUG" if verbose else settings.log_level, console=_err_console)


def _load_or_exit(path: Path) -> list[BlockchainFee]:
    try:
        fees = load_blockchain_fees(path)
    except OSError as exc:
        _err_console.print(f"[red]Cannot read {path}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if fees is None:
        _err_console.print(f"[red]Malformed fee records in {path}[/red]")
        raise typer.Exit(code=1)
    return fees


@app.command()
def show(path: Path = typer.Argument(..., help="JSON file with one fee object or an array of them.")) -> None:
    """Print the fees of PATH as a table."""

    fees = _load_or_exit(path)
    _console.print(build_fees_table(fees, title=f"Blockchain Fees ({path.name})"))


@app.command()
def convert(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="JSON file with one fee object or an array of them."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write here instead of stdout."),
) -> None:
    """Re-emit the fees of PATH as flat amount/tier/confirmations JSON."""

    settings: AppSettings = ctx.obj
    fees = _load_or_exit(path)
    if output is None:
        typer.echo(dumps_blockchain_fees(fees, indent=settings.json_indent), nl=False)
        return

    written = export_blockchain_fees_json(fees=fees, output_path=output, indent=settings.json_indent)
    _err_console.print(f"[green]Saved {len(fees)} fee(s) to:[/green] {written}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
