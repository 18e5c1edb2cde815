"""Mini README: Command line entry point for the balance tracker.

This script exposes a Typer CLI for recording adjustments, undoing them,
moving the period expiry, backing the ledger up and restoring it, and
launching the HTTP API. Every command opens the ledger stored in the
configured data directory, so successive invocations share one history.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from balancetracker.configuration import get_settings
from balancetracker.ledger import Ledger, LedgerError, build_outlook
from balancetracker.logging_utils import configure_root_logger
from balancetracker.storage import JsonFileStorage
from balancetracker.utils import clamp_to_today

cli = typer.Typer(help="Track a running balance against a budgeting period.")


def _open_ledger() -> Ledger:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    return Ledger(JsonFileStorage(settings.data_directory), storage_key=settings.storage_key)


def _print_summary(ledger: Ledger) -> None:
    settings = get_settings()
    outlook = build_outlook(
        ledger.state,
        weekly_allowance=settings.weekly_allowance,
        caution_margin=settings.caution_margin,
    )
    typer.echo(f"Balance: {ledger.state.balance:,.2f} ({outlook.status.value})")
    if outlook.expired:
        typer.echo(f"Expiry: {ledger.state.expiry} (expired)")
    else:
        typer.echo(
            f"Expiry: {ledger.state.expiry} · {outlook.days_left} days left"
            f" · daily safe {outlook.daily_safe:,}"
        )


@cli.command()
def show() -> None:
    """Print the balance, expiry and budget outlook."""

    _print_summary(_open_ledger())


@cli.command(context_settings={"ignore_unknown_options": True})
def add(
    expression: str = typer.Argument(..., help="Amount or arithmetic, e.g. -120 or 50+25."),
    description: str = typer.Option(..., "--description", "-d", help="Label for the entry."),
) -> None:
    """Record an adjustment; amounts without a sign are added.

    Negative amounts can be typed directly: ``add -120 -d Lunch``.
    """

    if not description.strip():
        raise typer.BadParameter("Description required", param_hint="--description")
    ledger = _open_ledger()
    try:
        delta = ledger.add_entry(expression, description.strip())
    except LedgerError as error:
        typer.echo(f"Invalid input: {error}", err=True)
        raise typer.Exit(code=1) from error
    typer.echo(f"Applied {delta:+,.2f}")
    _print_summary(ledger)


@cli.command()
def undo() -> None:
    """Remove the most recent entry."""

    ledger = _open_ledger()
    if not ledger.undo():
        typer.echo("Nothing to undo.")
        return
    _print_summary(ledger)


@cli.command()
def expiry(
    new_expiry: str = typer.Argument(..., metavar="DATE", help="Last day of the period (YYYY-MM-DD)."),
) -> None:
    """Move the period expiry; past dates are replaced by today."""

    try:
        effective = clamp_to_today(new_expiry)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="DATE") from error
    ledger = _open_ledger()
    ledger.update_expiry(effective)
    _print_summary(ledger)


@cli.command()
def history(
    limit: Optional[int] = typer.Option(None, min=1, help="Number of entries to list."),
) -> None:
    """List recent entries, newest first."""

    ledger = _open_ledger()
    count = limit or get_settings().history_display_limit
    for entry in reversed(ledger.state.history[-count:]):
        typer.echo(f"{entry.description}: {entry.expression} -> {entry.balance_after:,.2f}")


@cli.command("export")
def export_backup(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="File to write."),
) -> None:
    """Write the full ledger snapshot as JSON (stdout by default)."""

    payload = _open_ledger().export_data()
    if output is None:
        typer.echo(payload)
        return
    output.write_text(payload, encoding="utf-8")
    typer.echo(f"Backup written to {output}")


@cli.command("import")
def import_backup(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Backup file to restore."),
) -> None:
    """Replace the ledger with a previously exported backup."""

    ledger = _open_ledger()
    try:
        ledger.import_data(source.read_text(encoding="utf-8"))
    except (LedgerError, UnicodeDecodeError) as error:
        typer.echo(f"Invalid backup file: {error}", err=True)
        raise typer.Exit(code=1) from error
    _print_summary(ledger)


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the HTTP API using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(f"Balance tracker API on http://{browser_host}:{effective_port}/docs")
    uvicorn.run(
        "balancetracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
