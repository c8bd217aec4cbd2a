"""CLI command for accounts receivable."""

from __future__ import annotations

import click

from retail.application.list_receivables import ListReceivablesHandler
from retail.infrastructure.bootstrap import unit_of_work


@click.command("receivables")
@click.pass_obj
def receivables(obj: dict) -> None:
    """List money owed by customers, one entry per live order."""
    entries = ListReceivablesHandler(unit_of_work(obj["data_dir"])).handle()

    if not entries:
        click.echo("No receivables.")
        return

    click.echo(f"{'ID':<12} {'Customer':<20} {'Due':<10} {'Amount':>12} {'Status':>9}")
    click.echo("-" * 67)
    for entry in entries:
        click.echo(
            f"{entry.id:<12} {entry.customer:<20} {entry.due_date:<10} {entry.amount:>12} {entry.status:>9}"
        )
