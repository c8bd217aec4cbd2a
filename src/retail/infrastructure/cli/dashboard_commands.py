"""CLI command for the sales summary."""

from __future__ import annotations

import click

from retail.application.sales_summary import SalesSummaryHandler
from retail.infrastructure.bootstrap import unit_of_work


@click.command("dashboard")
@click.pass_obj
def dashboard(obj: dict) -> None:
    """Show headline sales figures."""
    summary = SalesSummaryHandler(unit_of_work(obj["data_dir"])).handle()

    click.echo(f"Products:  {summary.total_products}")
    click.echo(f"Customers: {summary.total_customers}")
    click.echo(f"Orders:    {summary.total_orders}")
    click.echo(f"Revenue:   {summary.revenue}")
    click.echo()
    click.echo("Paid sales, last 7 days")
    for point in summary.daily_sales:
        click.echo(f"  {point.day}  {point.total:>12}")

    if summary.recent_orders:
        click.echo()
        click.echo("Recent orders")
        for dto in summary.recent_orders:
            click.echo(f"  {dto.id:<10} {dto.customer_name:<20} {dto.status:<10} {dto.total:>12}")
