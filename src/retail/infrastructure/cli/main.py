import click

from retail.infrastructure.bootstrap import DATA_DIR_ENV
from retail.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
    customer_update,
)
from retail.infrastructure.cli.dashboard_commands import dashboard
from retail.infrastructure.cli.finance_commands import receivables
from retail.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_status,
)
from retail.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_set_stock,
    product_update,
)
from retail.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    default=None,
    type=click.Path(file_okay=False),
    help=f"Directory holding the JSON store (env: {DATA_DIR_ENV}).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """Retail: orders, stock and catalog."""
    configure_logging(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.group()
def order() -> None:
    """Manage sales orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def customer() -> None:
    """Manage customers."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_set_stock)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_list)
customer.add_command(customer_update)
cli.add_command(dashboard)
cli.add_command(receivables)
