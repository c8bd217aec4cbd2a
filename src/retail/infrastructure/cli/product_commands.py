"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from retail.application.add_product import AddProductHandler
from retail.application.delete_product import DeleteProductHandler
from retail.application.list_products import ListProductsHandler
from retail.application.set_stock import SetStockHandler
from retail.application.update_product import UpdateProductHandler
from retail.domain.exceptions import DomainException
from retail.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Stock keeping unit, unique.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, type=int, show_default=True, help="Opening stock.")
@click.option("--inactive", is_flag=True, default=False, help="Add as inactive.")
@click.pass_obj
def product_add(obj: dict, name: str, sku: str, price: str, stock: int, inactive: bool) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work(obj["data_dir"]))

    try:
        product = handler.handle(name=name, sku=sku, price=price, stock=stock, active=not inactive)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' ({product.sku}) added at {product.price}")


@click.command("list")
@click.option("--search", default=None, help="Filter by name or SKU.")
@click.pass_obj
def product_list(obj: dict, search: str | None) -> None:
    """List products in the catalog."""
    products = ListProductsHandler(unit_of_work(obj["data_dir"])).handle(search)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'SKU':<10} {'Name':<20} {'Price':>10} {'Stock':>6} {'Active':>7}")
    click.echo("-" * 92)
    for p in products:
        click.echo(
            f"{p.id:<34} {p.sku:<10} {p.name:<20} {p.price:>10} {p.stock:>6} {'yes' if p.active else 'no':>7}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--sku", default=None, help="New SKU.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--active/--inactive", default=None, help="Activate or deactivate.")
@click.pass_obj
def product_update(
    obj: dict,
    product_id: str,
    name: str | None,
    sku: str | None,
    price: str | None,
    active: bool | None,
) -> None:
    """Edit a product (existing orders keep their snapshot)."""
    handler = UpdateProductHandler(unit_of_work(obj["data_dir"]))

    try:
        product = handler.handle(product_id, name=name, sku=sku, price=price, active=active)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated: {product.name} ({product.sku}) at {product.price}")


@click.command("set-stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_set_stock(obj: dict, product_id: str, quantity: int) -> None:
    """Set the stock level of a product."""
    handler = SetStockHandler(unit_of_work(obj["data_dir"]))

    try:
        product = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{product.name}' set to {product.stock}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(obj: dict, product_id: str) -> None:
    """Remove a product from the catalog."""
    DeleteProductHandler(unit_of_work(obj["data_dir"])).handle(product_id)
    click.echo(f"Product {product_id} deleted.")
