"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from retail.application.create_order import CreateOrderHandler
from retail.application.delete_order import DeleteOrderHandler
from retail.application.dto import OrderDTO, OrderItemSpec
from retail.application.list_orders import ListOrdersHandler
from retail.application.show_order import ShowOrderHandler
from retail.application.update_order_status import UpdateOrderStatusHandler
from retail.domain.exceptions import DomainException
from retail.domain.model.order import OrderStatus
from retail.infrastructure.bootstrap import unit_of_work

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'SKU-1:3,SKU-2:5' into OrderItemSpec list.

    The product part may be a SKU or a product id; SKUs are resolved to ids
    by ``_resolve_products``.
    """
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Product:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(OrderItemSpec(product_id=name.strip(), quantity=qty))
    return specs


def _resolve_products(data_dir: str | None, specs: list[OrderItemSpec]) -> list[OrderItemSpec]:
    with unit_of_work(data_dir) as uow:
        resolved = []
        for spec in specs:
            product = uow.products.get_by_sku(spec.product_id)
            product_id = product.id if product is not None else spec.product_id
            resolved.append(OrderItemSpec(product_id=product_id, quantity=spec.quantity))
    return resolved


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'SKU:Qty,SKU:Qty' (SKU or product ID).")
@click.option("--status", default=OrderStatus.PENDING.value, type=_STATUS_CHOICE, show_default=True)
@click.pass_obj
def order_create(obj: dict, customer_id: str, items: str, status: str) -> None:
    """Create a new sales order (reserves stock)."""
    specs = _parse_items(items)

    try:
        specs = _resolve_products(obj["data_dir"], specs)
        handler = CreateOrderHandler(unit_of_work(obj["data_dir"]))
        dto = handler.handle(customer_id=customer_id, status=status, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(obj: dict, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(unit_of_work(obj["data_dir"]))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--search", default=None, help="Filter by id, customer or status.")
@click.pass_obj
def order_list(obj: dict, search: str | None) -> None:
    """List orders, most recent first."""
    orders = ListOrdersHandler(unit_of_work(obj["data_dir"])).handle(search)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<10} {'Customer':<20} {'Status':<10} {'Total':>12} {'Created':>22}")
    click.echo("-" * 78)
    for dto in orders:
        click.echo(
            f"{dto.id:<10} {dto.customer_name:<20} {dto.status:<10} {dto.total:>12} {dto.created_at:>22}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--to", "status", required=True, type=_STATUS_CHOICE, help="New status.")
@click.pass_obj
def order_status(obj: dict, order_id: str, status: str) -> None:
    """Change an order's status (Canceled returns its stock)."""
    handler = UpdateOrderStatusHandler(unit_of_work(obj["data_dir"]))

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} is now {OrderStatus.parse(status).value}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
@click.pass_obj
def order_delete(obj: dict, order_id: str) -> None:
    """Delete an order (returns its stock unless it was canceled)."""
    handler = DeleteOrderHandler(unit_of_work(obj["data_dir"]))

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")
