"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from retail.application.add_customer import AddCustomerHandler
from retail.application.delete_customer import DeleteCustomerHandler
from retail.application.list_customers import ListCustomersHandler
from retail.application.update_customer import UpdateCustomerHandler
from retail.domain.exceptions import DomainException
from retail.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--document", default="", help="Tax or ID document number.")
@click.option("--email", default="", help="E-mail address.")
@click.option("--phone", default="", help="Phone number.")
@click.pass_obj
def customer_add(obj: dict, name: str, document: str, email: str, phone: str) -> None:
    """Register a new customer."""
    handler = AddCustomerHandler(unit_of_work(obj["data_dir"]))

    try:
        customer = handler.handle(name=name, document=document, email=email, phone=phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} '{customer.name}' added")


@click.command("list")
@click.option("--search", default=None, help="Filter by name, document or e-mail.")
@click.pass_obj
def customer_list(obj: dict, search: str | None) -> None:
    """List customers."""
    customers = ListCustomersHandler(unit_of_work(obj["data_dir"])).handle(search)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Email':<25}")
    click.echo("-" * 81)
    for c in customers:
        click.echo(f"{c.id:<34} {c.name:<20} {c.email:<25}")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--document", default=None, help="New document number.")
@click.option("--email", default=None, help="New e-mail address.")
@click.option("--phone", default=None, help="New phone number.")
@click.option("--active/--inactive", default=None, help="Activate or deactivate.")
@click.pass_obj
def customer_update(
    obj: dict,
    customer_id: str,
    name: str | None,
    document: str | None,
    email: str | None,
    phone: str | None,
    active: bool | None,
) -> None:
    """Edit a customer (existing orders keep the old name)."""
    handler = UpdateCustomerHandler(unit_of_work(obj["data_dir"]))

    try:
        customer = handler.handle(
            customer_id, name=name, document=document, email=email, phone=phone, active=active
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} updated: {customer.name}")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def customer_delete(obj: dict, customer_id: str) -> None:
    """Remove a customer from the directory."""
    DeleteCustomerHandler(unit_of_work(obj["data_dir"])).handle(customer_id)
    click.echo(f"Customer {customer_id} deleted.")
