"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from cart.application.add_product import AddProductHandler
from cart.application.list_products import ListProductsHandler
from cart.application.update_product import UpdateProductHandler
from cart.domain.exceptions import DomainException
from cart.infrastructure.bootstrap import unit_of_work
from cart.infrastructure.cli.common import echo_json, fail


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15000).")
@click.option("--image-url", default="", help="Image URL.")
def product_add(name: str, price: str, image_url: str) -> None:
    """Add a new product to the catalog."""
    try:
        product = AddProductHandler(uow=unit_of_work()).handle(name=name, price=price, image_url=image_url)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
def product_list(as_json: bool) -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(uow=unit_of_work()).handle()

    if as_json:
        echo_json([p.as_payload() for p in products])
        return

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10,}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", default=None, help="New price.")
@click.option("--name", default=None, help="New name.")
def product_update(product_id: int, price: str | None, name: str | None) -> None:
    """Update a product's price or name."""
    if price is None and name is None:
        raise click.UsageError("Nothing to update: pass --price and/or --name")

    try:
        UpdateProductHandler(uow=unit_of_work()).handle(product_id, new_price=price, new_name=name)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Product #{product_id} updated.")
