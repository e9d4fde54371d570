"""CLI commands for the member's cart."""

from __future__ import annotations

import click

from cart.application.add_cart_item import AddCartItemHandler
from cart.application.list_cart_items import ListCartItemsHandler
from cart.application.remove_cart_item import RemoveCartItemHandler
from cart.application.update_cart_item import UpdateCartItemQuantityHandler
from cart.domain.exceptions import DomainException
from cart.infrastructure.bootstrap import unit_of_work
from cart.infrastructure.cli.common import echo_json, fail, member_options


@click.command("add")
@click.option("--product-id", required=True, type=int, help="Product to add.")
@member_options
def cart_add(member_id: int, product_id: int) -> None:
    """Put a product in your cart."""
    try:
        cart_item_id = AddCartItemHandler(uow=unit_of_work()).handle(member_id, product_id)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Cart item #{cart_item_id} saved.")


@click.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
@member_options
def cart_list(member_id: int, as_json: bool) -> None:
    """Show your cart."""
    try:
        items = ListCartItemsHandler(uow=unit_of_work()).handle(member_id)
    except DomainException as exc:
        raise fail(exc)

    if as_json:
        echo_json([item.as_payload() for item in items])
        return

    if not items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"{'ID':<6} {'Product ID':<11} {'Name':<20} {'Qty':>5} {'Price':>10}")
    click.echo("-" * 56)
    for item in items:
        click.echo(
            f"{item.id:<6} {item.product.id:<11} {item.product.name:<20} "
            f"{item.quantity:>5} {item.product.price:>10,}"
        )


@click.command("update")
@click.option("--id", "cart_item_id", required=True, type=int, help="Cart item ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
@member_options
def cart_update(member_id: int, cart_item_id: int, quantity: int) -> None:
    """Change the quantity of a cart item."""
    try:
        UpdateCartItemQuantityHandler(uow=unit_of_work()).handle(member_id, cart_item_id, quantity)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Cart item #{cart_item_id} updated.")


@click.command("remove")
@click.option("--id", "cart_item_id", required=True, type=int, help="Cart item ID.")
@member_options
def cart_remove(member_id: int, cart_item_id: int) -> None:
    """Remove a cart item."""
    try:
        RemoveCartItemHandler(uow=unit_of_work()).handle(member_id, cart_item_id)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Cart item #{cart_item_id} removed.")
