"""CLI commands for the Order aggregate."""

from __future__ import annotations

from typing import Any

import click

from cart.application.list_orders import ListOrdersHandler
from cart.application.place_order import PlaceOrderHandler
from cart.application.request_validation import parse_order_request
from cart.application.show_order import ShowOrderHandler
from cart.domain.exceptions import DomainException
from cart.infrastructure.bootstrap import unit_of_work
from cart.infrastructure.cli.common import echo_json, fail, member_options


def _parse_items(raw: str) -> list[dict[str, Any]]:
    """Parse '1:5,2:3' into request items ``{"productId": 1, "quantity": 5}``.

    Non-numeric values are passed through untouched so the request
    validator can report them per field.
    """
    items: list[dict[str, Any]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty = pair.split(":", 1)
        items.append({"productId": _to_int(product_id), "quantity": _to_int(qty)})
    return items


def _to_int(value: str) -> int | str | None:
    value = value.strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return value


@click.command("place")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--spend-point", type=int, default=None, help="Points to redeem.")
@member_options
def order_place(member_id: int, items: str, spend_point: int | None) -> None:
    """Turn cart items into an order."""
    payload = {"orderItems": _parse_items(items), "spendPoint": spend_point}

    try:
        request = parse_order_request(payload)
        order_id = PlaceOrderHandler(uow=unit_of_work()).handle(
            requester_id=member_id,
            item_specs=request.items,
            spend_point=request.spend_point,
        )
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Order #{order_id} placed.")


@click.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
@member_options
def order_list(member_id: int, as_json: bool) -> None:
    """List your orders, most recent first."""
    try:
        summaries = ListOrdersHandler(uow=unit_of_work()).handle(member_id)
    except DomainException as exc:
        raise fail(exc)

    if as_json:
        echo_json([s.as_payload() for s in summaries])
        return

    if not summaries:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'First product':<20} {'Items':>6} {'Paid':>12}  {'Created'}")
    click.echo("-" * 66)
    for s in summaries:
        click.echo(
            f"{s.order_id:<6} {s.first_product_name:<20} {s.total_count:>6} "
            f"{s.spend_price:>12,}  {s.created_at:%Y-%m-%d %H:%M UTC}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
@member_options
def order_show(member_id: int, order_id: int, as_json: bool) -> None:
    """Show details of one of your orders."""
    try:
        dto = ShowOrderHandler(uow=unit_of_work()).handle(member_id, order_id)
    except DomainException as exc:
        raise fail(exc)

    if as_json:
        echo_json(dto.as_payload())
        return

    click.echo(f"Order #{dto.order_id}")
    click.echo(f"Created:  {dto.created_at:%Y-%m-%d %H:%M UTC}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.price:>10,} {item.price * item.quantity:>10,}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total_price:>20,}")
    click.echo(f"  {'Points Spent':<27} {dto.spend_point:>20,}")
    click.echo(f"  {'Paid':<27} {dto.spend_price:>20,}")
