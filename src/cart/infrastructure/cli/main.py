import click

from cart.infrastructure.cli.cart_commands import cart_add, cart_list, cart_remove, cart_update
from cart.infrastructure.cli.order_commands import order_list, order_place, order_show
from cart.infrastructure.cli.product_commands import product_add, product_list, product_update
from cart.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Shopping cart: products, cart and orders"""
    configure_logging()


@cli.group()
def order() -> None:
    """Place and browse orders."""


@cli.group("cart")
def cart_group() -> None:
    """Manage your cart."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_list)
order.add_command(order_show)
cart_group.add_command(cart_add)
cart_group.add_command(cart_list)
cart_group.add_command(cart_update)
cart_group.add_command(cart_remove)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
