import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_dec,
    cart_inc,
    cart_remove,
    cart_restore,
    cart_save,
    cart_show,
    favorite_toggle,
)
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.coupon_commands import coupon_apply, coupon_clear
from storefront.infrastructure.cli.product_commands import product_add, product_list
from storefront.infrastructure.logging_config import configure_logging, resolve_level


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every cart operation.")
def cli(verbose: bool) -> None:
    """Storefront: shopping cart"""
    configure_logging(resolve_level(verbose))


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def favorite() -> None:
    """Manage saved-for-later items."""


@cli.group()
def coupon() -> None:
    """Apply or remove a coupon."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_dec)
cart.add_command(cart_inc)
cart.add_command(cart_remove)
cart.add_command(cart_restore)
cart.add_command(cart_save)
cart.add_command(cart_show)
product.add_command(product_add)
product.add_command(product_list)
favorite.add_command(favorite_toggle)
coupon.add_command(coupon_apply)
coupon.add_command(coupon_clear)
cli.add_command(checkout)
