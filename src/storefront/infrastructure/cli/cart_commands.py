"""CLI commands for the cart and saved-for-later list."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import CartDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.application.toggle_favorite import ToggleFavoriteHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_store, product_repository


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Your cart is empty.")
    else:
        click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>7} {'Price':>14} {'Total':>14}")
        click.echo(f"  {'-'*65}")
        for item in dto.items:
            qty = f"{item.quantity}/{item.max_units}"
            click.echo(
                f"  {item.product_id:<6} {item.name:<20} {qty:>7} {item.unit_price:>14} {item.line_total:>14}"
            )
        click.echo(f"  {'-'*65}")
        click.echo(f"  {'Total Items':<35} {dto.total_items:>30}")
        click.echo(f"  {'Subtotal':<35} {dto.subtotal:>30}")
        if dto.discount:
            label = f"Discount {dto.coupon_code} ({dto.discount}%)"
            click.echo(f"  {label:<35} {'-' + dto.discount_amount:>30}")
        shipping = "FREE" if dto.free_shipping else dto.shipping_fee
        click.echo(f"  {'Shipping':<35} {shipping:>30}")
        click.echo(f"  {'Total':<35} {dto.grand_total:>30}")
        if not dto.free_shipping:
            click.echo(f"  Add {dto.free_shipping_remaining} more for free shipping.")

    if dto.saved_for_later:
        click.echo()
        click.echo(f"Saved for Later ({len(dto.saved_for_later)})")
        for saved in dto.saved_for_later:
            click.echo(f"  {saved.product_id:<6} {saved.name:<20} {saved.price:>14}")


@click.command("show")
def cart_show() -> None:
    """Show the cart with totals."""
    _display_cart(ShowCartHandler(cart_store()).handle())


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID to add.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(store=cart_store(), product_repo=product_repository())

    try:
        added = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if added:
        click.echo(f"Product #{product_id} added to cart.")
    else:
        click.echo(f"Product #{product_id} is already in your cart.")


@click.command("inc")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_inc(product_id: str) -> None:
    """Increase the quantity of a cart item by one."""
    store = cart_store()
    if store.increment_quantity(product_id):
        item = store.snapshot().find_item(product_id)
        click.echo(f"Increased quantity for {item.name} to {item.quantity}.")
        return

    item = store.snapshot().find_item(product_id)
    if item is None:
        raise click.ClickException(f"Product #{product_id} is not in your cart")
    click.echo(f"Only {item.max_units} units available.")


@click.command("dec")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_dec(product_id: str) -> None:
    """Decrease the quantity of a cart item by one (never below 1)."""
    store = cart_store()
    if store.decrement_quantity(product_id):
        item = store.snapshot().find_item(product_id)
        click.echo(f"Decreased quantity for {item.name} to {item.quantity}.")
        return

    if store.snapshot().find_item(product_id) is None:
        raise click.ClickException(f"Product #{product_id} is not in your cart")
    click.echo("Quantity is already 1; use 'cart remove' to drop the item.")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID to remove.")
def cart_remove(product_id: str) -> None:
    """Remove an item from the cart."""
    cart_store().remove_from_cart(product_id)
    click.echo(f"Product #{product_id} removed from cart.")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart and remove the coupon."""
    cart_store().clear_cart()
    click.echo("Cart cleared.")


@click.command("save")
@click.option("--id", "product_id", required=True, help="Product ID to save for later.")
def cart_save(product_id: str) -> None:
    """Move a cart item to the saved-for-later list."""
    if not cart_store().move_to_saved(product_id):
        raise click.ClickException(f"Product #{product_id} is not in your cart")
    click.echo(f"Product #{product_id} saved for later.")


@click.command("restore")
@click.option("--id", "product_id", required=True, help="Saved product ID to move back.")
def cart_restore(product_id: str) -> None:
    """Move a saved-for-later item back into the cart."""
    store = cart_store()
    if not store.move_to_cart(product_id):
        if store.snapshot().is_saved(product_id):
            raise click.ClickException(f"Product #{product_id} is out of stock")
        raise click.ClickException(f"Product #{product_id} is not saved for later")
    click.echo(f"Product #{product_id} moved to cart.")


@click.command("toggle")
@click.option("--id", "product_id", required=True, help="Product ID.")
def favorite_toggle(product_id: str) -> None:
    """Save a product for later, or unsave it."""
    handler = ToggleFavoriteHandler(store=cart_store(), product_repo=product_repository())

    try:
        saved = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if saved:
        click.echo(f"Product #{product_id} saved for later.")
    else:
        click.echo(f"Product #{product_id} removed from saved items.")
