"""CLI command for checkout."""

from __future__ import annotations

import click

from storefront.application.place_order import PAYMENT_METHODS, PlaceOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.shipping import ShippingDetails
from storefront.infrastructure.bootstrap import cart_store


@click.command("checkout")
@click.option("--name", required=True, help="Full name.")
@click.option("--email", required=True, help="Email address.")
@click.option("--address", required=True, help="Street address.")
@click.option("--city", required=True, help="City.")
@click.option("--postal-code", required=True, help="Postal code.")
@click.option("--phone", required=True, help="Phone number.")
@click.option(
    "--payment",
    "payment_method",
    type=click.Choice(PAYMENT_METHODS),
    default="paystack",
    show_default=True,
    help="Payment method.",
)
def checkout(
    name: str,
    email: str,
    address: str,
    city: str,
    postal_code: str,
    phone: str,
    payment_method: str,
) -> None:
    """Place an order for everything in the cart."""
    try:
        details = ShippingDetails(
            name=name,
            email=email,
            address=address,
            city=city,
            postal_code=postal_code,
            phone=phone,
        )
        dto = PlaceOrderHandler(cart_store()).handle(details, payment_method)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order placed for {dto.customer_name} <{dto.email}>")
    click.echo(f"Ship to:  {dto.address}")
    click.echo()
    for item in dto.items:
        click.echo(f"  {item.name:<20} x{item.quantity:<4} {item.line_total:>14}")
    click.echo(f"  {'Subtotal':<26} {dto.subtotal:>14}")
    if dto.coupon_code:
        click.echo(f"  {'Discount ' + dto.coupon_code:<26} {'-' + dto.discount_amount:>14}")
    click.echo(f"  {'Shipping':<26} {dto.shipping_fee:>14}")
    click.echo(f"  {'Total':<26} {dto.total:>14}")
    click.echo()
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(f"Estimated delivery: {dto.estimated_delivery}")
