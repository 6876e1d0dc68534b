"""CLI commands for coupons."""

from __future__ import annotations

import click

from storefront.application.apply_coupon import ApplyCouponHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_store, coupon_repository


@click.command("apply")
@click.argument("code")
def coupon_apply(code: str) -> None:
    """Apply a coupon code to the cart."""
    handler = ApplyCouponHandler(store=cart_store(), coupon_repo=coupon_repository())

    try:
        dto = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Coupon {dto.code} applied: {dto.discount}% discount.")


@click.command("clear")
def coupon_clear() -> None:
    """Remove the applied coupon."""
    cart_store().clear_coupon()
    click.echo("Coupon removed.")
