"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 5000).")
@click.option("--stock", "stock_count", default=1, show_default=True, type=int, help="Units in stock.")
@click.option("--image", default="", help="Image reference.")
def product_add(name: str, price: str, stock_count: int, image: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, price=price, stock_count=stock_count, image=image)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>14} {'Stock':>6}")
    click.echo("-" * 49)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>14} {p.stock_count:>6}")
