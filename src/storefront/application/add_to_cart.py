"""Application service: Add To Cart use case.

Resolves a catalog product and puts one unit of it in the cart, capped at
the product's stock count.
"""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, store: CartStore, product_repo: ProductRepository) -> None:
        self._store = store
        self._product_repo = product_repo

    def handle(self, product_id: str) -> bool:
        """Add a product to the cart.

        Returns False if the product was already in the cart (its quantity
        is left alone).
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not product.in_stock:
            raise ValidationError(f"{product.name} is currently out of stock")

        return self._store.add_to_cart(product)
