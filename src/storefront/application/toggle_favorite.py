"""Application service: Toggle Favorite use case."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.product_repository import ProductRepository


class ToggleFavoriteHandler:

    def __init__(self, store: CartStore, product_repo: ProductRepository) -> None:
        self._store = store
        self._product_repo = product_repo

    def handle(self, product_id: str) -> bool:
        """Save or unsave a product; returns whether it is saved afterwards.

        A product that is already bookmarked can be unsaved even after it
        has left the catalog.
        """

        def toggle(cart: Cart) -> bool:
            # Lookup and toggle happen under the store lock so a concurrent
            # unsave cannot slip in between them.
            product = cart.find_saved(product_id) or self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            return self._store.toggle_favorite(product)

        return self._store.read(toggle)
