"""The cart engine: single owner of a shopping session's Cart.

Every screen reads snapshots from the store and mutates the cart only
through its operations.  A store is an ordinary object, one per session;
tests and servers can hold as many as they like.

Operations are serialized by a re-entrant lock, so a multi-threaded host
sees them applied strictly in dispatch order.  After each operation that
changes state the store writes through to its repository (if any) and then
hands the new snapshot to every subscriber.  No-ops neither persist nor
notify.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, TypeVar

from storefront.application.dto import CartSnapshot
from storefront.domain.model.cart import Cart
from storefront.domain.model.coupon import Coupon
from storefront.domain.model.product import Product
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)

Listener = Callable[[CartSnapshot], None]
T = TypeVar("T")


class CartStore:

    def __init__(self, repository: CartRepository | None = None) -> None:
        self._repository = repository
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._cart = repository.load() if repository is not None else Cart.empty()
        # The drawer is per-session UI state; a rehydrated cart starts closed.
        self._cart.is_drawer_open = False

    # --- Reading --------------------------------------------------------------

    def snapshot(self) -> CartSnapshot:
        with self._lock:
            return CartSnapshot.of(self._cart)

    def read(self, reader: Callable[[Cart], T]) -> T:
        """Run *reader* against the live cart under the lock.

        For domain services that price the cart.  Readers must not mutate
        the cart directly; they may call back into the store.
        """
        with self._lock:
            return reader(self._cart)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # --- Line items -----------------------------------------------------------

    def add_to_cart(self, product: Product, max_units: int | None = None) -> bool:
        return self._apply("add_to_cart", lambda cart: cart.add(product, max_units), product.id)

    def increment_quantity(self, product_id: str) -> bool:
        return self._apply("increment_quantity", lambda cart: cart.increment(product_id), product_id)

    def decrement_quantity(self, product_id: str) -> bool:
        return self._apply("decrement_quantity", lambda cart: cart.decrement(product_id), product_id)

    def remove_from_cart(self, product_id: str) -> bool:
        return self._apply("remove_from_cart", lambda cart: cart.remove(product_id), product_id)

    def clear_cart(self) -> bool:
        return self._apply("clear_cart", lambda cart: cart.clear())

    # --- Saved for later ------------------------------------------------------

    def toggle_favorite(self, product: Product) -> bool:
        """Toggle the bookmark; returns whether *product* is saved afterwards."""
        with self._lock:
            saved = self._cart.toggle_favorite(product)
            logger.info("toggle_favorite %s -> %s", product.id, "saved" if saved else "unsaved")
            self._commit()
            return saved

    def move_to_saved(self, product_id: str) -> bool:
        return self._apply("move_to_saved", lambda cart: cart.move_to_saved(product_id), product_id)

    def move_to_cart(self, product_id: str, max_units: int | None = None) -> bool:
        return self._apply(
            "move_to_cart", lambda cart: cart.move_to_cart(product_id, max_units), product_id
        )

    # --- Coupon ---------------------------------------------------------------

    def apply_coupon(self, coupon: Coupon) -> bool:
        return self._apply("apply_coupon", lambda cart: cart.apply_coupon(coupon), coupon.code)

    def clear_coupon(self) -> bool:
        return self._apply("clear_coupon", lambda cart: cart.clear_coupon())

    # --- Drawer ---------------------------------------------------------------

    def open_cart(self) -> bool:
        return self._apply("open_cart", lambda cart: cart.open_drawer(), persist=False)

    def close_cart(self) -> bool:
        return self._apply("close_cart", lambda cart: cart.close_drawer(), persist=False)

    # --- Session --------------------------------------------------------------

    def reset(self) -> None:
        """Return to the initial state (session end)."""
        with self._lock:
            self._cart = Cart.empty()
            logger.info("Cart session reset")
            self._commit()

    # --- Internal helpers -----------------------------------------------------

    def _apply(
        self,
        operation: str,
        mutation: Callable[[Cart], bool],
        subject: str | None = None,
        persist: bool = True,
    ) -> bool:
        with self._lock:
            changed = mutation(self._cart)
            if not changed:
                logger.debug("%s(%s) left the cart unchanged", operation, subject or "")
                return False
            logger.info("%s(%s)", operation, subject or "")
            self._commit(persist)
            return True

    def _commit(self, persist: bool = True) -> None:
        if persist and self._repository is not None:
            self._repository.save(self._cart)
        snapshot = CartSnapshot.of(self._cart)
        for listener in list(self._listeners):
            listener(snapshot)
