"""Abstract repository for the Cart aggregate.

A cart repository is a write-through/read-through adapter: the store
loads once when a session starts and saves after every change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the persisted cart, or an empty one if nothing is stored."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the full cart state."""
