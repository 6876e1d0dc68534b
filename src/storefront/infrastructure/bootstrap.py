"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.application.cart_store import CartStore
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.static_coupon_repository import (
    StaticCouponRepository,
)

DATA_DIR_ENV = "STOREFRONT_DATA_DIR"

# Default to <repo>/data.  When installed in editable mode the project
# root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    """Resolved on every call so the environment can redirect it."""
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(data_dir() / "cart.json")


def coupon_repository() -> StaticCouponRepository:
    return StaticCouponRepository()


def cart_store() -> CartStore:
    return CartStore(cart_repository())
