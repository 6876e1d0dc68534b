"""JSON-file-backed implementation of CartRepository.

The whole cart is rewritten on every save.  The drawer flag is not
stored: it belongs to the browsing session, not to the cart.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, CartLineItem
from storefront.domain.model.coupon import Coupon
from storefront.domain.model.value_objects import Money, Percent
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_product_repository import (
    product_from_raw,
    product_to_raw,
)

logger = logging.getLogger(__name__)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> Cart:
        if not self._file_path.exists():
            return Cart.empty()
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        cart = self._to_domain(raw)
        logger.debug(
            "Loaded cart from %s (%d items, %d saved)",
            self._file_path,
            len(cart.items),
            len(cart.saved_for_later),
        )
        return cart

    def save(self, cart: Cart) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(self._to_raw(cart), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.name,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "image": item.image,
                    "quantity": item.quantity,
                    "max_units": item.max_units,
                }
                for item in cart.items
            ],
            "saved_for_later": [product_to_raw(p) for p in cart.saved_for_later],
            "coupon": (
                {"code": cart.coupon.code, "discount": cart.coupon.discount_percent}
                if cart.coupon
                else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        items = [
            CartLineItem(
                product_id=str(i["product_id"]),
                name=i["name"],
                unit_price=Money(Decimal(str(i["unit_price"])), i.get("currency", "NGN")),
                image=i.get("image", ""),
                quantity=i["quantity"],
                max_units=i["max_units"],
            )
            for i in raw.get("items", [])
        ]
        saved = [product_from_raw(p) for p in raw.get("saved_for_later", [])]
        coupon_raw = raw.get("coupon")
        coupon = (
            Coupon(code=coupon_raw["code"], discount=Percent(coupon_raw["discount"]))
            if coupon_raw
            else None
        )
        return Cart(items=items, saved_for_later=saved, coupon=coupon)
