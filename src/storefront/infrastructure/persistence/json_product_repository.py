"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "image": product.image,
        "stock_count": product.stock_count,
    }


def product_from_raw(raw: dict) -> Product:
    return Product(
        id=str(raw["id"]),
        name=raw["name"],
        price=Money(Decimal(str(raw["price"])), raw.get("currency", "NGN")),
        image=raw.get("image", ""),
        stock_count=raw.get("stock_count", 1),
    )


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        products = self._load()
        return products.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        products = [product_from_raw(item) for item in raw]
        return {p.id: p for p in products}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [product_to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
