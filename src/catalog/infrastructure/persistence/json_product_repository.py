"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from catalog.domain.exceptions import ProductNotFoundError, StoreUnavailableError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):
    """Read-only repository over a JSON list of ``{"id", "name"}`` records.

    The file is re-read on every call. A missing file means the store is
    unset; an empty list is a valid, empty catalog.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def get_product_by_id(self, product_id: int) -> Product:
        product = self._load().get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def get_all_products(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise StoreUnavailableError(
                f"Product store {self._file_path} does not exist"
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreUnavailableError(
                f"Product store {self._file_path} cannot be read: {exc}"
            ) from exc

        try:
            products: dict[int, Product] = {}
            for item in json.loads(text):
                product = self._to_product(item)
                if product.id in products:
                    raise ValueError(f"duplicate product id {product.id}")
                products[product.id] = product
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise StoreUnavailableError(
                f"Product store {self._file_path} is malformed: {exc}"
            ) from exc

        logger.debug("Loaded %d products from %s", len(products), self._file_path)
        return products

    @staticmethod
    def _to_product(item: dict) -> Product:
        # bool is an int subclass; reject it along with floats
        if type(item["id"]) is not int or not isinstance(item["name"], str):
            raise ValueError(f"invalid product record {item!r}")
        return Product(id=item["id"], name=item["name"])
