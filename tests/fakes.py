"""In-memory fake repositories for testing.

These implement the same abstract interface as the JSON repository
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):
    """Dict-backed repository that raises one preconfigured error on any miss.

    ``products=None`` models an unset store: ``get_all_products`` raises.
    An empty dict is a valid, empty store.
    """

    def __init__(self, products: dict[int, Product] | None, error: Exception) -> None:
        self._store = products
        self._error = error

    def get_product_by_id(self, product_id: int) -> Product:
        if self._store is not None and product_id in self._store:
            return self._store[product_id]
        raise self._error

    def get_all_products(self) -> list[Product]:
        if self._store is None:
            raise self._error
        return list(self._store.values())
