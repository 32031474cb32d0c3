"""Application service: product queries."""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class ProductService:
    """Facade over a ProductRepository.

    Results and exceptions from the repository reach the caller exactly
    as the repository produced them.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def get_product_by_id(self, product_id: int) -> Product:
        return self._product_repo.get_product_by_id(product_id)

    def get_all_products(self) -> list[Product]:
        return self._product_repo.get_all_products()
