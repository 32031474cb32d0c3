"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer or in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_product_by_id(self, product_id: int) -> Product:
        """Return the product with the given ID.

        Raises a RepositoryError subclass if it cannot be found.
        """

    @abstractmethod
    def get_all_products(self) -> list[Product]:
        """Return every known product, in no particular order.

        Raises a RepositoryError subclass if the store is unavailable.
        """
