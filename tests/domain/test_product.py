"""Unit tests for the Product entity."""

from dataclasses import FrozenInstanceError

import pytest

from catalog.domain.exceptions import (
    EntityNotFoundError,
    ProductNotFoundError,
    RepositoryError,
)
from catalog.domain.model.product import Product


class TestProduct:

    def test_creation(self):
        p = Product(id=1, name="Widget")
        assert p.id == 1
        assert p.name == "Widget"

    def test_equality_by_value(self):
        assert Product(id=1, name="Widget") == Product(id=1, name="Widget")
        assert Product(id=1, name="Widget") != Product(id=2, name="Widget")

    def test_immutable(self):
        p = Product(id=1, name="Widget")
        with pytest.raises(FrozenInstanceError):
            p.name = "Gadget"

    def test_hashable(self):
        assert len({Product(id=1, name="Widget"), Product(id=1, name="Widget")}) == 1

    def test_str(self):
        assert str(Product(id=3, name="Sprocket")) == "#3: Sprocket"


class TestProductNotFoundError:

    def test_is_a_repository_error(self):
        assert isinstance(ProductNotFoundError(5), RepositoryError)

    def test_is_an_entity_not_found_error(self):
        assert isinstance(ProductNotFoundError(5), EntityNotFoundError)

    def test_message_and_id(self):
        exc = ProductNotFoundError(5)
        assert str(exc) == "Product #5 not found"
        assert exc.product_id == 5
