"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from catalog.application.product_service import ProductService
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "products.json"


def product_repository(data_file: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(data_file or DEFAULT_DATA_FILE)


def product_service(data_file: Path | None = None) -> ProductService:
    return ProductService(product_repo=product_repository(data_file))
