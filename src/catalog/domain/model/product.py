"""Product entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Immutable: whatever populates a repository creates products, and
    nothing downstream of the repository changes them.
    """

    id: int
    name: str

    def __str__(self) -> str:
        return f"#{self.id}: {self.name}"
