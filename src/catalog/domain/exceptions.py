"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class RepositoryError(DomainException):
    """A repository could not satisfy a read.

    Services pass these through untouched; only the outermost caller
    decides what a given failure means.
    """


class ProductNotFoundError(RepositoryError, EntityNotFoundError):
    """No product with the requested ID exists in the data source."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product #{product_id} not found")
        self.product_id = product_id


class StoreUnavailableError(RepositoryError):
    """The backing store is missing or unreadable."""
