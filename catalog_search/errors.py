"""Exceptions raised while projecting catalog entities into search documents."""
from typing import Optional


class CatalogSearchError(Exception):
    """Base class for all catalog search errors."""


class ProjectionError(CatalogSearchError):
    """A product could not be projected into a search document."""

    def __init__(self, message: str, product_id: Optional[int] = None, product_code: Optional[str] = None):
        super().__init__(message)
        self.product_id = product_id
        self.product_code = product_code


class NoActiveLocaleError(ProjectionError):
    """The product has no active translation to resolve translatable fields."""


class MissingMainTaxonError(ProjectionError):
    """The product has no main taxon."""


class UnsupportedMappingError(CatalogSearchError):
    """No projection is registered for the requested document type."""

    def __init__(self, source: object, target_type: type):
        super().__init__(
            f"Cannot map {type(source).__name__} to {target_type.__name__}: no projection registered"
        )
        self.source = source
        self.target_type = target_type
