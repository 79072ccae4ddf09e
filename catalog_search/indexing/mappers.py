"""Projections of catalog sub-entities into their search documents."""
import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from catalog_search.database.document_schema import (
    AttributeDocument,
    ChannelDocument,
    ImageDocument,
    ProductTaxonDocument,
    SearchDocument,
    TaxonDocument,
)
from catalog_search.errors import UnsupportedMappingError

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=SearchDocument)


def map_image(image: Any) -> ImageDocument:
    return ImageDocument(path=image.path, type=image.type)


def map_taxon(taxon: Any) -> TaxonDocument:
    return TaxonDocument(
        code=taxon.code,
        name=taxon.name,
        slug=taxon.slug,
        position=taxon.position,
        level=taxon.level,
    )


def map_product_taxon(product_taxon: Any) -> ProductTaxonDocument:
    return ProductTaxonDocument(
        taxon=map_taxon(product_taxon.taxon),
        position=product_taxon.position,
    )


def map_channel(channel: Any) -> ChannelDocument:
    return ChannelDocument(code=channel.code, name=channel.name)


def map_attribute_value(attribute_value: Any) -> AttributeDocument:
    """
    Map an attribute value without its value.

    The value is dynamically typed (text, number, boolean, date, list) and
    is copied by the caller as-is.
    """
    return AttributeDocument(code=attribute_value.code, name=attribute_value.name)


class DocumentMapper:
    """Maps catalog entities to search documents through per-type projections."""

    def __init__(self, projections: Optional[Dict[type, Callable[[Any], SearchDocument]]] = None):
        """
        Initialize the mapper.

        Args:
            projections: Projection functions keyed by target document type
                (defaults to the built-in catalog projections)
        """
        if projections is None:
            projections = {
                ImageDocument: map_image,
                TaxonDocument: map_taxon,
                ProductTaxonDocument: map_product_taxon,
                ChannelDocument: map_channel,
                AttributeDocument: map_attribute_value,
            }
        self._projections = dict(projections)

    def register(self, target_type: Type[DocumentT], projection: Callable[[Any], DocumentT]):
        """Add or replace the projection used for a document type."""
        self._projections[target_type] = projection

    def supports(self, target_type: type) -> bool:
        return target_type in self._projections

    def map(self, source: Any, target_type: Type[DocumentT]) -> DocumentT:
        """
        Map a catalog entity to a search document.

        Args:
            source: Catalog entity (image, taxon, channel, ...)
            target_type: Document class to produce

        Returns:
            Document of the requested type

        Raises:
            UnsupportedMappingError: If no projection is registered for target_type
        """
        projection = self._projections.get(target_type)
        if projection is None:
            raise UnsupportedMappingError(source, target_type)

        logger.debug("Mapping %s to %s", type(source).__name__, target_type.__name__)
        return projection(source)
