"""Projection of a product aggregate into a flat search document."""
import logging
from typing import Any, Callable, Dict, List

from catalog_search.database.catalog_models import Searchable, Stockable
from catalog_search.database.document_schema import (
    AttributeDocument,
    ChannelDocument,
    ImageDocument,
    ProductDocument,
    ProductTaxonDocument,
    TaxonDocument,
    VariantDocument,
    VariantOptionDocument,
)
from catalog_search.errors import MissingMainTaxonError, NoActiveLocaleError
from catalog_search.indexing.mappers import DocumentMapper
from catalog_search.inventory.availability import AvailabilityChecker

logger = logging.getLogger(__name__)


class ProductDocumentProjector:
    """
    Builds a ProductDocument field by field.

    Each document field has its own extractor reading from the product, so
    no field depends on the output of another. Images, taxons and channels
    go through the document mapper; attributes and variants need the
    current locale and stock state and are built here.
    """

    def __init__(self, mapper: DocumentMapper, availability_checker: AvailabilityChecker):
        """
        Initialize the projector.

        Args:
            mapper: Mapper for images, taxons, channels and attributes
            availability_checker: Checker consulted for stock-tracked variants
        """
        self.mapper = mapper
        self.availability_checker = availability_checker
        self._extractors: Dict[str, Callable[[Any], Any]] = {
            "id": lambda product: product.id,
            "code": lambda product: product.code,
            "enabled": lambda product: product.enabled,
            "slug": lambda product: product.slug,
            "name": lambda product: product.name,
            "description": lambda product: product.description,
            "images": self._extract_images,
            "main_taxon": self._extract_main_taxon,
            "product_taxons": self._extract_product_taxons,
            "channels": self._extract_channels,
            "attributes": self._extract_attributes,
            "variants": self._extract_variants,
        }

    def project(self, product: Any) -> ProductDocument:
        """
        Project a product into its search document.

        Args:
            product: Product aggregate with its current locale set

        Returns:
            A new ProductDocument

        Raises:
            NoActiveLocaleError: If the product has no active translation
            MissingMainTaxonError: If the product has no main taxon
        """
        logger.debug("Projecting product %s (%s)", product.id, product.code)
        fields = {name: extract(product) for name, extract in self._extractors.items()}
        return ProductDocument(**fields)

    def _extract_images(self, product) -> List[ImageDocument]:
        return [self.mapper.map(image, ImageDocument) for image in product.images]

    def _extract_main_taxon(self, product) -> TaxonDocument:
        if product.main_taxon is None:
            raise MissingMainTaxonError(
                f"Product {product.code!r} has no main taxon",
                product_id=product.id,
                product_code=product.code,
            )
        return self.mapper.map(product.main_taxon, TaxonDocument)

    def _extract_product_taxons(self, product) -> List[ProductTaxonDocument]:
        return [
            self.mapper.map(product_taxon, ProductTaxonDocument)
            for product_taxon in product.product_taxons
        ]

    def _extract_channels(self, product) -> List[ChannelDocument]:
        return [self.mapper.map(channel, ChannelDocument) for channel in product.channels]

    def _extract_attributes(self, product) -> Dict[str, AttributeDocument]:
        attributes = {}
        current_locale = self._current_locale(product)

        for attribute_value in product.get_attributes_by_locale(current_locale, current_locale):
            if attribute_value.name is None or attribute_value.value is None:
                continue
            attribute = attribute_value.attribute
            if not isinstance(attribute, Searchable) or (not attribute.searchable and not attribute.filterable):
                continue

            attribute_document = self.mapper.map(attribute_value, AttributeDocument)
            # The raw value keeps its own type (text, number, boolean, list)
            attribute_document = AttributeDocument.model_validate(
                {**attribute_document.model_dump(), "value": attribute_value.value}
            )
            # Duplicate codes: the last value wins
            attributes[attribute_value.code] = attribute_document

        return attributes

    def _extract_variants(self, product) -> List[VariantDocument]:
        variants = []
        current_locale = self._current_locale(product)

        for variant in product.variants:
            is_in_stock = True
            if isinstance(variant, Stockable):
                is_in_stock = self.availability_checker.is_stock_available(variant)

            # Built by hand: option values need their translation in the current locale
            options = {}
            for option_value in variant.option_values:
                translation = option_value.get_translation(current_locale)
                options[option_value.option_code] = VariantOptionDocument(
                    name=option_value.name,
                    code=option_value.code,
                    value=translation.value if translation else None,
                )

            variants.append(VariantDocument(
                enabled=variant.enabled,
                is_in_stock=is_in_stock,
                options=options,
            ))

        return variants

    @staticmethod
    def _current_locale(product) -> str:
        translation = product.get_translation()
        if translation is None or not translation.locale:
            raise NoActiveLocaleError(
                f"Product {product.code!r} has no active translation",
                product_id=product.id,
                product_code=product.code,
            )
        return translation.locale
