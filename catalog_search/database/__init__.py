"""Catalog entities and search document schemas."""
from .catalog_models import (
    Base,
    Product,
    ProductTranslation,
    ProductImage,
    Taxon,
    ProductTaxon,
    Channel,
    ProductVariant,
    ProductOption,
    ProductOptionValue,
    ProductOptionValueTranslation,
    ProductAttribute,
    ProductAttributeValue,
    Stockable,
    Searchable,
)
from .document_schema import (
    ImageDocument,
    TaxonDocument,
    ProductTaxonDocument,
    ChannelDocument,
    AttributeDocument,
    VariantOptionDocument,
    VariantDocument,
    ProductDocument,
)

__all__ = [
    "Base",
    "Product",
    "ProductTranslation",
    "ProductImage",
    "Taxon",
    "ProductTaxon",
    "Channel",
    "ProductVariant",
    "ProductOption",
    "ProductOptionValue",
    "ProductOptionValueTranslation",
    "ProductAttribute",
    "ProductAttributeValue",
    "Stockable",
    "Searchable",
    "ImageDocument",
    "TaxonDocument",
    "ProductTaxonDocument",
    "ChannelDocument",
    "AttributeDocument",
    "VariantOptionDocument",
    "VariantDocument",
    "ProductDocument",
]
