"""Search document schemas produced from catalog products."""
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Attribute values keep their source type: a boolean attribute must not turn
# into 1 or "true" on its way to the index.
AttributeValue = Union[
    StrictBool,
    StrictInt,
    StrictFloat,
    StrictStr,
    datetime,
    date,
    List[Any],
    Dict[str, Any],
]


class SearchDocument(BaseModel):
    """Base schema for immutable search documents."""

    class Config:
        frozen = True


class ImageDocument(SearchDocument):
    path: str = Field(..., description="Image path relative to the media root")
    type: Optional[str] = Field(None, description="Image role, e.g. main or thumbnail")


class TaxonDocument(SearchDocument):
    code: str
    name: Optional[str] = None
    slug: Optional[str] = None
    position: Optional[int] = None
    level: Optional[int] = None


class ProductTaxonDocument(SearchDocument):
    taxon: TaxonDocument
    position: Optional[int] = Field(None, description="Position of the product inside the taxon")


class ChannelDocument(SearchDocument):
    code: str
    name: Optional[str] = None


class AttributeDocument(SearchDocument):
    """Attribute value resolved in the current locale."""
    code: str
    name: str
    value: Optional[AttributeValue] = None


class VariantOptionDocument(SearchDocument):
    name: Optional[str] = Field(None, description="Name of the option, e.g. Size")
    code: str = Field(..., description="Code of the option value")
    value: Optional[str] = Field(None, description="Option value translated in the current locale")


class VariantDocument(SearchDocument):
    enabled: bool
    is_in_stock: bool
    options: Dict[str, VariantOptionDocument] = Field(default_factory=dict, description="Option values keyed by option code")


class ProductDocument(SearchDocument):
    """Flattened product, ready to be handed to the search index."""
    id: int
    code: Optional[str] = None
    enabled: bool
    slug: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    images: List[ImageDocument] = Field(default_factory=list)
    main_taxon: TaxonDocument
    product_taxons: List[ProductTaxonDocument] = Field(default_factory=list)
    channels: List[ChannelDocument] = Field(default_factory=list)
    attributes: Dict[str, AttributeDocument] = Field(default_factory=dict, description="Attributes keyed by attribute code")
    variants: List[VariantDocument] = Field(default_factory=list)

    def to_search_document(self) -> Dict[str, Any]:
        """
        Convert the document into the JSON-ready payload sent to the index.

        Returns:
            Dictionary with JSON-compatible values only
        """
        return self.model_dump(mode="json")
