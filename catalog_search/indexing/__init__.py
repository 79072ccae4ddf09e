"""Projection of products into search documents and handoff to the index."""
from .mappers import DocumentMapper
from .projector import ProductDocumentProjector
from .parsing import ProductIndexer

__all__ = [
    "DocumentMapper",
    "ProductDocumentProjector",
    "ProductIndexer"
]
