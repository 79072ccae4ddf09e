"""Conversion of catalog products into documents for the indexing pipeline."""
from datetime import date, datetime
import json
import logging
from itertools import islice
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from langchain_core.documents import Document

from catalog_search.config import settings
from catalog_search.database.document_schema import ProductDocument
from catalog_search.errors import ProjectionError
from catalog_search.indexing.projector import ProductDocumentProjector

logger = logging.getLogger(__name__)


class ProductIndexer:
    """Projects products and prepares them for the search index."""

    def __init__(self, projector: ProductDocumentProjector):
        self.projector = projector

    def parse_product(self, product: Any) -> Dict[str, Any]:
        """
        Parse a single product into a structured dictionary.

        Args:
            product: Product aggregate with its current locale set

        Returns:
            Dictionary with the searchable text, filter metadata,
            product id and the full search document

        Raises:
            ProjectionError: If the product cannot be projected
        """
        document = self.projector.project(product)

        return {
            "text": self._build_text(document),
            "metadata": self._build_metadata(document),
            "product_id": document.id,
            "document": document.to_search_document()
        }

    def parse_all_products(
        self,
        products: Iterable[Any],
        batch_size: Optional[int] = None,
        enabled_only: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Parse products in batches.

        Products that cannot be projected are logged and skipped.

        Args:
            products: Product aggregates to parse
            batch_size: Number of products per batch (defaults to settings)
            enabled_only: Skip disabled products

        Returns:
            List of parsed product dictionaries
        """
        batch_size = batch_size or settings.index_batch_size
        parsed_products = []
        skipped = 0
        iterator = iter(products)
        batch_number = 0

        while True:
            batch = list(islice(iterator, batch_size))
            if not batch:
                break
            batch_number += 1

            for product in batch:
                if enabled_only and not product.enabled:
                    continue
                try:
                    parsed_products.append(self.parse_product(product))
                except ProjectionError as e:
                    skipped += 1
                    logger.warning("Skipping product %s (%s): %s", e.product_id, e.product_code, e)

            logger.info("Batch %d: %d products parsed so far", batch_number, len(parsed_products))

            # A short batch is the last one
            if len(batch) < batch_size:
                break

        logger.info("Parsed %d products, skipped %d", len(parsed_products), skipped)
        return parsed_products

    def to_langchain_documents(
        self,
        parsed_products: List[Dict[str, Any]]
    ) -> List[Document]:
        """
        Convert parsed products to LangChain Document objects.

        Args:
            parsed_products: List of parsed product dictionaries

        Returns:
            List of LangChain Document objects
        """
        documents = []

        for parsed in parsed_products:
            doc = Document(
                page_content=parsed["text"],
                metadata={
                    **parsed["metadata"],
                    "source": settings.index_source_name,
                    "source_id": parsed["product_id"]
                }
            )
            documents.append(doc)

        return documents

    def save_documents_to_jsonl(
        self,
        documents: List[Document],
        file_path: Optional[str] = None
    ) -> int:
        """
        Save documents to a JSONL file.

        Args:
            documents: List of Document objects
            file_path: Path of the JSONL file (defaults to settings)

        Returns:
            Number of documents saved
        """
        file_path_obj = Path(file_path or settings.index_jsonl_path)
        file_path_obj.parent.mkdir(parents=True, exist_ok=True)

        saved = 0
        with open(file_path_obj, 'w', encoding='utf-8') as f:
            for doc in documents:
                line = {
                    "text": doc.page_content,
                    "metadata": doc.metadata
                }
                f.write(json.dumps(line, ensure_ascii=False) + '\n')
                saved += 1

        logger.info("Saved %d documents to %s", saved, file_path_obj)
        return saved

    @staticmethod
    def _build_text(document: ProductDocument) -> str:
        text_parts = []

        if document.name:
            text_parts.append(f"Product Name: {document.name}")
        text_parts.append(f"Category: {document.main_taxon.name or document.main_taxon.code}")
        if document.description:
            text_parts.append(f"Description: {document.description}")

        for attribute in document.attributes.values():
            value = attribute.value
            if isinstance(value, list):
                value = ", ".join(str(item) for item in value)
            text_parts.append(f"{attribute.name}: {value}")

        return "\n".join(text_parts)

    @staticmethod
    def _build_metadata(document: ProductDocument) -> Dict[str, Any]:
        # Flat values only: index backends reject nested metadata
        metadata = {
            "product_id": document.id,
            "code": document.code or "",
            "enabled": document.enabled,
            "main_taxon": document.main_taxon.code,
            "taxons": ", ".join(pt.taxon.code for pt in document.product_taxons),
            "channels": ", ".join(channel.code for channel in document.channels),
            "is_in_stock": any(variant.enabled and variant.is_in_stock for variant in document.variants),
        }

        for code, attribute in document.attributes.items():
            value = attribute.value
            if isinstance(value, (str, int, float, bool)):
                metadata[f"attr_{code}"] = value
            elif isinstance(value, (date, datetime)):
                metadata[f"attr_{code}"] = value.isoformat()
            elif isinstance(value, list):
                metadata[f"attr_{code}"] = ", ".join(str(item) for item in value)
            elif isinstance(value, dict):
                metadata[f"attr_{code}"] = json.dumps(value, ensure_ascii=False, sort_keys=True, default=str)

        return metadata
