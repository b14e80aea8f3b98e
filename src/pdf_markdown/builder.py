"""
Document model builder.

Turns per-page lists of extracted records into an immutable Document,
assigning one monotonic order sequence across the whole document.
"""

from typing import Any, List, Mapping, Sequence

from .exceptions import EmptyDocument
from .logging import get_logger
from .models import Document, Item, ItemSchema, Page, TEXT_RUN_SCHEMA, validate_item

logger = get_logger(__name__)


class DocumentBuilder:
    """
    Assembles validated items into a Document.

    Example:
        builder = DocumentBuilder()
        document = builder.build(extractor.extract_pages(pdf_bytes))
    """

    def __init__(self, schema: ItemSchema = TEXT_RUN_SCHEMA, validate: bool = True, start_order: int = 0):
        """
        Initialize the builder.

        Args:
            schema: Schema every raw item must satisfy
            validate: Run the schema validator on each raw item
            start_order: First order number to assign
        """
        self.schema = schema
        self.validate = validate
        self.start_order = start_order

    def build(self, pages: Sequence[Sequence[Mapping[str, Any]]]) -> Document:
        """
        Build a Document from per-page raw items.

        Incoming "order" values only sort items within their page (records
        without one keep their position); the builder then renumbers them so
        orders increase across pages. Each item's "page" field is set to
        the index of the page it was supplied on.

        Args:
            pages: One sequence of boundary records per page, in page order

        Returns:
            New Document

        Raises:
            EmptyDocument: If no pages are supplied
            SchemaViolation: If a raw item does not match the schema
        """
        if not pages:
            raise EmptyDocument()

        next_order = self.start_order
        built: List[Page] = []

        for index, raw_items in enumerate(pages):
            if self.validate:
                for raw in raw_items:
                    validate_item(raw, self.schema)

            ranked = sorted(enumerate(raw_items), key=_sort_key)

            items = []
            for _, raw in ranked:
                fields = dict(raw["fields"])
                fields["page"] = index
                items.append(Item(type=raw["type"], fields=fields, order=next_order))
                next_order += 1

            built.append(Page(index=index, items=tuple(items)))

        document = Document(pages=tuple(built))
        logger.debug("Built document with %d pages and %d items", document.page_count, document.item_count)
        return document


def _sort_key(pair):
    position, raw = pair
    order = raw.get("order")
    return (position if order is None else order, position)
