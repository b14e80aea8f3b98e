"""
Document model: items, pages, documents and item schemas.
"""

from .item import Item, TEXT_RUN, PARAGRAPH, HEADING, LIST_ITEM
from .document import Page, Document
from .schema import ItemSchema, TEXT_RUN_SCHEMA, validate_item

__all__ = [
    "Item",
    "Page",
    "Document",
    "ItemSchema",
    "TEXT_RUN_SCHEMA",
    "validate_item",
    "TEXT_RUN",
    "PARAGRAPH",
    "HEADING",
    "LIST_ITEM",
]
