"""
Page and Document models.

Documents are immutable: transformers build new Page and Document
instances instead of mutating the ones they receive.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple

from .item import Item


@dataclass(frozen=True)
class Page:
    """
    One page of a document.

    Attributes:
        index: 0-based page index
        items: Items on the page, kept sorted by order
    """
    index: int
    items: Tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(sorted(self.items, key=lambda it: it.order)))

    def with_items(self, items: Iterable[Item]) -> "Page":
        """Create a page with the same index and different items."""
        return Page(index=self.index, items=tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)


@dataclass(frozen=True)
class Document:
    """
    Ordered pages of positioned items.

    Page indexes and item orders must be unique across the whole document;
    construction fails with ValueError otherwise.
    """
    pages: Tuple[Page, ...] = field(default_factory=tuple)

    def __post_init__(self):
        pages = tuple(sorted(self.pages, key=lambda p: p.index))

        indexes = [p.index for p in pages]
        if len(set(indexes)) != len(indexes):
            raise ValueError(f"Duplicate page index in {indexes}")

        seen = set()
        for page in pages:
            for item in page.items:
                if item.order in seen:
                    raise ValueError(f"Duplicate item order {item.order} on page {page.index}")
                seen.add(item.order)

        object.__setattr__(self, "pages", pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def item_count(self) -> int:
        return sum(len(p.items) for p in self.pages)

    def items(self) -> Iterator[Item]:
        """Iterate every item, pages by index and items by order."""
        for page in self.pages:
            yield from page.items

    def get_page(self, index: int) -> Optional[Page]:
        for page in self.pages:
            if page.index == index:
                return page
        return None

    def with_pages(self, pages: Iterable[Page]) -> "Document":
        """Create a new document from the given pages."""
        return Document(pages=tuple(pages))

    def map_pages(self, fn: Callable[[Page], Iterable[Item]]) -> "Document":
        """
        Build a new document by rewriting each page's items.

        Args:
            fn: Called once per page, returns the new items for that page

        Returns:
            New Document with the same page indexes
        """
        return self.with_pages(page.with_items(fn(page)) for page in self.pages)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain structure, useful when inspecting intermediate stages."""
        return {
            "pages": [
                {"index": p.index, "items": [it.to_dict() for it in p.items]}
                for p in self.pages
            ]
        }

    def __repr__(self) -> str:
        return f"Document(pages={self.page_count}, items={self.item_count})"
