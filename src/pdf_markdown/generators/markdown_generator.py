"""
Markdown generator driven by a conversion strategy.
"""

from typing import List, Optional

from .base import BaseGenerator
from .strategy import ConversionStrategy, MARKDOWN_STRATEGY
from ..exceptions import UnhandledItemType
from ..models import Document, Page


class MarkdownGenerator(BaseGenerator):
    """
    Renders a document by looking up each item's type in a strategy.

    Pages are visited by index and items by order. Empty fragments are
    skipped; the rest are joined with the separator. When a page
    separator is set, each page is rendered on its own and pages are
    joined with it.
    """

    def __init__(
        self,
        strategy: ConversionStrategy = MARKDOWN_STRATEGY,
        separator: str = "\n",
        page_separator: Optional[str] = None,
    ):
        self.strategy = strategy
        self.separator = separator
        self.page_separator = page_separator

    def generate(self, document: Document) -> str:
        if self.page_separator is None:
            return self.separator.join(
                fragment for page in document.pages for fragment in self._render_page(page)
            )

        rendered = [self.separator.join(self._render_page(page)) for page in document.pages]
        return self.page_separator.join(rendered)

    def _render_page(self, page: Page) -> List[str]:
        fragments = []
        for item in page.items:
            renderer = self.strategy.renderer_for(item.type)
            if renderer is None:
                raise UnhandledItemType(item.type, item.order)
            fragment = renderer(item)
            if fragment:
                fragments.append(fragment)
        return fragments
