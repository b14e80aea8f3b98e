"""
Paragraph gatherer: merges consecutive lines into paragraph blocks.
"""

from typing import List

from .base import BaseTransformer
from ..models import Document, Item, Page, PARAGRAPH


class ParagraphGatherer(BaseTransformer):
    """
    Merges consecutive paragraph lines that are close together vertically.

    Two paragraphs on the same page are one block when the vertical gap
    between them is at most line_spacing times the font size and their
    font sizes differ by at most size_tolerance. Texts are joined with a
    single space and the block keeps the earliest order. Items are
    visited in order, so when two lines overlap vertically the one with
    the lower order comes first.
    """

    def __init__(self, line_spacing: float = 0.8, size_tolerance: float = 0.5, name: str = "paragraph-gatherer"):
        """
        Args:
            line_spacing: Maximum vertical gap between lines, as a multiple of font size
            size_tolerance: Maximum font size difference within a block, in points
        """
        super().__init__(name)
        self.line_spacing = line_spacing
        self.size_tolerance = size_tolerance

    def apply(self, document: Document) -> Document:
        return document.map_pages(self._gather_page)

    def _gather_page(self, page: Page) -> List[Item]:
        result: List[Item] = []
        block: List[Item] = []

        for item in page.items:
            if item.type != PARAGRAPH:
                if block:
                    result.append(self._merge(block))
                    block = []
                result.append(item)
                continue

            self.require(item, "y", "height", "font_size")

            if block and self._continues(block[-1], item):
                block.append(item)
            else:
                if block:
                    result.append(self._merge(block))
                block = [item]

        if block:
            result.append(self._merge(block))

        return result

    def _continues(self, prev: Item, item: Item) -> bool:
        if abs(item.font_size - prev.font_size) > self.size_tolerance:
            return False
        gap = item.y - prev.y2
        return gap <= self.line_spacing * prev.font_size and item.y2 > prev.y

    def _merge(self, block: List[Item]) -> Item:
        first = block[0]
        if len(block) == 1:
            return first

        fields = {}
        if all(k in it.fields for it in block for k in ("x", "width")):
            min_x = min(it.x for it in block)
            fields["x"] = min_x
            fields["width"] = max(it.x2 for it in block) - min_x

        min_y = min(it.y for it in block)
        fields["y"] = min_y
        fields["height"] = max(it.y2 for it in block) - min_y

        text = " ".join(it.text.strip() for it in block if it.text.strip())
        return first.replace(order=min(it.order for it in block), str=text, **fields)
