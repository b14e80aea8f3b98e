"""
Line joiner: merges text-run fragments that belong to one logical line.
"""

from typing import List

from .base import BaseTransformer
from ..models import Document, Item, Page, TEXT_RUN

LAYOUT_FIELDS = ("x", "y", "width", "height", "baseline", "font_size")


class LineJoiner(BaseTransformer):
    """
    Merges consecutive text runs on the same baseline.

    Two adjacent text runs are fragments of one line when their baselines
    match within the tolerance, the second does not start left of the
    first, and the horizontal gap between them is at most the tolerance.
    Fragment texts are concatenated with no separator; the merged item
    keeps the earliest order.
    """

    def __init__(self, tolerance: float = 2.0, name: str = "line-joiner"):
        """
        Args:
            tolerance: Baseline and horizontal gap threshold, in points
        """
        super().__init__(name)
        if tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {tolerance}")
        self.tolerance = tolerance

    def apply(self, document: Document) -> Document:
        return document.map_pages(self._join_page)

    def _join_page(self, page: Page) -> List[Item]:
        result: List[Item] = []
        group: List[Item] = []

        for item in page.items:
            if item.type != TEXT_RUN:
                if group:
                    result.append(self._merge(group))
                    group = []
                result.append(item)
                continue

            self.require(item, *LAYOUT_FIELDS)

            if group and self._continues(group[-1], item):
                group.append(item)
            else:
                if group:
                    result.append(self._merge(group))
                group = [item]

        if group:
            result.append(self._merge(group))

        return result

    def _continues(self, prev: Item, item: Item) -> bool:
        if abs(item.baseline - prev.baseline) > self.tolerance:
            return False
        if item.x < prev.x:
            return False
        gap = item.x - prev.x2
        return -self.tolerance <= gap <= self.tolerance

    def _merge(self, group: List[Item]) -> Item:
        first = group[0]
        if len(group) == 1:
            return first

        # Dominant font: the fragment contributing the most characters, earliest on ties
        dominant = max(group, key=lambda it: (len(it.text), -it.order))

        min_x = min(it.x for it in group)
        min_y = min(it.y for it in group)
        max_x = max(it.x2 for it in group)
        max_y = max(it.y2 for it in group)

        return first.replace(
            order=min(it.order for it in group),
            str="".join(it.text for it in group),
            x=min_x,
            y=min_y,
            width=max_x - min_x,
            height=max_y - min_y,
            font_size=dominant.font_size,
            font_name=dominant.value("font_name", first.value("font_name")),
        )
