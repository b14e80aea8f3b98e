"""
Heading classifier: tags items as headings or paragraphs by font size.
"""

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from .base import TwoPassTransformer
from ..models import Document, Item, HEADING, PARAGRAPH, TEXT_RUN

CLASSIFIED_TYPES = (TEXT_RUN, PARAGRAPH, HEADING)
MAX_HEADING_LEVEL = 6


@dataclass
class FontStatistics:
    """Whole-document font size summary produced by the scan pass."""
    body_size: float = 0.0
    threshold: float = 0.0
    levels: Dict[float, int] = field(default_factory=dict)


class HeadingClassifier(TwoPassTransformer):
    """
    Re-tags text items as "heading" or "paragraph".

    The scan pass takes a percentile of every text item's font size as the
    body size; items whose font size exceeds body size times the ratio are
    headings. Distinct heading sizes, largest first, map to levels 1-6.
    """

    def __init__(self, percentile: float = 50.0, ratio: float = 1.15, name: str = "heading-classifier"):
        """
        Args:
            percentile: Percentile of font sizes taken as body text size (0-100)
            ratio: Multiple of body size a font must exceed to be a heading
        """
        super().__init__(name)
        if not 0 <= percentile <= 100:
            raise ValueError(f"percentile must be within [0, 100], got {percentile}")
        self.percentile = percentile
        self.ratio = ratio

    def scan(self, document: Document) -> FontStatistics:
        sizes = []
        for item in document.items():
            if item.type not in CLASSIFIED_TYPES or not item.text.strip():
                continue
            self.require(item, "font_size")
            sizes.append(float(item.font_size))

        if not sizes:
            return FontStatistics()

        body_size = float(np.percentile(np.array(sizes), self.percentile))
        threshold = body_size * self.ratio

        heading_sizes = sorted({s for s in sizes if s > threshold}, reverse=True)
        levels = {size: min(i + 1, MAX_HEADING_LEVEL) for i, size in enumerate(heading_sizes)}

        return FontStatistics(body_size=body_size, threshold=threshold, levels=levels)

    def rewrite(self, document: Document, summary: FontStatistics) -> Document:
        def classify(page) -> List[Item]:
            return [self._classify(item, summary) for item in page.items]

        return document.map_pages(classify)

    def _classify(self, item: Item, summary: FontStatistics) -> Item:
        if item.type not in CLASSIFIED_TYPES:
            return item
        if not item.text.strip():
            return item.replace(type=PARAGRAPH)

        size = float(item.font_size)
        if size > summary.threshold:
            return item.replace(type=HEADING, level=summary.levels[size])
        return item.replace(type=PARAGRAPH)
