"""
List item detector: tags bulleted and enumerated lines as list items.
"""

import re
from typing import List

from .base import BaseTransformer
from ..models import Document, Item, LIST_ITEM, PARAGRAPH, TEXT_RUN

BULLETS = "•◦▪‣∙·-*–"

BULLET_PATTERN = re.compile(r"^\s*([" + re.escape(BULLETS) + r"])\s+(?P<text>\S.*)$", re.DOTALL)
ENUMERATION_PATTERN = re.compile(r"^\s*(?P<marker>(?:\d{1,3}|[a-zA-Z])[.)])\s+(?P<text>\S.*)$", re.DOTALL)


class ListItemDetector(BaseTransformer):
    """
    Re-tags paragraphs that start with a bullet or enumeration as "list-item".

    The marker is removed from the text and stored in the "marker" field:
    "-" for any bullet, the enumeration itself ("1.", "b)") otherwise.
    """

    def __init__(self, name: str = "list-item-detector"):
        super().__init__(name)

    def apply(self, document: Document) -> Document:
        def detect(page) -> List[Item]:
            return [self._detect(item) for item in page.items]

        return document.map_pages(detect)

    def _detect(self, item: Item) -> Item:
        if item.type not in (PARAGRAPH, TEXT_RUN):
            return item

        match = BULLET_PATTERN.match(item.text)
        if match:
            return item.replace(type=LIST_ITEM, str=match.group("text"), marker="-")

        match = ENUMERATION_PATTERN.match(item.text)
        if match:
            return item.replace(type=LIST_ITEM, str=match.group("text"), marker=match.group("marker"))

        return item
