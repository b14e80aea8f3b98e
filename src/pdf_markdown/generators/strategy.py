"""
Conversion strategies: lookup tables from item type to renderer.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional

from ..models import Item, HEADING, LIST_ITEM, PARAGRAPH, TEXT_RUN

Renderer = Callable[[Item], str]


@dataclass(frozen=True)
class ConversionStrategy:
    """
    Maps item types to rendering functions.

    Attributes:
        renderers: Item type -> function rendering one item to text
        fallback: Renderer for unmapped types; None makes unmapped types an error
    """
    renderers: Mapping[str, Renderer] = field(default_factory=dict)
    fallback: Optional[Renderer] = None

    def renderer_for(self, item_type: str) -> Optional[Renderer]:
        """Return the renderer for a type, the fallback, or None."""
        return self.renderers.get(item_type, self.fallback)

    def with_overrides(self, renderers: Mapping[str, Renderer]) -> "ConversionStrategy":
        """Create a strategy with the given renderers layered over these ones."""
        return ConversionStrategy(renderers={**self.renderers, **renderers}, fallback=self.fallback)

    def with_fallback(self, fallback: Optional[Renderer]) -> "ConversionStrategy":
        return ConversionStrategy(renderers=dict(self.renderers), fallback=fallback)


def render_text(item: Item) -> str:
    return item.text.strip()


def render_heading(item: Item) -> str:
    level = item.value("level", 1)
    return f"{'#' * level} {item.text.strip()}"


def render_list_item(item: Item) -> str:
    return f"{item.value('marker', '-')} {item.text.strip()}"


def render_nothing(item: Item) -> str:
    return ""


MARKDOWN_RENDERERS: Dict[str, Renderer] = {
    TEXT_RUN: render_text,
    PARAGRAPH: render_text,
    HEADING: render_heading,
    LIST_ITEM: render_list_item,
}

# Non-text content has no renderer and is dropped by the fallback
MARKDOWN_STRATEGY = ConversionStrategy(renderers=MARKDOWN_RENDERERS, fallback=render_nothing)
