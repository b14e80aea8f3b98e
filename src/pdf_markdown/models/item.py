"""
Item model: one positioned content unit flowing through the pipeline.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

TEXT_RUN = "text-run"
PARAGRAPH = "paragraph"
HEADING = "heading"
LIST_ITEM = "list-item"


@dataclass(frozen=True)
class Item:
    """
    A positioned content unit.

    Attributes:
        type: Semantic tag at the current pipeline stage ("text-run", "heading", ...)
        fields: Read-only mapping of field name to value. Text lives under "str";
                layout metadata under "page", "x", "y", "width", "height",
                "font_size", "font_name" and "baseline".
        order: Reading-order sequence number, unique within a document
    """
    type: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    order: int = 0

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        # fields is a read-only mapping and cannot be hashed
        return hash((self.type, self.order))

    def value(self, name: str, default: Any = None) -> Any:
        """Return a field value, or default when the field is absent."""
        return self.fields.get(name, default)

    @property
    def text(self) -> str:
        """The extracted text of the item."""
        return self.fields.get("str", "")

    @property
    def page(self) -> Optional[int]:
        return self.fields.get("page")

    @property
    def x(self) -> float:
        return self.fields["x"]

    @property
    def y(self) -> float:
        return self.fields["y"]

    @property
    def width(self) -> float:
        return self.fields["width"]

    @property
    def height(self) -> float:
        return self.fields["height"]

    @property
    def x2(self) -> float:
        """Right coordinate of the bounding box."""
        return self.x + self.width

    @property
    def y2(self) -> float:
        """Bottom coordinate of the bounding box."""
        return self.y + self.height

    @property
    def font_size(self) -> float:
        return self.fields["font_size"]

    @property
    def baseline(self) -> float:
        return self.fields["baseline"]

    def replace(self, type: Optional[str] = None, order: Optional[int] = None, **fields: Any) -> "Item":
        """
        Create a new item with a different type, order or updated fields.

        Args:
            type: New type tag (default: keep current)
            order: New order (default: keep current)
            **fields: Fields to add or overwrite

        Returns:
            New Item; this item is left untouched
        """
        return Item(
            type=self.type if type is None else type,
            fields={**self.fields, **fields},
            order=self.order if order is None else order,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the extractor boundary record shape."""
        return {"type": self.type, "fields": dict(self.fields), "order": self.order}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        """Create an Item from a boundary record."""
        return cls(
            type=data["type"],
            fields=data.get("fields", {}),
            order=data.get("order", 0),
        )

    def __repr__(self) -> str:
        text = self.text if len(self.text) <= 20 else self.text[:20] + "..."
        return f"Item(type={self.type}, order={self.order}, text='{text}')"
