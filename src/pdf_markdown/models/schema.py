"""
Schema validation for raw extracted items.

A schema declares the fields an extracted item must carry and their
types. Validation is delegated to a strict pydantic model generated
from the declaration; the first pydantic error is reported as a
SchemaViolation.
"""

from typing import Any, Dict, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from ..exceptions import SchemaViolation


class ItemSchema:
    """
    Declares required field names and expected value types.

    Example:
        schema = ItemSchema("heading", {"str": str, "level": int})
        validate_item({"type": "heading", "fields": {...}}, schema)
    """

    def __init__(self, name: str, fields: Mapping[str, type]):
        self.name = name
        self.fields: Dict[str, type] = dict(fields)
        self._model: Optional[Type[BaseModel]] = None

    @property
    def model(self) -> Type[BaseModel]:
        """Strict pydantic model mirroring the declaration, built on first use."""
        if self._model is None:
            definitions = {name: (tp, ...) for name, tp in self.fields.items()}
            self._model = create_model(
                f"{self.name.title().replace('-', '')}Fields",
                __config__=ConfigDict(strict=True, extra="allow"),
                **definitions,
            )
        return self._model

    def expected(self, field: str) -> str:
        tp = self.fields.get(field)
        return tp.__name__ if tp is not None else "unknown"

    def __repr__(self) -> str:
        return f"ItemSchema({self.name}, fields={list(self.fields)})"


TEXT_RUN_SCHEMA = ItemSchema(
    "text-run",
    {
        "str": str,
        "page": int,
        "x": float,
        "y": float,
        "width": float,
        "height": float,
        "font_size": float,
        "font_name": str,
        "baseline": float,
    },
)


def validate_item(raw: Mapping[str, Any], schema: ItemSchema = TEXT_RUN_SCHEMA) -> Mapping[str, Any]:
    """
    Validate a raw extracted item against a schema.

    Args:
        raw: Boundary record with "type", "fields" and optionally "order"
        schema: Declared fields and types

    Returns:
        The raw item, unchanged

    Raises:
        SchemaViolation: If the type tag or a required field is missing or mistyped
    """
    item_type = raw.get("type")
    if not isinstance(item_type, str):
        raise SchemaViolation("type", "str", _type_name(raw, "type"))

    order = raw.get("order")
    if order is not None and (isinstance(order, bool) or not isinstance(order, int)):
        raise SchemaViolation("order", "int", type(order).__name__)

    fields = raw.get("fields")
    if not isinstance(fields, Mapping):
        raise SchemaViolation("fields", "mapping", _type_name(raw, "fields"))

    # bool never satisfies a non-bool field
    for name, tp in schema.fields.items():
        value = fields.get(name)
        if isinstance(value, bool) and tp is not bool:
            raise SchemaViolation(name, schema.expected(name), "bool")

    try:
        schema.model.model_validate(dict(fields))
    except ValidationError as exc:
        error = exc.errors()[0]
        name = str(error["loc"][0]) if error["loc"] else "fields"
        actual = "missing" if error["type"] == "missing" else _type_name(fields, name)
        raise SchemaViolation(name, schema.expected(name), actual) from exc

    return raw


def _type_name(mapping: Mapping[str, Any], key: str) -> str:
    if key not in mapping:
        return "missing"
    return type(mapping[key]).__name__
