"""Unit tests for schema validation."""

import pytest
import pytest_check as check

from pdf_markdown.exceptions import SchemaViolation
from pdf_markdown.models import ItemSchema, TEXT_RUN_SCHEMA, validate_item


class TestValidateItemValid:
    """Tests for items that satisfy their schema."""

    def test_returns_item_unchanged(self, make_run) -> None:
        """A valid item is returned as-is."""
        raw = make_run("Hello")

        check.is_(validate_item(raw, TEXT_RUN_SCHEMA), raw)

    def test_int_satisfies_float_field(self, make_run) -> None:
        """Integer coordinates are accepted for float fields."""
        raw = make_run("Hello")
        raw["fields"]["x"] = 72

        check.is_(validate_item(raw), raw)

    def test_extra_fields_are_allowed(self, make_run) -> None:
        """Fields beyond the schema pass through."""
        raw = make_run("Hello")
        raw["fields"]["flags"] = 4

        check.is_(validate_item(raw), raw)

    def test_custom_schema(self) -> None:
        """Schemas other than text-run can be declared."""
        schema = ItemSchema("heading", {"str": str, "level": int})
        raw = {"type": "heading", "fields": {"str": "Intro", "level": 2}, "order": 0}

        check.is_(validate_item(raw, schema), raw)


class TestValidateItemRejection:
    """Tests for malformed extracted items."""

    def test_missing_field(self, make_run) -> None:
        """A missing required field names the field and reports 'missing'."""
        raw = make_run("Hello")
        del raw["fields"]["font_size"]

        with pytest.raises(SchemaViolation) as exc_info:
            validate_item(raw)

        check.equal(exc_info.value.field, "font_size")
        check.equal(exc_info.value.expected, "float")
        check.equal(exc_info.value.actual, "missing")

    def test_wrong_type(self, make_run) -> None:
        """A mistyped field reports expected and actual types."""
        raw = make_run("Hello")
        raw["fields"]["str"] = 42

        with pytest.raises(SchemaViolation) as exc_info:
            validate_item(raw)

        check.equal(exc_info.value.field, "str")
        check.equal(exc_info.value.expected, "str")
        check.equal(exc_info.value.actual, "int")

    def test_numeric_string_is_rejected(self, make_run) -> None:
        """Strings are not coerced into numbers."""
        raw = make_run("Hello")
        raw["fields"]["width"] = "12.5"

        with pytest.raises(SchemaViolation, match="width"):
            validate_item(raw)

    def test_bool_is_rejected_for_numbers(self, make_run) -> None:
        """Booleans do not satisfy numeric fields."""
        raw = make_run("Hello")
        raw["fields"]["page"] = True

        with pytest.raises(SchemaViolation) as exc_info:
            validate_item(raw)

        check.equal(exc_info.value.actual, "bool")

    def test_missing_type_tag(self, make_run) -> None:
        """Records need a string type tag."""
        raw = make_run("Hello")
        del raw["type"]

        with pytest.raises(SchemaViolation) as exc_info:
            validate_item(raw)

        check.equal(exc_info.value.field, "type")

    def test_non_integer_order(self, make_run) -> None:
        """Order must be an integer when present."""
        raw = make_run("Hello")
        raw["order"] = 1.5

        with pytest.raises(SchemaViolation, match="order"):
            validate_item(raw)
