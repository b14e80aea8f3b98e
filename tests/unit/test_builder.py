"""Unit tests for the document model builder."""

import pytest
import pytest_check as check

from pdf_markdown.builder import DocumentBuilder
from pdf_markdown.exceptions import EmptyDocument, SchemaViolation


class TestDocumentBuilder:
    """Tests for DocumentBuilder.build."""

    def test_orders_increase_across_pages(self, make_run) -> None:
        """Order numbers are unique and strictly increasing, never reset per page."""
        pages = [
            [make_run("a", 0), make_run("b", 1)],
            [make_run("c", 0, page=1), make_run("d", 1, page=1)],
            [make_run("e", 0, page=2)],
        ]
        doc = DocumentBuilder().build(pages)
        orders = [it.order for it in doc.items()]

        check.equal(orders, sorted(set(orders)))
        check.equal(orders, [0, 1, 2, 3, 4])
        check.equal([it.text for it in doc.items()], ["a", "b", "c", "d", "e"])

    def test_incoming_order_sorts_within_page(self, make_run) -> None:
        """Extractor orders decide sequence within a page."""
        doc = DocumentBuilder().build([[make_run("second", 5), make_run("first", 2)]])

        check.equal([it.text for it in doc.items()], ["first", "second"])
        check.equal([it.order for it in doc.items()], [0, 1])

    def test_groups_items_into_pages(self, make_run) -> None:
        """Each input sequence becomes one page, including empty ones."""
        doc = DocumentBuilder().build([[make_run("a")], [], [make_run("b", page=2)]])

        check.equal(doc.page_count, 3)
        check.equal([len(p) for p in doc.pages], [1, 0, 1])
        check.equal([p.index for p in doc.pages], [0, 1, 2])

    def test_start_order(self, make_run) -> None:
        """Numbering starts at start_order."""
        doc = DocumentBuilder(start_order=100).build([[make_run("a"), make_run("b", 1)]])

        check.equal([it.order for it in doc.items()], [100, 101])

    def test_zero_pages_fails(self) -> None:
        """Zero pages is a usage error."""
        with pytest.raises(EmptyDocument):
            DocumentBuilder().build([])

    def test_invalid_item_fails(self, make_run) -> None:
        """Items are validated before they enter the document."""
        raw = make_run("a")
        del raw["fields"]["baseline"]

        with pytest.raises(SchemaViolation, match="baseline"):
            DocumentBuilder().build([[raw]])

    def test_validation_can_be_disabled(self) -> None:
        """Trusted producers may skip validation."""
        raw = {"type": "text-run", "fields": {"str": "Hello"}, "order": 0}
        doc = DocumentBuilder(validate=False).build([[raw]])

        check.equal(doc.item_count, 1)
        check.equal(next(doc.items()).value("page"), 0)

    def test_missing_order_keeps_position(self, make_run) -> None:
        """Records with a null order keep their supplied position."""
        pages = [[make_run("a", 0), {**make_run("b"), "order": None}, make_run("c", 2)]]
        doc = DocumentBuilder().build(pages)

        check.equal([it.text for it in doc.items()], ["a", "b", "c"])
        check.equal([it.order for it in doc.items()], [0, 1, 2])

    def test_page_field_matches_page_index(self, make_run) -> None:
        """A stale page field is replaced by the page the item was supplied on."""
        doc = DocumentBuilder().build([[make_run("a", page=5)], [make_run("b", page=0)]])

        check.equal([it.page for it in doc.items()], [0, 1])
