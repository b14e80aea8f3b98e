"""Pytest fixtures and shared test configuration.

Fixtures:
    - make_run: factory for raw text-run boundary records
    - make_item: factory for built Items
    - make_document: factory for Documents from per-page item lists
    - sample_pdf_bytes: small in-memory PDF with a title, body lines and a list
    - clean_env: working directory and environment free of PDF_MARKDOWN_ settings
"""

import os
from typing import Any, Callable, Dict, Iterator, List

import fitz  # PyMuPDF
import pytest

from pdf_markdown.models import Document, Item, Page


def _run_fields(text: str, x: float, y: float, width: float, font_size: float, page: int) -> Dict[str, Any]:
    height = font_size * 1.2
    return {
        "str": text,
        "page": page,
        "x": float(x),
        "y": float(y),
        "width": float(width),
        "height": float(height),
        "font_size": float(font_size),
        "font_name": "Helvetica",
        "baseline": float(y + font_size),
    }


@pytest.fixture
def make_run() -> Callable[..., Dict[str, Any]]:
    """Return a factory for raw text-run records.

    Returns:
        Callable building {"type", "fields", "order"} records.
    """
    def factory(text: str, order: int = 0, x: float = 72, y: float = 72,
                width: float = None, font_size: float = 12, page: int = 0) -> Dict[str, Any]:
        width = width if width is not None else len(text) * font_size * 0.5
        return {
            "type": "text-run",
            "fields": _run_fields(text, x, y, width, font_size, page),
            "order": order,
        }

    return factory


@pytest.fixture
def make_item() -> Callable[..., Item]:
    """Return a factory for built Items with layout fields."""
    def factory(text: str, order: int, x: float = 72, y: float = 72, width: float = None,
                font_size: float = 12, page: int = 0, type: str = "text-run", **extra: Any) -> Item:
        width = width if width is not None else len(text) * font_size * 0.5
        fields = {**_run_fields(text, x, y, width, font_size, page), **extra}
        return Item(type=type, fields=fields, order=order)

    return factory


@pytest.fixture
def make_document() -> Callable[..., Document]:
    """Return a factory building a Document from per-page item lists."""
    def factory(*pages: List[Item]) -> Document:
        return Document(pages=tuple(Page(index=i, items=tuple(items)) for i, items in enumerate(pages)))

    return factory


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Build a two-page PDF in memory.

    Returns:
        PDF bytes with a large title, two body lines and a bulleted list on
        page one, and a single body line on page two.
    """
    doc = fitz.open()

    page = doc.new_page()
    page.insert_text((72, 72), "Annual Report", fontsize=24)
    page.insert_text((72, 110), "Revenue grew in every region.", fontsize=11)
    page.insert_text((72, 124), "Costs stayed flat.", fontsize=11)
    page.insert_text((72, 170), "- First finding", fontsize=11)
    page.insert_text((72, 200), "- Second finding", fontsize=11)

    page = doc.new_page()
    page.insert_text((72, 72), "Appendix text follows here.", fontsize=11)

    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def clean_env(monkeypatch, tmp_path) -> Iterator[None]:
    """Isolate option loading from the caller's shell and .env files.

    Runs the test from an empty directory so load_dotenv() finds no .env,
    and removes every PDF_MARKDOWN_ variable from the environment. Variables
    a test loads from a .env file are dropped afterwards; the caller's own
    values are restored by monkeypatch.
    """
    monkeypatch.chdir(tmp_path)
    for key in _option_variables():
        monkeypatch.delenv(key)
    yield
    for key in _option_variables():
        del os.environ[key]


def _option_variables() -> List[str]:
    return [key for key in os.environ if key.startswith("PDF_MARKDOWN_")]
