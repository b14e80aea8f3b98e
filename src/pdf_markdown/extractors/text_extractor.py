"""
PDF text extraction using PyMuPDF.
"""

from typing import Any, List

import fitz  # PyMuPDF

from .base import BaseExtractor, RawItem
from ..exceptions import InvalidDocument
from ..logging import get_logger
from ..models import TEXT_RUN

logger = get_logger(__name__)

PDF_MAGIC_BYTES = b"%PDF"


class TextExtractor(BaseExtractor):
    """
    Extracts positioned text runs from PDF pages using PyMuPDF.

    Each span of PyMuPDF's text dictionary becomes one "text-run" record
    carrying its bounding box, font metadata and baseline. Non-text blocks
    (images) are skipped.
    """

    def __init__(self, min_text_length: int = 1, sort: bool = True):
        """
        Initialize the text extractor.

        Args:
            min_text_length: Minimum stripped text length to include (default: 1,
                             skips whitespace-only spans)
            sort: Ask PyMuPDF to sort blocks and lines top-left to bottom-right
        """
        self.min_text_length = min_text_length
        self.sort = sort

    def extract_pages(self, document_bytes: bytes) -> List[List[RawItem]]:
        """
        Decode a PDF payload and extract text runs from every page.

        Args:
            document_bytes: Raw PDF bytes

        Returns:
            One list of records per page

        Raises:
            InvalidDocument: If the payload is empty, lacks a PDF header, or
                             cannot be decoded
        """
        if not document_bytes:
            raise InvalidDocument("Empty document payload")
        if not document_bytes.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
            raise InvalidDocument("Invalid PDF: payload does not start with PDF header")

        try:
            doc = fitz.open(stream=document_bytes, filetype="pdf")
        except Exception as exc:
            raise InvalidDocument(f"Corrupt or invalid PDF: {exc}") from exc

        with doc:
            pages = [self.extract(page, page.number) for page in doc]

        logger.debug("Extracted %d pages", len(pages))
        return pages

    def extract(self, page: Any, page_index: int) -> List[RawItem]:
        """
        Extract text runs from a single PyMuPDF page.

        Args:
            page: PyMuPDF page object
            page_index: 0-based index stamped on every record

        Returns:
            Records in extraction order
        """
        items = []

        dict_data = page.get_text("dict", sort=self.sort)

        for block in dict_data.get("blocks", []):
            # Skip non-text blocks (type 0 is text)
            if block.get("type") != 0:
                logger.debug("Page %d: skipping non-text block", page_index)
                continue

            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    text = span.get("text", "")
                    if len(text.strip()) < self.min_text_length:
                        continue

                    x0, y0, x1, y1 = span.get("bbox", (0, 0, 0, 0))
                    origin = span.get("origin") or (x0, y1)

                    items.append({
                        "type": TEXT_RUN,
                        "fields": {
                            "str": text,
                            "page": page_index,
                            "x": float(x0),
                            "y": float(y0),
                            "width": float(x1 - x0),
                            "height": float(y1 - y0),
                            "font_size": float(span.get("size", 12.0)),
                            "font_name": span.get("font", ""),
                            "baseline": float(origin[1]),
                            "flags": span.get("flags", 0),
                            "color": span.get("color", 0),
                        },
                        "order": len(items),
                    })

        return self.postprocess(items)
