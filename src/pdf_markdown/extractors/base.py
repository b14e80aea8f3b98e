"""
Base class for content extractors.

An extractor is the boundary to the PDF decoding engine. It turns
document bytes into, per page, an ordered list of boundary records:

    {"type": "text-run", "fields": {"str": ..., "x": ..., ...}, "order": 0}

Any component that can enumerate positioned text runs satisfies it.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Sequence

RawItem = Dict[str, Any]


class BaseExtractor(ABC):
    """
    Abstract base class for content extraction from documents.

    Subclasses implement extract_pages; extract_pages_async runs it in a
    worker thread so callers can await decoding I/O.
    """

    @abstractmethod
    def extract_pages(self, document_bytes: bytes) -> List[List[RawItem]]:
        """
        Extract positioned items from every page of a document.

        Args:
            document_bytes: Raw document payload

        Returns:
            One list of boundary records per page, in page order
        """
        pass

    async def extract_pages_async(self, document_bytes: bytes) -> List[List[RawItem]]:
        """Awaitable variant of extract_pages."""
        return await asyncio.to_thread(self.extract_pages, document_bytes)

    def postprocess(self, items: List[RawItem]) -> List[RawItem]:
        """
        Optional postprocessing step after a page is extracted.
        Override in subclasses if needed.

        Args:
            items: Records extracted from one page

        Returns:
            Postprocessed records
        """
        return items


class StaticExtractor(BaseExtractor):
    """
    Serves pre-built pages of boundary records, ignoring the payload.

    Useful when positioned items come from another decoding engine, or
    when testing the pipeline without a real PDF.
    """

    def __init__(self, pages: Sequence[Sequence[Mapping[str, Any]]]):
        self.pages = [[dict(item) for item in page] for page in pages]

    def extract_pages(self, document_bytes: bytes = b"") -> List[List[RawItem]]:
        return [self.postprocess([dict(item) for item in page]) for page in self.pages]
