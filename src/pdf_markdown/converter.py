"""
Main PDF to Markdown converter wiring all pipeline components.
"""

from pathlib import Path
from typing import Optional, Union

from .builder import DocumentBuilder
from .extractors import BaseExtractor, TextExtractor
from .generators import MARKDOWN_STRATEGY, ConversionStrategy, MarkdownGenerator
from .logging import get_logger
from .models import Document
from .options import ConversionOptions
from .transformers import DEFAULT_TRANSFORMERS, TransformPipeline, build_transformers

logger = get_logger(__name__)


class PDFConverter:
    """
    Main PDF to Markdown converter.

    Runs extraction, document building, the transform pipeline and the
    markdown generator in sequence. Every failure raises a subclass of
    ConversionError; no partial output is ever returned.

    Example:
        converter = PDFConverter(ConversionOptions(line_join_tolerance=1.5))
        markdown = converter.convert(pdf_bytes)
    """

    def __init__(self, options: Optional[ConversionOptions] = None, extractor: Optional[BaseExtractor] = None):
        """
        Initialize the converter.

        Args:
            options: Conversion options (default: ConversionOptions())
            extractor: Content extractor (default: PyMuPDF TextExtractor)
        """
        self.options = options or ConversionOptions()
        self.extractor = extractor or TextExtractor(min_text_length=self.options.min_text_length)
        self.builder = DocumentBuilder()

        entries = self.options.transformers
        if entries is None:
            entries = DEFAULT_TRANSFORMERS
        self.pipeline = TransformPipeline(build_transformers(entries, self.options))

        if isinstance(self.options.converter, ConversionStrategy):
            strategy = self.options.converter
        else:
            strategy = MARKDOWN_STRATEGY.with_overrides(self.options.converter)
        self.generator = MarkdownGenerator(
            strategy,
            separator=self.options.separator,
            page_separator=self.options.page_separator,
        )

    def build_document(self, document_bytes: bytes) -> Document:
        """Extract and build the untransformed document."""
        pages = self.extractor.extract_pages(document_bytes)
        return self.builder.build(pages)

    def transform(self, document: Document) -> Document:
        """Run the transform pipeline over a built document."""
        return self.pipeline.apply(document)

    def render(self, document: Document) -> str:
        """Render a transformed document to markdown."""
        return self.generator.generate(document)

    def convert(self, document_bytes: bytes) -> str:
        """
        Convert a PDF payload to markdown.

        Args:
            document_bytes: Raw PDF bytes

        Returns:
            Markdown text

        Raises:
            ConversionError: On any extraction, validation, transform or rendering failure
        """
        document = self.build_document(document_bytes)
        return self._finish(document)

    async def convert_async(self, document_bytes: bytes) -> str:
        """
        Convert a PDF payload, awaiting extraction in a worker thread.

        Cancellation is possible while extraction is awaited; transform and
        rendering then run to completion synchronously.
        """
        pages = await self.extractor.extract_pages_async(document_bytes)
        document = self.builder.build(pages)
        return self._finish(document)

    def convert_file(self, pdf_path: Union[str, Path]) -> str:
        """Convert a PDF file on disk."""
        path = Path(pdf_path)
        if not path.exists():
            raise FileNotFoundError(f"PDF not found: {pdf_path}")
        return self.convert(path.read_bytes())

    def save(self, pdf_path: Union[str, Path], output_path: Union[str, Path] = None) -> str:
        """
        Convert a PDF file and write the markdown next to it or to output_path.

        Returns:
            The markdown text
        """
        pdf_path = Path(pdf_path)
        output_path = Path(output_path) if output_path else pdf_path.with_suffix(".md")

        markdown = self.convert_file(pdf_path)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown, encoding="utf-8")

        logger.info("Saved markdown to %s", output_path)
        return markdown

    def _finish(self, document: Document) -> str:
        logger.info("Converting %d pages (%d items)", document.page_count, document.item_count)
        transformed = self.transform(document)
        markdown = self.render(transformed)
        logger.info("Generated %d characters of markdown", len(markdown))
        return markdown


def convert(document_bytes: bytes, options: Optional[ConversionOptions] = None) -> str:
    """
    Convert a PDF payload to markdown with the given options.

    Raises:
        ConversionError: On any failure
    """
    return PDFConverter(options).convert(document_bytes)
