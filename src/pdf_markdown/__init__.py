"""
PDF Markdown - Recover document structure from PDFs as Markdown.

Quick Start:
    from pdf_markdown import convert

    markdown = convert(pdf_bytes)

Modular Components:
    - models: Item, Page, Document and item schemas
    - extractors: Positioned text extraction from PDFs
    - builder: Document assembly with global reading order
    - transformers: Ordered structure-recovery pipeline
    - generators: Strategy-driven markdown output
"""

__version__ = "0.1.0"

# Main converter
from .converter import PDFConverter, convert
from .options import ConversionOptions

# Models
from .models import Item, Page, Document, ItemSchema, TEXT_RUN_SCHEMA, validate_item

# Components
from .builder import DocumentBuilder
from .extractors import BaseExtractor, StaticExtractor, TextExtractor
from .transformers import (
    BaseTransformer,
    TransformPipeline,
    LineJoiner,
    HeadingClassifier,
    ListItemDetector,
    ParagraphGatherer,
    DEFAULT_TRANSFORMERS,
)
from .generators import ConversionStrategy, MarkdownGenerator, MARKDOWN_STRATEGY

# Errors
from .exceptions import (
    ConversionError,
    InvalidDocument,
    ConfigurationError,
    SchemaViolation,
    EmptyDocument,
    TransformError,
    UnhandledItemType,
)

__all__ = [
    # Main classes
    "PDFConverter",
    "convert",
    "ConversionOptions",

    # Models
    "Item",
    "Page",
    "Document",
    "ItemSchema",
    "TEXT_RUN_SCHEMA",
    "validate_item",

    # Components
    "DocumentBuilder",
    "BaseExtractor",
    "StaticExtractor",
    "TextExtractor",
    "BaseTransformer",
    "TransformPipeline",
    "LineJoiner",
    "HeadingClassifier",
    "ListItemDetector",
    "ParagraphGatherer",
    "DEFAULT_TRANSFORMERS",
    "ConversionStrategy",
    "MarkdownGenerator",
    "MARKDOWN_STRATEGY",

    # Errors
    "ConversionError",
    "InvalidDocument",
    "ConfigurationError",
    "SchemaViolation",
    "EmptyDocument",
    "TransformError",
    "UnhandledItemType",
]
