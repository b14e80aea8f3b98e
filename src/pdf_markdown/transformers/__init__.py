"""
Transform pipeline and built-in transformers.

Transformers rewrite a Document into a new Document to recover
structure. They run strictly in the configured order:
- LineJoiner: merge text-run fragments sharing a baseline
- HeadingClassifier: tag headings and paragraphs by font size
- ListItemDetector: tag bulleted and enumerated lines
- ParagraphGatherer: merge consecutive paragraph lines
"""

from .base import BaseTransformer, TwoPassTransformer, FunctionTransformer, TransformPipeline
from .line_joiner import LineJoiner
from .heading_classifier import HeadingClassifier, FontStatistics
from .list_detector import ListItemDetector
from .paragraph_gatherer import ParagraphGatherer
from .registry import TRANSFORMER_REGISTRY, DEFAULT_TRANSFORMERS, build_transformer, build_transformers

__all__ = [
    "BaseTransformer",
    "TwoPassTransformer",
    "FunctionTransformer",
    "TransformPipeline",
    "LineJoiner",
    "HeadingClassifier",
    "FontStatistics",
    "ListItemDetector",
    "ParagraphGatherer",
    "TRANSFORMER_REGISTRY",
    "DEFAULT_TRANSFORMERS",
    "build_transformer",
    "build_transformers",
]
