"""
Output generation components.
"""

from .base import BaseGenerator
from .markdown_generator import MarkdownGenerator
from .strategy import ConversionStrategy, MARKDOWN_STRATEGY, MARKDOWN_RENDERERS, Renderer

__all__ = [
    "BaseGenerator",
    "MarkdownGenerator",
    "ConversionStrategy",
    "MARKDOWN_STRATEGY",
    "MARKDOWN_RENDERERS",
    "Renderer",
]
