"""
Content extraction components.
"""

from .base import BaseExtractor, StaticExtractor, RawItem
from .text_extractor import TextExtractor

__all__ = ["BaseExtractor", "StaticExtractor", "TextExtractor", "RawItem"]
