"""
Base class for output generators.
"""

from abc import ABC, abstractmethod

from ..models import Document


class BaseGenerator(ABC):
    """Abstract base class for output generation."""

    @abstractmethod
    def generate(self, document: Document) -> str:
        """Generate output text from a transformed document."""
        pass
