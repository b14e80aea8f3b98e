"""
Base classes for the transform pipeline.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional

from ..exceptions import TransformError
from ..logging import get_logger
from ..models import Document, Item

logger = get_logger(__name__)


class BaseTransformer(ABC):
    """
    Abstract base class for transformers.

    A transformer rewrites a Document into a new Document to recover
    structure (joining lines, classifying headings, ...). It must not
    mutate its input or keep state between calls.
    """

    def __init__(self, name: str = None):
        """
        Initialize the transformer.

        Args:
            name: Optional name for identification in pipelines and errors
        """
        self.name = name or self.__class__.__name__
        self._enabled = True

    @property
    def enabled(self) -> bool:
        """Whether this transformer is enabled."""
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool):
        """Enable or disable this transformer."""
        self._enabled = value

    @abstractmethod
    def apply(self, document: Document) -> Document:
        """
        Transform a document.

        Args:
            document: Input document, left untouched

        Returns:
            New Document
        """
        pass

    def fail(self, message: str, item: Optional[Item] = None) -> TransformError:
        """Build a TransformError attributed to this transformer and item."""
        return TransformError(self.name, message, item.order if item is not None else None)

    def require(self, item: Item, *names: str) -> None:
        """Raise a TransformError unless the item carries all the given fields."""
        missing = [n for n in names if n not in item.fields]
        if missing:
            raise self.fail(f"missing field(s) {', '.join(missing)}", item)

    def __call__(self, document: Document) -> Document:
        """Allow transformer to be called directly."""
        if not self.enabled:
            return document
        return self.apply(document)

    def __repr__(self) -> str:
        return f"{self.name}(enabled={self.enabled})"


class TwoPassTransformer(BaseTransformer):
    """
    Transformer that needs whole-document statistics before rewriting.

    scan() reads the document and returns a summary; rewrite() consumes
    the summary and the original document. The summary lives only for
    one apply() call.
    """

    @abstractmethod
    def scan(self, document: Document) -> Any:
        """Read-only pass producing a summary of the document."""
        pass

    @abstractmethod
    def rewrite(self, document: Document, summary: Any) -> Document:
        """Rewrite pass producing the new document."""
        pass

    def apply(self, document: Document) -> Document:
        summary = self.scan(document)
        return self.rewrite(document, summary)


class FunctionTransformer(BaseTransformer):
    """Wraps a plain Document -> Document callable."""

    def __init__(self, fn: Callable[[Document], Document], name: str = None):
        super().__init__(name or getattr(fn, "__name__", None))
        self.fn = fn

    def apply(self, document: Document) -> Document:
        return self.fn(document)


class TransformPipeline:
    """
    A pipeline of transformers that execute in sequence.

    Each stage's full output is the next stage's input. If any stage
    fails the whole run fails; no partially transformed document is
    returned.

    Example:
        pipeline = TransformPipeline([
            LineJoiner(tolerance=2.0),
            HeadingClassifier(),
        ])
        transformed = pipeline.apply(document)
    """

    def __init__(self, transformers: List[BaseTransformer] = None):
        """
        Initialize the pipeline.

        Args:
            transformers: Transformers in execution order
        """
        self.transformers: List[BaseTransformer] = list(transformers or [])

    def add(self, transformer: BaseTransformer) -> "TransformPipeline":
        """
        Append a transformer to the pipeline.

        Args:
            transformer: Transformer to add

        Returns:
            Self for method chaining
        """
        self.transformers.append(transformer)
        return self

    def remove(self, name: str) -> bool:
        """
        Remove a transformer by name.

        Args:
            name: Name of transformer to remove

        Returns:
            True if transformer was found and removed
        """
        for i, transformer in enumerate(self.transformers):
            if transformer.name == name:
                del self.transformers[i]
                return True
        return False

    def get(self, name: str) -> Optional[BaseTransformer]:
        """
        Get a transformer by name.

        Args:
            name: Name of transformer to find

        Returns:
            Transformer if found, None otherwise
        """
        for transformer in self.transformers:
            if transformer.name == name:
                return transformer
        return None

    @property
    def names(self) -> List[str]:
        return [t.name for t in self.transformers]

    def apply(self, document: Document) -> Document:
        """
        Run every enabled transformer in declaration order.

        Args:
            document: Input document

        Returns:
            Output of the last stage

        Raises:
            TransformError: If any stage fails or returns something other
                            than a Document
        """
        result = document
        for transformer in self.transformers:
            if not transformer.enabled:
                logger.debug("Skipping disabled transformer %s", transformer.name)
                continue

            try:
                output = transformer.apply(result)
            except TransformError:
                raise
            except Exception as exc:
                raise TransformError(transformer.name, str(exc) or exc.__class__.__name__) from exc

            if not isinstance(output, Document):
                raise TransformError(
                    transformer.name,
                    f"returned {type(output).__name__} instead of Document",
                )

            logger.debug("%s: %d -> %d items", transformer.name, result.item_count, output.item_count)
            result = output

        return result

    def __call__(self, document: Document) -> Document:
        """Allow pipeline to be called directly."""
        return self.apply(document)

    def __len__(self) -> int:
        return len(self.transformers)

    def __iter__(self) -> Iterator[BaseTransformer]:
        return iter(self.transformers)

    def __repr__(self) -> str:
        return f"TransformPipeline({self.names})"
