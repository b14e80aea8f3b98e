"""
Registry of built-in transformers, addressable by identifier.
"""

from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Union

from .base import BaseTransformer
from .heading_classifier import HeadingClassifier
from .line_joiner import LineJoiner
from .list_detector import ListItemDetector
from .paragraph_gatherer import ParagraphGatherer
from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..options import ConversionOptions

TransformerEntry = Union[str, BaseTransformer]

TRANSFORMER_REGISTRY: Dict[str, Callable[["ConversionOptions"], BaseTransformer]] = {
    "line-joiner": lambda options: LineJoiner(tolerance=options.line_join_tolerance),
    "heading-classifier": lambda options: HeadingClassifier(
        percentile=options.heading_percentile, ratio=options.heading_ratio
    ),
    "list-item-detector": lambda options: ListItemDetector(),
    "paragraph-gatherer": lambda options: ParagraphGatherer(),
}

DEFAULT_TRANSFORMERS: List[str] = [
    "line-joiner",
    "heading-classifier",
    "list-item-detector",
    "paragraph-gatherer",
]


def build_transformer(entry: TransformerEntry, options: "ConversionOptions") -> BaseTransformer:
    """
    Resolve an identifier or instance into a transformer.

    Args:
        entry: Registered identifier, or a transformer instance used as-is
        options: Options used to configure built-in transformers

    Returns:
        Transformer instance

    Raises:
        ConfigurationError: If the identifier is unknown or the entry is not a transformer
    """
    if isinstance(entry, BaseTransformer):
        return entry
    if isinstance(entry, str):
        try:
            factory = TRANSFORMER_REGISTRY[entry]
        except KeyError as e:
            raise ConfigurationError(
                f"Unknown transformer: {entry!r} (available: {', '.join(TRANSFORMER_REGISTRY)})"
            ) from e
        try:
            return factory(options)
        except ValueError as e:
            raise ConfigurationError(f"Invalid options for {entry!r}: {e}") from e
    raise ConfigurationError(f"Not a transformer: {entry!r}")


def build_transformers(entries: Iterable[TransformerEntry], options: "ConversionOptions") -> List[BaseTransformer]:
    """Resolve a list of identifiers or instances, keeping their order."""
    return [build_transformer(entry, options) for entry in entries]
