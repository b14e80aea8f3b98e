"""
Conversion options.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError
from .generators import ConversionStrategy, Renderer
from .transformers.registry import TransformerEntry

ENV_PREFIX = "PDF_MARKDOWN_"


@dataclass
class ConversionOptions:
    """
    Options for one conversion call.

    Attributes:
        transformers: Transformer identifiers or instances, in execution order.
                      None runs the default pipeline.
        line_join_tolerance: Baseline and gap threshold of the line joiner, in points
        converter: Item type -> renderer overrides layered over the default
                   strategy, or a complete ConversionStrategy used as given
                   (one without a fallback fails on unmapped item types)
        heading_percentile: Percentile of font sizes taken as body size
        heading_ratio: Multiple of body size a heading font must exceed
        separator: Joins rendered items
        page_separator: Joins rendered pages; None joins everything with separator
        min_text_length: Shortest span text kept by the PDF extractor
    """
    transformers: Optional[List[TransformerEntry]] = None
    line_join_tolerance: float = 2.0
    converter: Union[Mapping[str, Renderer], ConversionStrategy] = field(default_factory=dict)
    heading_percentile: float = 50.0
    heading_ratio: float = 1.15
    separator: str = "\n"
    page_separator: Optional[str] = None
    min_text_length: int = 1

    def __post_init__(self):
        if not isinstance(self.converter, (Mapping, ConversionStrategy)):
            raise ConfigurationError(
                f"converter must be a mapping or ConversionStrategy, got {type(self.converter).__name__}"
            )
        if self.line_join_tolerance < 0:
            raise ConfigurationError(f"line_join_tolerance must be >= 0, got {self.line_join_tolerance}")
        if not 0 <= self.heading_percentile <= 100:
            raise ConfigurationError(f"heading_percentile must be within [0, 100], got {self.heading_percentile}")
        if self.heading_ratio <= 0:
            raise ConfigurationError(f"heading_ratio must be > 0, got {self.heading_ratio}")

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, env: Mapping[str, str] = None, **overrides: Any) -> "ConversionOptions":
        """
        Build options from environment variables.

        A .env file in the working directory is loaded first. Recognized
        variables (with the default prefix): PDF_MARKDOWN_LINE_JOIN_TOLERANCE,
        PDF_MARKDOWN_HEADING_PERCENTILE, PDF_MARKDOWN_HEADING_RATIO,
        PDF_MARKDOWN_PAGE_SEPARATOR, PDF_MARKDOWN_MIN_TEXT_LENGTH and
        PDF_MARKDOWN_TRANSFORMERS (comma-separated identifiers).

        Args:
            prefix: Variable name prefix
            env: Mapping to read instead of os.environ
            **overrides: Explicit values taking precedence over the environment

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        if env is None:
            load_dotenv(find_dotenv(usecwd=True))
            env = os.environ

        values: Dict[str, Any] = {}
        parsers = {
            "line_join_tolerance": float,
            "heading_percentile": float,
            "heading_ratio": float,
            "min_text_length": int,
            "page_separator": _unescape,
            "transformers": _split_list,
        }
        for name, parse in parsers.items():
            raw = env.get(prefix + name.upper())
            if raw is None or raw == "":
                continue
            try:
                values[name] = parse(raw)
            except ValueError as e:
                raise ConfigurationError(f"Invalid {prefix + name.upper()}={raw!r}: {e}") from e

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _split_list(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _unescape(raw: str) -> str:
    return raw.replace("\\n", "\n").replace("\\t", "\t")
