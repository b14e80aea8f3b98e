"""Unit tests for conversion options."""

import pytest
import pytest_check as check

from pdf_markdown.exceptions import ConfigurationError
from pdf_markdown.options import ConversionOptions


class TestConversionOptions:
    """Tests for defaults, validation and environment loading."""

    def test_defaults(self) -> None:
        """Defaults run the default pipeline with newline separators."""
        options = ConversionOptions()

        check.is_none(options.transformers)
        check.equal(options.line_join_tolerance, 2.0)
        check.equal(options.separator, "\n")
        check.is_none(options.page_separator)

    def test_rejects_negative_tolerance(self) -> None:
        """Tolerance must not be negative."""
        with pytest.raises(ConfigurationError):
            ConversionOptions(line_join_tolerance=-0.5)

    def test_rejects_bad_converter(self) -> None:
        """converter must be a mapping or a ConversionStrategy."""
        with pytest.raises(ConfigurationError, match="converter"):
            ConversionOptions(converter=["heading"])

    def test_rejects_bad_percentile(self) -> None:
        """Percentile must lie within [0, 100]."""
        with pytest.raises(ConfigurationError):
            ConversionOptions(heading_percentile=101)

    def test_from_env(self) -> None:
        """Prefixed variables are parsed into options."""
        env = {
            "PDF_MARKDOWN_LINE_JOIN_TOLERANCE": "1.5",
            "PDF_MARKDOWN_HEADING_RATIO": "1.3",
            "PDF_MARKDOWN_TRANSFORMERS": "line-joiner, heading-classifier",
            "PDF_MARKDOWN_PAGE_SEPARATOR": "\\n---\\n",
        }
        options = ConversionOptions.from_env(env=env)

        check.equal(options.line_join_tolerance, 1.5)
        check.equal(options.heading_ratio, 1.3)
        check.equal(options.transformers, ["line-joiner", "heading-classifier"])
        check.equal(options.page_separator, "\n---\n")

    def test_overrides_beat_environment(self) -> None:
        """Explicit values take precedence; None values are ignored."""
        env = {"PDF_MARKDOWN_LINE_JOIN_TOLERANCE": "1.5"}
        options = ConversionOptions.from_env(env=env, line_join_tolerance=3.0, page_separator=None)

        check.equal(options.line_join_tolerance, 3.0)
        check.is_none(options.page_separator)

    def test_unparseable_variable(self) -> None:
        """Invalid numbers are configuration errors naming the variable."""
        with pytest.raises(ConfigurationError, match="PDF_MARKDOWN_HEADING_RATIO"):
            ConversionOptions.from_env(env={"PDF_MARKDOWN_HEADING_RATIO": "tall"})

    @pytest.mark.usefixtures("clean_env")
    def test_dotenv_in_working_directory(self, tmp_path) -> None:
        """A .env file in the working directory feeds the environment."""
        (tmp_path / ".env").write_text("PDF_MARKDOWN_HEADING_RATIO=1.4\n", encoding="utf-8")

        options = ConversionOptions.from_env()

        check.equal(options.heading_ratio, 1.4)

    @pytest.mark.usefixtures("clean_env")
    def test_defaults_without_environment(self) -> None:
        """With no variables and no .env file, defaults apply."""
        options = ConversionOptions.from_env()

        check.equal(options.heading_ratio, 1.15)
        check.is_none(options.transformers)
