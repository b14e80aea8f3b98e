"""
Logging setup shared by the whole package.

Modules obtain their logger with:
    from .logging import get_logger
    logger = get_logger(__name__)

Handlers are only installed by configure_logging(), which the CLI calls.
Library code never configures logging on its own.
"""

import logging

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT, stream=None):
    """
    Install a single stream handler on the package logger.

    Safe to call more than once; the handler is only added the first time.
    stream defaults to sys.stderr at the time of the first call.
    """
    root = logging.getLogger("pdf_markdown")
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module name."""
    return logging.getLogger(name)
