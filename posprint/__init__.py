"""
posprint
========

ESC/POS command encoding for Bixolon SRP-350plus compatible thermal
receipt printers.

This package provides:
    - Typed, validated ESC/POS commands that encode to exact protocol bytes
    - Nested text styling (bold, underline, size, ...) resolved into the
      minimal set of mode-change commands
    - Page mode layouts
    - Code page aware text encoding
    - Sync and asyncio printer wrappers over any binary stream

Basic usage:
    >>> from posprint import Printer, bold, CutPaper
    >>>
    >>> with Printer.open("/dev/usb/lp0") as printer:
    ...     printer.initialize()
    ...     printer.println(bold("Total").append(" $25.00"))
    ...     printer.send(CutPaper.feed_and_partial(3))

Page mode:
    >>> from posprint import PageBuilder, PrintArea, bold
    >>>
    >>> page = PageBuilder().area(PrintArea.default_80mm()).text_line(bold("Header"))
    >>> data = page.build()

Logging:
    >>> import os
    >>> os.environ["POSPRINT_LOG_LEVEL"] = "DEBUG"
    >>> os.environ["POSPRINT_LOG_FILE"] = "posprint.log"

Python: 3.11+
"""

import logging
import logging.handlers
import os
import sys
from typing import Final

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__description__ = "ESC/POS command encoder for thermal receipt printers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"posprint requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAME: Final[str] = "posprint"

_LOG_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _setup_logging() -> None:
    """
    Configure the package logger once.

    - stderr handler for WARNING and above
    - rotating file handler when POSPRINT_LOG_FILE is set
    - level from POSPRINT_LOG_LEVEL (default INFO)

    Idempotent: does nothing if the package logger already has handlers.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if package_logger.handlers:
        return

    level = _LOG_LEVELS.get(os.environ.get("POSPRINT_LOG_LEVEL", "INFO").upper(), logging.INFO)
    package_logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_file = os.environ.get("POSPRINT_LOG_FILE")
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning("Could not open log file %s: %s. Logging to stderr only.", log_file, e)

    package_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger namespaced under ``posprint``.

    Args:
        module_name: Usually ``__name__``. ``"__main__"`` maps to
            ``posprint.main``.
    """
    if module_name == LOGGER_NAME or module_name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAME}.main")
    return logging.getLogger(f"{LOGGER_NAME}.{module_name.lstrip('.')}")


_setup_logging()

# =============================================================================
# PUBLIC API
# =============================================================================

# Imported after logging is configured.
from posprint.commands import *  # noqa: E402,F401,F403
from posprint.commands import __all__ as _commands_all  # noqa: E402
from posprint.config import PrinterConfig, load_config  # noqa: E402
from posprint.encoding import CodePageEncoder, TextEncoder  # noqa: E402
from posprint.errors import (  # noqa: E402
    BarcodeError,
    EncodingError,
    ImageError,
    InvalidBarcodeCharacterError,
    InvalidBarcodeLengthError,
    ItfOddLengthError,
    NoReaderError,
    NoResponseError,
    OutOfRangeError,
    Pdf417Error,
    PosPrintError,
    PrinterError,
    QrCodeError,
    StatusParseError,
    TransportError,
    ValidationError,
)
from posprint.page import PageBuilder  # noqa: E402
from posprint.printer import AsyncPrinter, Printer  # noqa: E402
from posprint.style import (  # noqa: E402
    STYLE_DEFAULTS,
    Styled,
    StyledNode,
    StyleSet,
    Text,
    aligned,
    bold,
    double_strike,
    double_underlined,
    fold,
    reversed,
    rotated,
    sized,
    transition_commands,
    underlined,
    upside_down,
)

__all__ = [
    "__version__",
    "get_logger",
    "PrinterConfig",
    "load_config",
    "TextEncoder",
    "CodePageEncoder",
    "PageBuilder",
    "Printer",
    "AsyncPrinter",
    # style
    "StyleSet",
    "fold",
    "STYLE_DEFAULTS",
    "transition_commands",
    "StyledNode",
    "Text",
    "Styled",
    "bold",
    "underlined",
    "double_underlined",
    "double_strike",
    "reversed",
    "upside_down",
    "rotated",
    "sized",
    "aligned",
    # errors
    "PosPrintError",
    "ValidationError",
    "OutOfRangeError",
    "BarcodeError",
    "InvalidBarcodeLengthError",
    "ItfOddLengthError",
    "InvalidBarcodeCharacterError",
    "QrCodeError",
    "Pdf417Error",
    "ImageError",
    "EncodingError",
    "StatusParseError",
    "PrinterError",
    "TransportError",
    "NoReaderError",
    "NoResponseError",
    *_commands_all,
]
