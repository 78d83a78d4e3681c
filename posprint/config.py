"""
Printer configuration.

Configuration is read from a JSON file (``posprint.json`` in the working
directory by default) and merged over built-in defaults. Environment
variables override the file:

    POSPRINT_DEVICE      device path, e.g. /dev/usb/lp0
    POSPRINT_CODE_PAGE   code page name (CP866, WIN1251, ...) or number
    POSPRINT_LOG_LEVEL   DEBUG, INFO, WARNING, ERROR, CRITICAL

A missing, unreadable or malformed file is logged and the defaults are
used; ``load_config`` never raises for a bad file. The resolved
``log_level`` is applied to the ``posprint`` logger, and ``line_spacing``
is sent by ``Printer.initialize()``.

Example file::

    {
        "device": "/dev/usb/lp1",
        "code_page": "CP866",
        "paper_width_mm": 58,
        "line_spacing": 40,
        "log_level": "DEBUG"
    }
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Final, Optional, Union

from posprint.commands.codepage import CodePage
from posprint.commands.page_mode import PrintArea
from posprint.encoding import CodePageEncoder

__all__ = ["PrinterConfig", "load_config", "parse_code_page", "DEFAULT_CONFIG_FILE"]

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE: Final[str] = "posprint.json"

_PACKAGE_LOGGER: Final[str] = "posprint"

_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_PAPER_WIDTHS: Final[frozenset[int]] = frozenset({58, 80})

_DEFAULT_CONFIG: Dict[str, Any] = {
    "device": "/dev/usb/lp0",
    "code_page": "CP437",
    "paper_width_mm": 80,
    "line_spacing": None,
    "encoding_errors": "strict",
    "log_level": "INFO",
}


def parse_code_page(value: Union[str, int, CodePage]) -> CodePage:
    """
    Resolve a code page from its name (case-insensitive) or ``ESC t`` number.

    Raises:
        ValueError: Unknown code page.
    """
    if isinstance(value, CodePage):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return CodePage(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return CodePage(int(text))
        try:
            return CodePage[text.upper().replace("-", "_")]
        except KeyError:
            raise ValueError(f"unknown code page {value!r}") from None
    raise ValueError(f"code page must be a name or number, got {type(value).__name__}")


@dataclass(slots=True)
class PrinterConfig:
    """Resolved printer settings."""

    device: str = _DEFAULT_CONFIG["device"]
    code_page: CodePage = CodePage.CP437
    paper_width_mm: int = 80
    line_spacing: Optional[int] = None
    encoding_errors: str = "strict"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PrinterConfig:
        """
        Build from a configuration mapping; unknown keys are ignored.

        Raises:
            ValueError: A value has the wrong type or is out of range.
        """
        merged = {**_DEFAULT_CONFIG, **data}

        device = merged["device"]
        if not isinstance(device, str) or not device:
            raise ValueError(f"device must be a non-empty string, got {device!r}")

        paper_width = merged["paper_width_mm"]
        if paper_width not in _PAPER_WIDTHS:
            raise ValueError(f"paper_width_mm must be 58 or 80, got {paper_width!r}")

        line_spacing = merged["line_spacing"]
        if line_spacing is not None and (
            isinstance(line_spacing, bool)
            or not isinstance(line_spacing, int)
            or not 0 <= line_spacing <= 255
        ):
            raise ValueError(f"line_spacing must be 0-255 or null, got {line_spacing!r}")

        errors = merged["encoding_errors"]
        if errors not in ("strict", "replace"):
            raise ValueError(f"encoding_errors must be 'strict' or 'replace', got {errors!r}")

        log_level = str(merged["log_level"]).upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {log_level!r}")

        return cls(
            device=device,
            code_page=parse_code_page(merged["code_page"]),
            paper_width_mm=paper_width,
            line_spacing=line_spacing,
            encoding_errors=errors,
            log_level=log_level,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["code_page"] = self.code_page.name
        return data

    def print_area(self) -> PrintArea:
        """Full page-mode print area for the configured paper width."""
        if self.paper_width_mm == 58:
            return PrintArea.default_58mm()
        return PrintArea.default_80mm()

    def encoder(self) -> CodePageEncoder:
        return CodePageEncoder(errors=self.encoding_errors)  # type: ignore[arg-type]


def _apply_env(config: PrinterConfig) -> PrinterConfig:
    device = os.environ.get("POSPRINT_DEVICE")
    if device:
        config.device = device

    code_page = os.environ.get("POSPRINT_CODE_PAGE")
    if code_page:
        try:
            config.code_page = parse_code_page(code_page)
        except ValueError as e:
            logger.warning("Ignoring POSPRINT_CODE_PAGE: %s", e)

    level = os.environ.get("POSPRINT_LOG_LEVEL")
    if level:
        if level.upper() in _LOG_LEVELS:
            config.log_level = level.upper()
        else:
            logger.warning("Ignoring POSPRINT_LOG_LEVEL: unknown level %r", level)

    return config


def _apply_log_level(level: str) -> None:
    """Set the package logger and its file handlers to ``level``."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.setLevel(level)


def load_config(config_path: Optional[Path] = None) -> PrinterConfig:
    """
    Load printer configuration from JSON, falling back to defaults.

    Args:
        config_path: Path to the JSON file. If None, looks for
            ``posprint.json`` in the current directory.

    Returns:
        A ``PrinterConfig`` with file values merged over the defaults and
        environment overrides applied. Its ``log_level`` is applied to the
        package logger.
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)
    config_path = Path(config_path)

    config = PrinterConfig.from_dict({})

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"configuration file must contain a JSON object, "
                    f"got {type(user_config).__name__}"
                )

            config = PrinterConfig.from_dict(user_config)
            logger.info("Configuration loaded from %s", config_path)
            logger.debug("Configuration: %s", config)

        except json.JSONDecodeError as e:
            logger.warning(
                "Could not parse %s: invalid JSON at line %d, column %d. Using defaults.",
                config_path,
                e.lineno,
                e.colno,
            )
        except OSError as e:
            logger.warning("Could not read %s: %s. Using defaults.", config_path, e)
        except ValueError as e:
            logger.warning("Invalid configuration in %s: %s. Using defaults.", config_path, e)
    else:
        logger.info("Configuration file %s not found. Using defaults.", config_path)

    config = _apply_env(config)
    _apply_log_level(config.log_level)
    return config
