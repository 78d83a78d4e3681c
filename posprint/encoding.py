"""
Text encoding for printer code pages.

The renderer hands every text run to a ``TextEncoder`` together with the
active code page. ``CodePageEncoder`` maps code pages onto Python codecs;
code pages Python has no codec for (Katakana, Thai, Farsi, ...) accept
ASCII only.
"""

from __future__ import annotations

import logging
from typing import Literal, Protocol, runtime_checkable

from posprint.commands.codepage import CodePage
from posprint.errors import EncodingError

__all__ = ["TextEncoder", "CodePageEncoder", "DEFAULT_ENCODER"]

logger = logging.getLogger(__name__)

ErrorPolicy = Literal["strict", "replace"]


@runtime_checkable
class TextEncoder(Protocol):
    """Turns unicode text into bytes for one printer code page."""

    def encode(self, text: str, code_page: CodePage) -> bytes:
        """
        Raises:
            EncodingError: If a character cannot be represented.
        """
        ...


class CodePageEncoder:
    """
    Python-codec backed ``TextEncoder``.

    Args:
        errors: ``"strict"`` raises ``EncodingError`` on the first
            unencodable character; ``"replace"`` substitutes ``?``.

    Example:
        >>> CodePageEncoder().encode("Привет", CodePage.CP866)
        b'\\x8f\\xe0\\xa8\\xa2\\xa5\\xe2'
    """

    __slots__ = ("errors",)

    def __init__(self, errors: ErrorPolicy = "strict") -> None:
        if errors not in ("strict", "replace"):
            raise ValueError(f"errors must be 'strict' or 'replace', got {errors!r}")
        self.errors: ErrorPolicy = errors

    def __repr__(self) -> str:
        return f"CodePageEncoder(errors={self.errors!r})"

    def encode(self, text: str, code_page: CodePage) -> bytes:
        codec = code_page.codec or "ascii"
        try:
            return text.encode(codec, errors="strict")
        except UnicodeEncodeError as exc:
            if self.errors == "replace":
                logger.debug(
                    "Replacing unencodable characters in %r for %s", text, code_page.name
                )
                return text.encode(codec, errors="replace")
            hint = None
            if code_page.codec is None:
                hint = f"{code_page.name} has no Python codec; only ASCII text is supported"
            raise EncodingError(text, exc.start, code_page.name, hint=hint, cause=exc) from exc


DEFAULT_ENCODER: CodePageEncoder = CodePageEncoder()
"""Strict encoder used when no encoder is supplied."""
