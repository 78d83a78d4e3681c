"""
Page mode layout builder.

``PageBuilder`` queues commands and styled text for one page and
serializes them as::

    ESC L  [ESC W area]  [ESC T direction]  units...  FF  [ESC S]

Units keep their insertion order exactly. Styled text is rendered when it
is added, so encoding errors surface at ``text()`` / ``text_line()`` and
``build()`` itself cannot fail.

Example:
    >>> page = (
    ...     PageBuilder()
    ...     .area(PrintArea.default_80mm())
    ...     .direction(PrintDirection.LEFT_TO_RIGHT)
    ...     .vertical_position(100)
    ...     .text_line(bold("Header"))
    ... )
    >>> data = page.build()
"""

from __future__ import annotations

import logging
from typing import Optional

from posprint.commands.base import Command, raw_bytes
from posprint.commands.basic import FormFeed
from posprint.commands.codepage import CodePage
from posprint.commands.page_mode import (
    EnterPageMode,
    ExitPageMode,
    PrintArea,
    PrintDirection,
    SetHorizontalPosition,
    SetPrintArea,
    SetPrintDirection,
    SetVerticalPosition,
)
from posprint.encoding import TextEncoder
from posprint.style.text import NodeLike, as_node

__all__ = ["PageBuilder"]

logger = logging.getLogger(__name__)


class PageBuilder:
    """
    Ordered command queue for a page-mode page.

    Not safe to share between threads. Every mutator returns ``self`` for
    chaining.

    Args:
        code_page: Code page used to encode text units.
        encoder: Text encoder; defaults to the strict code page encoder.
    """

    def __init__(
        self,
        code_page: CodePage = CodePage.CP437,
        encoder: Optional[TextEncoder] = None,
    ) -> None:
        self.code_page = code_page
        self.encoder = encoder
        self._area: Optional[PrintArea] = None
        self._direction: Optional[PrintDirection] = None
        self._units: list[bytes] = []

    def __repr__(self) -> str:
        return (
            f"PageBuilder(area={self._area!r}, direction={self._direction!r}, "
            f"units={len(self._units)})"
        )

    def __len__(self) -> int:
        return len(self._units)

    @property
    def print_area(self) -> Optional[PrintArea]:
        return self._area

    @property
    def print_direction(self) -> Optional[PrintDirection]:
        return self._direction

    # -------------------------------------------------------------------------
    # Queue
    # -------------------------------------------------------------------------

    def command(self, command: Command) -> PageBuilder:
        """Append one command's bytes."""
        self._units.append(command.encode())
        return self

    def raw(self, data: bytes) -> PageBuilder:
        """
        Append bytes verbatim.

        Raises:
            TypeError: ``data`` is not bytes-like.
        """
        self._units.append(raw_bytes(data))
        return self

    def text(self, node: NodeLike) -> PageBuilder:
        """
        Append styled text rendered inline.

        Raises:
            EncodingError: Text not representable in ``code_page``. The
                queue is left unchanged.
        """
        self._units.append(as_node(node).render(self.code_page, self.encoder))
        return self

    def text_line(self, node: NodeLike) -> PageBuilder:
        """Append styled text followed by a line feed."""
        self._units.append(as_node(node).render_line(self.code_page, self.encoder))
        return self

    def horizontal_position(self, position: int) -> PageBuilder:
        """Queue ``ESC $`` (absolute horizontal position)."""
        return self.command(SetHorizontalPosition(position))

    def vertical_position(self, position: int) -> PageBuilder:
        """Queue ``GS $`` (absolute vertical position)."""
        return self.command(SetVerticalPosition(position))

    # -------------------------------------------------------------------------
    # Page settings (last write wins)
    # -------------------------------------------------------------------------

    def area(self, area: PrintArea) -> PageBuilder:
        self._area = area
        return self

    def direction(self, direction: PrintDirection) -> PageBuilder:
        self._direction = direction
        return self

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def build(self) -> bytes:
        """Serialize the page, ending with FF (print page)."""
        out = bytearray(EnterPageMode().encode())
        if self._area is not None:
            out += SetPrintArea(self._area).encode()
        if self._direction is not None:
            out += SetPrintDirection(self._direction).encode()
        for unit in self._units:
            out += unit
        out += FormFeed().encode()
        logger.debug("Built page: %d units, %d bytes", len(self._units), len(out))
        return bytes(out)

    def build_and_exit(self) -> bytes:
        """Like ``build`` followed by ``ESC S`` (back to standard mode)."""
        return self.build() + ExitPageMode().encode()
