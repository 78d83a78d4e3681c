"""
Styled text tree and its renderer.

A ``StyledNode`` is either ``Text`` (literal content) or ``Styled`` (one
``StyleSet`` applied to an ordered tuple of children). Trees are built by
composition and rendered into ESC/POS bytes in a single depth-first pass:

1. Entering a ``Styled`` node pushes its StyleSet and emits the transition
   from the effective style before the push to the one after it.
2. ``Text`` is encoded for the active code page and appended verbatim.
3. Leaving a ``Styled`` node pops its StyleSet and emits the transition
   back, before the next sibling is visited.

Because every scope undoes itself on exit, a rendered tree leaves the
printer in the style it found it in, and siblings never see each other's
formatting.

Example:
    >>> bold("Total").append("$25").render()
    b'\\x1bE\\x01Total\\x1bE\\x00$25'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from posprint.commands.base import Command, LF
from posprint.commands.character import CharacterSize, Justification
from posprint.commands.codepage import CodePage
from posprint.encoding import DEFAULT_ENCODER, TextEncoder
from posprint.style.style_set import StyleSet, fold
from posprint.style.transitions import transition_commands

__all__ = [
    "StyledNode",
    "Text",
    "Styled",
    "NodeLike",
    "as_node",
    "bold",
    "underlined",
    "double_underlined",
    "double_strike",
    "reversed",
    "upside_down",
    "rotated",
    "sized",
    "aligned",
]

logger = logging.getLogger(__name__)

NodeLike = Union["StyledNode", str]


class StyledNode:
    """Base of the styled text tree; holds construction and rendering API."""

    __slots__ = ()

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @staticmethod
    def text(content: str) -> Text:
        return Text(content)

    @staticmethod
    def styled(style: StyleSet, content: NodeLike) -> Styled:
        return Styled(style, (as_node(content),))

    def with_style(self, style: StyleSet) -> Styled:
        """Wrap this node in a new scope."""
        return Styled(style, (self,))

    def append(self, other: NodeLike) -> Styled:
        """
        Sequence ``self`` and ``other`` under a neutral (empty) scope.

        The wrapper sets nothing, so each side keeps only its own style.
        """
        return Styled(StyleSet(), (self, as_node(other)))

    def bold(self) -> Styled:
        return self.with_style(StyleSet().with_emphasis(True))

    def underlined(self) -> Styled:
        return self.with_style(StyleSet().with_underline(True))

    def double_underlined(self) -> Styled:
        return self.with_style(StyleSet().with_double_underline(True))

    def double_strike(self) -> Styled:
        return self.with_style(StyleSet().with_double_strike(True))

    def reversed(self) -> Styled:
        return self.with_style(StyleSet().with_reverse(True))

    def upside_down(self) -> Styled:
        return self.with_style(StyleSet().with_upside_down(True))

    def rotated(self) -> Styled:
        return self.with_style(StyleSet().with_rotation(True))

    def sized(self, size: CharacterSize) -> Styled:
        return self.with_style(StyleSet().with_size(size))

    def aligned(self, justification: Justification) -> Styled:
        return self.with_style(StyleSet().with_justification(justification))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(
        self,
        code_page: CodePage = CodePage.CP437,
        encoder: Optional[TextEncoder] = None,
    ) -> bytes:
        """
        Render the tree to bytes.

        Raises:
            EncodingError: A text run contains a character the code page
                cannot represent. Nothing is returned in that case.
        """
        out = bytearray()
        _render_node(self, [], out, code_page, encoder or DEFAULT_ENCODER)
        logger.debug("Rendered styled text: %d bytes (%s)", len(out), code_page.name)
        return bytes(out)

    def render_line(
        self,
        code_page: CodePage = CodePage.CP437,
        encoder: Optional[TextEncoder] = None,
    ) -> bytes:
        """Like ``render`` followed by one line feed."""
        return self.render(code_page, encoder) + bytes([LF])


@dataclass(frozen=True, slots=True)
class Text(StyledNode):
    """Literal text leaf; carries no formatting of its own."""

    content: str


@dataclass(frozen=True, slots=True)
class Styled(StyledNode):
    """A formatting scope over an ordered tuple of children."""

    style: StyleSet
    children: tuple[StyledNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(as_node(c) for c in self.children))


def as_node(value: NodeLike) -> StyledNode:
    """Accept either a node or a plain string."""
    if isinstance(value, StyledNode):
        return value
    if isinstance(value, str):
        return Text(value)
    raise TypeError(f"expected str or StyledNode, got {type(value).__name__}")


def _emit(out: bytearray, commands: list[Command]) -> None:
    for command in commands:
        out += command.encode()


def _render_node(
    node: StyledNode,
    stack: list[StyleSet],
    out: bytearray,
    code_page: CodePage,
    encoder: TextEncoder,
) -> None:
    if isinstance(node, Text):
        if node.content:
            out += encoder.encode(node.content, code_page)
        return

    if not isinstance(node, Styled):
        raise TypeError(f"cannot render {type(node).__name__}; expected Text or Styled")

    # enter
    before = fold(stack)
    stack.append(node.style)
    _emit(out, transition_commands(before, fold(stack)))

    for child in node.children:
        _render_node(child, stack, out, code_page, encoder)

    # leave
    before = fold(stack)
    stack.pop()
    _emit(out, transition_commands(before, fold(stack)))


# =============================================================================
# FUNCTIONAL HELPERS (accept str or StyledNode)
# =============================================================================


def bold(value: NodeLike) -> Styled:
    return as_node(value).bold()


def underlined(value: NodeLike) -> Styled:
    return as_node(value).underlined()


def double_underlined(value: NodeLike) -> Styled:
    return as_node(value).double_underlined()


def double_strike(value: NodeLike) -> Styled:
    return as_node(value).double_strike()


def reversed(value: NodeLike) -> Styled:  # noqa: A001
    return as_node(value).reversed()


def upside_down(value: NodeLike) -> Styled:
    return as_node(value).upside_down()


def rotated(value: NodeLike) -> Styled:
    return as_node(value).rotated()


def sized(value: NodeLike, size: CharacterSize) -> Styled:
    return as_node(value).sized(size)


def aligned(value: NodeLike, justification: Justification) -> Styled:
    return as_node(value).aligned(justification)
