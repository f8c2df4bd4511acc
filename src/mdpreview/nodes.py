"""Typed block nodes for mdpreview.

The scanner produces a plain tree of frozen dataclasses. The tree is built
once per parse, handed to the HTML renderer, and discarded; nodes are never
mutated or shared between documents.

Node Hierarchy:
Node (base)
├── Document
├── Heading
├── ThematicBreak
├── BlockQuote
├── List
├── ListItem
├── CodeBlock
├── Table
└── Paragraph

Text-bearing fields (heading text, paragraph text, table cells) hold raw
Markdown. Inline spans are rewritten at render time, not during scanning.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all block nodes."""


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: # Heading
    HTML: <h1>Heading</h1>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    text: str


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: --- or *** or ___
    HTML: <hr>

    """


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text
    HTML: <blockquote>...</blockquote>

    Children come from scanning the quoted lines with one ``>`` removed.

    """

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Markdown: - item, 1. item, - [ ] task
    HTML: <li>item</li>

    ``checked`` is None for a plain item, False for ``[ ]`` and True for
    ``[x]``/``[X]``.

    """

    children: tuple[Block, ...]
    checked: bool | None = None


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item or 1. item
    HTML: <ul>/<ol> with <li> children

    """

    items: tuple[ListItem, ...]
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced or indented code block.

    Markdown: ```lang ... ``` or lines indented by 4 spaces / a tab
    HTML: <pre><code class="language-lang">...</code></pre>

    """

    content: str
    language: str | None = None


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table.

    Markdown:
        a | b
        --|--
        1 | 2
    HTML: <table>...</table>

    Rows are not reconciled against the header width.

    """

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: consecutive lines separated from other blocks by a blank line
    HTML: <p>text</p>

    """

    text: str


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node."""

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
type Block = (
    Heading
    | ThematicBreak
    | BlockQuote
    | List
    | ListItem
    | CodeBlock
    | Table
    | Paragraph
)


__all__ = [
    "Block",
    "BlockQuote",
    "CodeBlock",
    "Document",
    "Heading",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "Table",
    "ThematicBreak",
]
