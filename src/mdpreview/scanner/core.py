"""Block scanner producing typed block nodes.

A single forward cursor walks the line list. At each position the line is
classified by the predicates in ``classifiers`` in priority order, and the
matching rule consumes as many lines as its grammar needs. Every iteration
consumes at least one line.

Block quotes and list items are scanned recursively: the quoted or indented
lines are copied into a new window and handed to a fresh BlockScanner, so no
cursor is shared between nesting levels.
"""

from __future__ import annotations

from collections.abc import Sequence

from mdpreview.config import get_render_config
from mdpreview.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    Heading,
    Paragraph,
    ThematicBreak,
)
from mdpreview.scanner.classifiers import (
    is_blank,
    is_blockquote,
    is_fence,
    is_indented_code,
    is_table_start,
    is_thematic_break,
    match_heading,
    match_list_marker,
    starts_block,
    strip_code_indent,
    strip_quote_marker,
)
from mdpreview.scanner.lists import ListScanningMixin
from mdpreview.scanner.table import TableScanningMixin
from mdpreview.utils.logger import get_logger

logger = get_logger(__name__)


class BlockScanner(ListScanningMixin, TableScanningMixin):
    """Forward line scanner for block structure.

    Usage:
        >>> BlockScanner(["# Title", "", "Body"]).scan()
        [Heading(level=1, text='Title'), Paragraph(text='Body')]

    Thread Safety:
        Instances are single-use. Configuration is read from the ContextVar
        once at construction, and nested scanners created during the scan
        run in the same context.

    """

    __slots__ = ("_lines", "_pos", "_config")

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = list(lines)
        self._pos = 0
        self._config = get_render_config()

    def scan(self) -> list[Block]:
        """Scan all lines into blocks."""
        blocks: list[Block] = []
        while self._pos < len(self._lines):
            block = self._scan_block()
            if block is not None:
                blocks.append(block)
        return blocks

    def _scan_nested(self, lines: list[str]) -> list[Block]:
        return BlockScanner(lines).scan()

    def _scan_block(self) -> Block | None:
        """Classify the line at the cursor and consume one block.

        Returns None when the consumed lines produce no block (blank lines).
        """
        line = self._lines[self._pos]

        heading = match_heading(line)
        if heading is not None:
            self._pos += 1
            level, text = heading
            return Heading(level=level, text=text)

        if is_thematic_break(line):
            self._pos += 1
            return ThematicBreak()

        if is_blockquote(line):
            return self._scan_blockquote()

        marker = match_list_marker(line)
        if marker is not None:
            return self._scan_list(ordered=marker[0])

        if is_fence(line):
            return self._scan_fenced_code()

        if is_indented_code(line) and not is_blank(line):
            return self._scan_indented_code()

        if self._config.tables_enabled and is_table_start(self._lines, self._pos):
            return self._scan_table()

        if is_blank(line):
            self._pos += 1
            return None

        return self._scan_paragraph()

    def _scan_blockquote(self) -> BlockQuote:
        quoted: list[str] = []
        while self._pos < len(self._lines) and is_blockquote(self._lines[self._pos]):
            quoted.append(strip_quote_marker(self._lines[self._pos]))
            self._pos += 1

        content = "\n".join(quoted).strip()
        return BlockQuote(children=tuple(self._scan_nested(content.split("\n"))))

    def _scan_fenced_code(self) -> CodeBlock:
        """Scan a fenced block; an unclosed fence runs to the end of input."""
        start = self._pos
        language = self._lines[self._pos][len("```") :].strip() or None
        self._pos += 1

        code: list[str] = []
        while self._pos < len(self._lines) and not is_fence(self._lines[self._pos]):
            code.append(self._lines[self._pos])
            self._pos += 1

        if self._pos < len(self._lines):
            # Closing fence
            self._pos += 1
        else:
            logger.debug("Unterminated code fence opened at line %d", start + 1)

        return CodeBlock(content="\n".join(code), language=language)

    def _scan_indented_code(self) -> CodeBlock:
        """Scan indented lines, leaving trailing whitespace-only lines unconsumed."""
        end = self._pos
        last_content = self._pos
        while end < len(self._lines) and is_indented_code(self._lines[end]):
            if not is_blank(self._lines[end]):
                last_content = end
            end += 1

        code = [strip_code_indent(line) for line in self._lines[self._pos : last_content + 1]]
        self._pos = last_content + 1
        return CodeBlock(content="\n".join(code))

    def _scan_paragraph(self) -> Paragraph | None:
        tables = self._config.tables_enabled
        para = [self._lines[self._pos]]
        self._pos += 1
        while (
            self._pos < len(self._lines)
            and not is_blank(self._lines[self._pos])
            and not starts_block(self._lines, self._pos, tables=tables)
        ):
            para.append(self._lines[self._pos])
            self._pos += 1

        text = "\n".join(para).strip()
        return Paragraph(text=text) if text else None


def scan(lines: Sequence[str]) -> list[Block]:
    """Scan lines into a list of block nodes.

    Args:
        lines: Source lines without trailing newlines

    Returns:
        Blocks in source order

    Example:
        >>> scan(["> quoted"])
        [BlockQuote(children=(Paragraph(text='quoted'),))]
    """
    return BlockScanner(lines).scan()
