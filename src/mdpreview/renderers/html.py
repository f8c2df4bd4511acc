"""HTML renderer using the StringBuilder pattern.

Walks the block tree and concatenates HTML. Structural tags are emitted
directly; text-bearing fields go through the inline transformer. Adjacent
blocks are joined with no separator, which keeps the output compact for
live preview panes.

Thread Safety:
The renderer holds no per-render state. One instance can be shared between
threads; inline rendering reads its configuration from the ContextVar of
the calling thread.
"""

from collections.abc import Callable, Iterable

from mdpreview.errors import RenderError
from mdpreview.inline import render_inline
from mdpreview.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    List,
    ListItem,
    Paragraph,
    Table,
    ThematicBreak,
)
from mdpreview.stringbuilder import StringBuilder
from mdpreview.utils.logger import get_logger
from mdpreview.utils.text import escape_html

logger = get_logger(__name__)


class HtmlRenderer:
    """Render block nodes to HTML.

    Usage:
        >>> from mdpreview import parse
        >>> HtmlRenderer().render(parse("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>'

    """

    __slots__ = ("_inline",)

    def __init__(self, *, inline: Callable[[str], str] | None = None) -> None:
        """Initialize renderer.

        Args:
            inline: Inline transformer for text-bearing fields
                (defaults to ``render_inline``)
        """
        self._inline = inline or render_inline

    def render(self, node: Document) -> str:
        """Render a document to an HTML string."""
        return self.emit(node.children)

    def emit(self, blocks: Iterable[Block]) -> str:
        """Render a sequence of blocks to an HTML string."""
        sb = StringBuilder()
        for block in blocks:
            self._render_block(block, sb)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        """Render a block node."""
        match block:
            case Heading():
                sb.append(f"<h{block.level}>")
                sb.append(self._inline(block.text))
                sb.append(f"</h{block.level}>")
            case Paragraph():
                sb.append("<p>").append(self._inline(block.text)).append("</p>")
            case ThematicBreak():
                sb.append("<hr>")
            case BlockQuote():
                sb.append("<blockquote>")
                for child in block.children:
                    self._render_block(child, sb)
                sb.append("</blockquote>")
            case List():
                self._render_list(block, sb)
            case ListItem():
                # Should be rendered by list, but handle standalone
                self._render_list_item(block, sb)
            case CodeBlock():
                self._render_code(block, sb)
            case Table():
                self._render_table(block, sb)
            case Document():
                for child in block.children:
                    self._render_block(child, sb)
            case _:
                logger.debug("Refusing to render %r", block)
                raise RenderError(block)

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        tag = "ol" if lst.ordered else "ul"
        sb.append(f"<{tag}>")
        for item in lst.items:
            self._render_list_item(item, sb)
        sb.append(f"</{tag}>")

    def _render_list_item(self, item: ListItem, sb: StringBuilder) -> None:
        """Render list item.

        A body that is exactly one paragraph is rendered as bare inline
        content, so a checkbox and its label sit on one line. Any other body
        is rendered block by block inside the <li>.
        """
        sb.append("<li>")
        if item.checked is not None:
            checked = "checked " if item.checked else ""
            sb.append(f'<input type="checkbox" {checked}disabled> ')

        if len(item.children) == 1 and isinstance(item.children[0], Paragraph):
            sb.append(self._inline(item.children[0].text))
        else:
            for child in item.children:
                self._render_block(child, sb)

        sb.append("</li>")

    def _render_code(self, code: CodeBlock, sb: StringBuilder) -> None:
        if code.language:
            sb.append(f'<pre><code class="language-{escape_html(code.language, quote=True)}">')
        else:
            sb.append("<pre><code>")
        sb.append(escape_html(code.content))
        sb.append("</code></pre>")

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        """Render table; rows keep their own width."""
        sb.append("<table><thead><tr>")
        for cell in table.header:
            sb.append("<th>").append(self._inline(cell)).append("</th>")
        sb.append("</tr></thead><tbody>")

        for row in table.rows:
            sb.append("<tr>")
            for cell in row:
                sb.append("<td>").append(self._inline(cell)).append("</td>")
            sb.append("</tr>")

        sb.append("</tbody></table>")
