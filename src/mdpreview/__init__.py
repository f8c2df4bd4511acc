"""
mdpreview: Markdown to HTML for live preview panes.

A small, dependency-free renderer for a restricted Markdown dialect:
headings, thematic breaks, block quotes, ordered/unordered/task lists,
fenced and indented code, pipe tables and paragraphs, with code spans,
images, links, autolinks, strikethrough, strong, emphasis and line breaks
inside them. Rendering is a pure function of the input text.

Quick Start:
    >>> from mdpreview import render_markdown
    >>> render_markdown("- [ ] buy milk")
    '<ul><li><input type="checkbox" disabled> buy milk</li></ul>'

    >>> # Or keep the block tree around
    >>> from mdpreview import parse, render
    >>> doc = parse("> # H\\n> text")
    >>> render(doc)
    '<blockquote><h1>H</h1><p>text</p></blockquote>'

    >>> # Or use the high-level Markdown class with its own config
    >>> from mdpreview import Markdown, RenderConfig
    >>> md = Markdown(RenderConfig(tables_enabled=False))
    >>> html = md("a | b")
"""

from collections.abc import Iterable

from mdpreview.cache import DictRenderCache, RenderCache, hash_config, hash_content
from mdpreview.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from mdpreview.errors import MdPreviewError, RenderError
from mdpreview.inline import INLINE_RULES, InlineRule, render_inline
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
from mdpreview.profiling import get_render_accumulator, profiled_render
from mdpreview.renderers.html import HtmlRenderer
from mdpreview.scanner import BlockScanner, scan
from mdpreview.tasks import checkbox_lines, task_states
from mdpreview.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)

_RENDERER = HtmlRenderer()


def _split_lines(source: str) -> list[str]:
    """Split source into lines, treating CRLF and CR as LF."""
    return source.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _parse_with_config(source: str, config: RenderConfig, cache: RenderCache | None) -> Document:
    """Scan ``source`` under ``config``, consulting ``cache`` when given.

    The caller is responsible for making ``config`` the active config.
    """
    acc = get_render_accumulator()

    if cache is not None:
        content_hash = hash_content(source)
        config_hash = hash_config(config)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            logger.debug("Parse cache hit for %s", content_hash[:12])
            if acc is not None:
                acc.record_parse(len(source), len(cached.children), cached=True)
            return cached

    doc = Document(children=tuple(scan(_split_lines(source))))

    if cache is not None:
        cache.put(content_hash, config_hash, doc)

    if acc is not None:
        acc.record_parse(len(source), len(doc.children))

    return doc


def _render_document(doc: Document) -> str:
    html = _RENDERER.render(doc)
    acc = get_render_accumulator()
    if acc is not None:
        acc.record_render(len(html))
    return html


def parse(source: str, *, cache: RenderCache | None = None) -> Document:
    """Parse Markdown source into a block tree under the active config.

    Args:
        source: Markdown source text
        cache: Optional content-addressed parse cache

    Returns:
        Document root node

    Example:
        >>> parse("# Hello").children
        (Heading(level=1, text='Hello'),)
    """
    return _parse_with_config(source, get_render_config(), cache)


def render(doc: Document) -> str:
    """Render a Document to HTML under the active config.

    Example:
        >>> render(parse("**hi**"))
        '<p><strong>hi</strong></p>'
    """
    return _render_document(doc)


def render_markdown(source: str) -> str:
    """Render Markdown source to HTML.

    Total and pure: every input, including the empty string, renders
    without raising, and the result depends only on ``source`` and the
    active config.

    Example:
        >>> render_markdown("")
        ''
        >>> render_markdown("```js\\ncode\\n```")
        '<pre><code class="language-js">code</code></pre>'
    """
    return _render_document(parse(source))


class Markdown:
    """High-level processor holding its own RenderConfig.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello **World**")
        '<h1>Hello <strong>World</strong></h1>'

        >>> md = Markdown(RenderConfig(task_lists_enabled=False), cache=DictRenderCache())
        >>> md("- [ ] literal")
        '<ul><li>[ ] literal</li></ul>'

    Thread Safety:
        The config is installed in the calling thread's context for the
        duration of each call. A shared cache must be thread-safe.

    """

    __slots__ = ("_cache", "_config")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        cache: RenderCache | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            config: Render configuration (defaults to the full dialect)
            cache: Optional parse cache used by every call
        """
        self._config = config or RenderConfig()
        self._cache = cache

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call."""
        with render_config_context(self._config):
            doc = _parse_with_config(source, self._config, self._cache)
            return _render_document(doc)

    def parse(self, source: str) -> Document:
        """Parse Markdown source into a block tree."""
        with render_config_context(self._config):
            return _parse_with_config(source, self._config, self._cache)

    def parse_many(self, sources: Iterable[str]) -> list[Document]:
        """Parse several sources, installing the config once.

        Duplicate sources hit the cache when one is configured.
        """
        with render_config_context(self._config):
            return [_parse_with_config(source, self._config, self._cache) for source in sources]

    def render(self, doc: Document) -> str:
        """Render a block tree to HTML."""
        with render_config_context(self._config):
            return _render_document(doc)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "render_markdown",
    "scan",
    "render_inline",
    # Block nodes
    "Block",
    "BlockQuote",
    "CodeBlock",
    "Document",
    "Heading",
    "List",
    "ListItem",
    "Paragraph",
    "Table",
    "ThematicBreak",
    # Components
    "BlockScanner",
    "HtmlRenderer",
    "INLINE_RULES",
    "InlineRule",
    # Parse cache
    "DictRenderCache",
    "RenderCache",
    "hash_config",
    "hash_content",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Profiling
    "profiled_render",
    "get_render_accumulator",
    # Task checkboxes
    "checkbox_lines",
    "task_states",
    # Errors
    "MdPreviewError",
    "RenderError",
    # High-level
    "Markdown",
]
