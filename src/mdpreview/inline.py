"""Inline span rendering.

Inline Markdown is rewritten by an ordered chain of whole-text regex
substitutions. Each rule scans left to right, replaces every non-overlapping
match, and hands its output to the next rule, so later rules see HTML that
earlier rules injected. The order is part of the behavior:

1. code_span       `code`            -> <code>code</code>
2. image           ![alt](url)       -> <img alt="alt" src="url">
3. link            [label](url)      -> <a href="url">label</a>
4. autolink        <https://x>       -> <a href="https://x">https://x</a>
5. strikethrough   ~~text~~          -> <del>text</del>
6. strong          **text** __text__ -> <strong>text</strong>
7. emphasis        *text* _text_     -> <em>text</em>
8. line_break      newline           -> <br>

Code span output is set aside behind a placeholder until the chain has run,
so emphasis, link and line break rules never rewrite text inside backticks.
Strong runs before emphasis so ``**bold**`` is never read as two emphasis
markers. Marker rules exclude newlines and their own marker character, which
keeps ``*a* *b*`` as two spans and stops spans from bleeding across lines.

There is no backslash escaping of Markdown punctuation, and apart from the
opt-in ``escape_code_spans`` setting no inline text is entity-escaped.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from mdpreview.config import RenderConfig, get_render_config
from mdpreview.utils.text import escape_html

type Replacement = str | Callable[[re.Match[str]], str]

_PLACEHOLDER = "\x00{}\x00"
_PLACEHOLDER_PATTERN = re.compile("\x00(\\d+)\x00")

_HTTP_PATTERN = re.compile(r"https?://")
_SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:")


@dataclass(frozen=True, slots=True)
class InlineRule:
    """One substitution pass in the inline chain.

    Attributes:
        name: Rule identifier, shared by the variants of one construct
        pattern: Compiled pattern matched left to right over the whole text
        replacement: Template string or callable, as for ``re.sub``
        protect: Set the output aside so later rules cannot rewrite it

    """

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement
    protect: bool = False

    def apply(self, text: str) -> str:
        """Apply this rule to ``text`` without protection."""
        return self.pattern.sub(self.replacement, text)

    def expand(self, match: re.Match[str]) -> str:
        """Produce the replacement for a single match."""
        if callable(self.replacement):
            return self.replacement(match)
        return match.expand(self.replacement)


def _code_span(match: re.Match[str]) -> str:
    code = match.group(1)
    if get_render_config().escape_code_spans:
        code = escape_html(code)
    return f"<code>{code}</code>"


def _autolink(match: re.Match[str]) -> str:
    """Link ``<url>`` and ``<address@host>``; leave other angle spans alone."""
    token = match.group(1)
    if _HTTP_PATTERN.match(token):
        href = token
    elif "@" in token:
        href = token if _SCHEME_PATTERN.match(token) else f"mailto:{token}"
    else:
        return match.group(0)
    return f'<a href="{href}">{token}</a>'


INLINE_RULES: tuple[InlineRule, ...] = (
    InlineRule("code_span", re.compile(r"`([^`]+)`"), _code_span, protect=True),
    InlineRule("image", re.compile(r"!\[([^\]]*)\]\(([^)]+)\)"), r'<img alt="\1" src="\2">'),
    InlineRule("link", re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), r'<a href="\2">\1</a>'),
    InlineRule("autolink", re.compile(r"<([^<>\s]+)>"), _autolink),
    InlineRule("strikethrough", re.compile(r"~~([^~\n]+)~~"), r"<del>\1</del>"),
    InlineRule("strong", re.compile(r"\*\*([^*\n]+)\*\*"), r"<strong>\1</strong>"),
    InlineRule("strong", re.compile(r"__([^_\n]+)__"), r"<strong>\1</strong>"),
    InlineRule("emphasis", re.compile(r"\*([^*\n]+)\*"), r"<em>\1</em>"),
    InlineRule("emphasis", re.compile(r"_([^_\n]+)_"), r"<em>\1</em>"),
    InlineRule("line_break", re.compile(r"\n"), "<br>"),
)

# Rules that a RenderConfig flag can switch off
_RULE_FLAGS: dict[str, str] = {
    "strikethrough": "strikethrough_enabled",
    "autolink": "autolinks_enabled",
}


def active_rules(config: RenderConfig | None = None) -> tuple[InlineRule, ...]:
    """Return the rules enabled by ``config`` (default: the active config), in order."""
    if config is None:
        config = get_render_config()
    return tuple(
        rule
        for rule in INLINE_RULES
        if rule.name not in _RULE_FLAGS or getattr(config, _RULE_FLAGS[rule.name])
    )


def apply_rules(text: str, rules: Iterable[InlineRule]) -> str:
    """Run ``text`` through ``rules`` in series.

    Output of protected rules is replaced by placeholders while the chain
    runs and put back at the end.
    """
    # Placeholders are NUL-delimited; browsers show a literal NUL as U+FFFD
    text = text.replace("\x00", "\ufffd")
    protected: list[str] = []

    def stash(rule: InlineRule) -> Callable[[re.Match[str]], str]:
        def replace(match: re.Match[str]) -> str:
            protected.append(rule.expand(match))
            return _PLACEHOLDER.format(len(protected) - 1)

        return replace

    for rule in rules:
        if rule.protect:
            text = rule.pattern.sub(stash(rule), text)
        else:
            text = rule.apply(text)

    if not protected:
        return text
    return _PLACEHOLDER_PATTERN.sub(lambda m: protected[int(m.group(1))], text)


def render_inline(text: str) -> str:
    """Render inline Markdown in ``text`` to an HTML fragment.

    Examples:
        >>> render_inline("**a** *b*")
        '<strong>a</strong> <em>b</em>'
        >>> render_inline("see <https://example.com>")
        'see <a href="https://example.com">https://example.com</a>'
        >>> render_inline("`*not em*`")
        '<code>*not em*</code>'
    """
    if not text:
        return ""
    return apply_rules(text, active_rules())


__all__ = [
    "INLINE_RULES",
    "InlineRule",
    "active_rules",
    "apply_rules",
    "render_inline",
]
