"""Text escaping for rendered code."""

from __future__ import annotations

import html as html_module


def escape_html(text: str, *, quote: bool = False) -> str:
    """Escape ``&``, ``<`` and ``>`` for element content.

    Ampersands are replaced first so entities produced by the later
    replacements are never escaped twice. Pass ``quote=True`` when the
    result goes inside an attribute value.

    Examples:
        >>> escape_html("a < b && c > d")
        'a &lt; b &amp;&amp; c &gt; d'
        >>> escape_html("&lt;")
        '&amp;lt;'
        >>> escape_html('x"y', quote=True)
        'x&quot;y'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=quote)
