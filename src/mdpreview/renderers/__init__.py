"""Renderers for mdpreview block trees."""

from mdpreview.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
