"""Parse and render Markdown in 3 lines, no config and no dependencies."""

from mdpreview import parse, render

doc = parse("# Hello **World**")
html = render(doc)
print(html)
