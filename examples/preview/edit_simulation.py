"""Re-render a preview pane on every keystroke, with a parse cache and checkbox toggling."""

from mdpreview import DictRenderCache, Markdown, checkbox_lines, profiled_render

md = Markdown(cache=DictRenderCache(maxsize=32))

revisions = [
    "# Groceries\n\n- [ ] milk\n- [ ] eggs",
    "# Groceries\n\n- [ ] milk\n- [ ] eggs\n- [ ] bread",
    "# Groceries\n\n- [ ] milk\n- [ ] eggs",  # undo: cache hit
]

with profiled_render() as metrics:
    for source in revisions:
        html = md(source)

print(html)
print(metrics.summary())

# The user clicks the second rendered checkbox; flip it in the source
source = revisions[-1]
lines = source.split("\n")
target = checkbox_lines(source)[1]
lines[target] = lines[target].replace("[ ]", "[x]", 1)
print(md("\n".join(lines)))
