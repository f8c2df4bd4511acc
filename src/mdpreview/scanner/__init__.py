"""Block scanner for mdpreview.

Partitions source lines into typed block nodes.

Architecture:
scanner/
├── __init__.py       # Re-exports BlockScanner, scan
├── core.py           # BlockScanner (mixin composition + dispatch)
├── classifiers.py    # Ordered line-start predicates
├── lists.py          # List and list item scanning
└── table.py          # Pipe table scanning

Usage:
    >>> from mdpreview.scanner import scan
    >>> scan("- [x] done\\n- todo".split("\\n"))
    [List(items=(ListItem(children=(Paragraph(text='done'),), checked=True), ...), ordered=False)]

"""

from mdpreview.scanner.core import BlockScanner, scan

__all__ = ["BlockScanner", "scan"]
