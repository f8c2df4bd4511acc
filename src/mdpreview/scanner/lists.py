"""List scanning for the block scanner.

A list is a run of item lines sharing one kind (ordered or unordered). Each
item owns its marker line plus the indented lines that follow it; the item
text and those lines are scanned again as a document of their own, which is
how nested lists, quotes and code inside items come about.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdpreview.nodes import List, ListItem
from mdpreview.scanner.classifiers import (
    dedent_list_continuation,
    match_list_marker,
    split_checkbox,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mdpreview.config import RenderConfig
    from mdpreview.nodes import Block


class ListScanningMixin:
    """Mixin for list scanning.

    Required Host Attributes:
        - _lines: Sequence[str]
        - _pos: int
        - _config: RenderConfig

    Required Host Methods:
        - _scan_nested(lines) -> list[Block]

    """

    _lines: Sequence[str]
    _pos: int
    _config: RenderConfig

    def _scan_nested(self, lines: list[str]) -> list[Block]:
        """Scan an owned window of lines. Implemented by BlockScanner."""
        raise NotImplementedError

    def _scan_list(self, ordered: bool) -> List:
        """Scan consecutive items of one kind.

        Stops at a blank line, a non-item line, or an item of the other kind,
        which then starts a list of its own.
        """
        items: list[ListItem] = []
        while self._pos < len(self._lines):
            marker = match_list_marker(self._lines[self._pos])
            if marker is None or marker[0] != ordered:
                break
            items.append(self._scan_list_item(marker[1]))

        return List(items=tuple(items), ordered=ordered)

    def _scan_list_item(self, text: str) -> ListItem:
        """Scan one item whose marker has already been stripped from ``text``."""
        checked: bool | None = None
        if self._config.task_lists_enabled:
            checked, text = split_checkbox(text)

        item_lines = [text]
        self._pos += 1
        while self._pos < len(self._lines):
            nested = dedent_list_continuation(self._lines[self._pos])
            if nested is None:
                break
            item_lines.append(nested)
            self._pos += 1

        return ListItem(children=tuple(self._scan_nested(item_lines)), checked=checked)
