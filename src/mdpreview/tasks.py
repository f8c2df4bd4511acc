"""Task checkbox index for editor integrations.

The renderer emits task checkboxes in source order but does not report
where each one came from. An editor that wants to toggle the Nth rendered
checkbox recomputes the mapping here by scanning the raw lines: the Nth
entry of ``checkbox_lines()`` is the source line of the Nth checkbox.

Task items at any indentation and under any number of ``>`` quote markers
are counted, matching how nested items and quoted lists render.

The scan is line-based and does not know about block structure. Two kinds
of task-looking lines render without a checkbox but are still counted, and
shift every later index by one:

- a task line inside a fenced code block
- an indented task line directly after paragraph text, which continues the
  paragraph instead of starting a list

Callers that toggle checkboxes should treat the mapping as exact only for
sources without these lines.

Example:
    >>> checkbox_lines("# Todo\\n- [ ] milk\\n- eggs\\n- [x] bread")
    [1, 3]
"""

from __future__ import annotations

import re

TASK_ITEM_PATTERN = re.compile(r"(?:[ \t]*> ?)*[ \t]*(?:\d+\.|[-*]) \[([ xX])\](?: |$)")


def task_states(source: str) -> list[tuple[int, bool]]:
    """Return (line_index, checked) for every task item line, top to bottom.

    Line indices are 0-based positions in ``source.split("\\n")``.
    """
    states: list[tuple[int, bool]] = []
    for index, line in enumerate(source.split("\n")):
        match = TASK_ITEM_PATTERN.match(line.rstrip("\r"))
        if match is not None:
            states.append((index, match.group(1) != " "))
    return states


def checkbox_lines(source: str) -> list[int]:
    """Return the 0-based source line of each task checkbox, in render order."""
    return [index for index, _ in task_states(source)]


__all__ = ["TASK_ITEM_PATTERN", "checkbox_lines", "task_states"]
