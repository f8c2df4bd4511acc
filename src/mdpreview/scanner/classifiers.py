"""Line classifiers for the block scanner.

Each block kind has its own start predicate. The scanner tries them in a
fixed priority order and the first match wins:

1. heading          ``#`` to ``######`` then a space
2. thematic break   three or more of one of ``-``, ``*``, ``_``
3. block quote      leading ``>``
4. list item        ``1. ``, ``- `` or ``* ``
5. fenced code      leading three backticks
6. indented code    four spaces or a tab
7. table            a line with ``|`` followed by a separator row

Blank lines and paragraphs are what is left over. Paragraph scanning uses
``starts_block()`` to decide where a paragraph is interrupted.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_HEADING_PATTERN = re.compile(r"(#{1,6}) (.*)", re.DOTALL)
_THEMATIC_BREAK_PATTERN = re.compile(r"-{3,}|\*{3,}|_{3,}")
_LIST_MARKER_PATTERN = re.compile(r"(?:(\d+)\.|[-*]) ")
_CHECKBOX_PATTERN = re.compile(r"\[([ xX])\](?: |$)")
_SEPARATOR_ROW_PATTERN = re.compile(r"[\s|:-]*[|:-][\s|:-]*")

FENCE = "```"
CODE_INDENT = "    "
LIST_INDENT = "  "


def is_blank(line: str) -> bool:
    """A line with nothing but whitespace."""
    return not line.strip()


def match_heading(line: str) -> tuple[int, str] | None:
    """Return (level, text) for an ATX heading line, else None.

    Examples:
        >>> match_heading("## Setup")
        (2, 'Setup')
        >>> match_heading("####### too deep") is None
        True
    """
    match = _HEADING_PATTERN.match(line)
    if match is None:
        return None
    return len(match.group(1)), match.group(2).rstrip()


def is_thematic_break(line: str) -> bool:
    """Three or more of the same break character and nothing else."""
    return _THEMATIC_BREAK_PATTERN.fullmatch(line) is not None


def is_blockquote(line: str) -> bool:
    return line.startswith(">")


def strip_quote_marker(line: str) -> str:
    """Remove one ``>`` and a single following space if present."""
    line = line[1:]
    return line[1:] if line.startswith(" ") else line


def match_list_marker(line: str) -> tuple[bool, str] | None:
    """Return (ordered, remainder) for a list item line, else None.

    Examples:
        >>> match_list_marker("12. twelve")
        (True, 'twelve')
        >>> match_list_marker("* star")
        (False, 'star')
        >>> match_list_marker("-dash") is None
        True
    """
    match = _LIST_MARKER_PATTERN.match(line)
    if match is None:
        return None
    return match.group(1) is not None, line[match.end() :]


def split_checkbox(text: str) -> tuple[bool | None, str]:
    """Detect a leading task checkbox on list item text.

    Returns (checked, remaining_text); checked is None when the text does
    not open with ``[ ]``, ``[x]`` or ``[X]`` followed by a space or the end
    of the line.

    Examples:
        >>> split_checkbox("[x] done")
        (True, 'done')
        >>> split_checkbox("[ ] todo")
        (False, 'todo')
        >>> split_checkbox("[link](url)")
        (None, '[link](url)')
    """
    match = _CHECKBOX_PATTERN.match(text)
    if match is None:
        return None, text
    return match.group(1) != " ", text[match.end() :]


def dedent_list_continuation(line: str) -> str | None:
    """Return a list item continuation line, trimmed, else None.

    Continuation lines are indented by at least two spaces or a tab and
    contain something other than whitespace. They are trimmed, except that a
    nested list marker only loses one indent level so deeper items keep
    their relative depth.

    Examples:
        >>> dedent_list_continuation("      more text")
        'more text'
        >>> dedent_list_continuation("    - nested")
        '  - nested'
    """
    if is_blank(line):
        return None
    if line.startswith(LIST_INDENT):
        rest = line[len(LIST_INDENT) :]
    elif line.startswith("\t"):
        rest = line[1:]
    else:
        return None

    if match_list_marker(rest.lstrip()) is not None:
        return rest.rstrip()
    return rest.strip()


def is_fence(line: str) -> bool:
    return line.startswith(FENCE)


def is_indented_code(line: str) -> bool:
    """Four spaces or a tab of indentation."""
    return line.startswith((CODE_INDENT, "\t"))


def strip_code_indent(line: str) -> str:
    """Remove exactly one code indentation level."""
    if line.startswith(CODE_INDENT):
        return line[len(CODE_INDENT) :]
    if line.startswith("\t"):
        return line[1:]
    return line


def is_separator_row(line: str) -> bool:
    """Table separator: only whitespace, ``|``, ``:`` and ``-``, and not blank."""
    return _SEPARATOR_ROW_PATTERN.fullmatch(line) is not None


def is_table_start(lines: Sequence[str], index: int) -> bool:
    """A line containing ``|`` whose next line is a separator row."""
    return (
        "|" in lines[index]
        and index + 1 < len(lines)
        and is_separator_row(lines[index + 1])
    )


def starts_block(lines: Sequence[str], index: int, *, tables: bool = True) -> bool:
    """True when ``lines[index]`` opens any non-paragraph block."""
    line = lines[index]
    return (
        match_heading(line) is not None
        or is_thematic_break(line)
        or is_blockquote(line)
        or match_list_marker(line) is not None
        or is_fence(line)
        or (is_indented_code(line) and not is_blank(line))
        or (tables and is_table_start(lines, index))
    )


__all__ = [
    "dedent_list_continuation",
    "is_blank",
    "is_blockquote",
    "is_fence",
    "is_indented_code",
    "is_separator_row",
    "is_table_start",
    "is_thematic_break",
    "match_heading",
    "match_list_marker",
    "split_checkbox",
    "starts_block",
    "strip_code_indent",
    "strip_quote_marker",
]
