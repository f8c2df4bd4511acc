"""Tests for block scanning: classification order, consumption and nesting."""

import pytest

from mdpreview.config import RenderConfig, render_config_context
from mdpreview.nodes import (
    BlockQuote,
    CodeBlock,
    Heading,
    List,
    ListItem,
    Paragraph,
    Table,
    ThematicBreak,
)
from mdpreview.scanner import BlockScanner, scan


def _scan(source: str) -> list:
    return scan(source.split("\n"))


class TestSimpleBlocks:
    """Single-line blocks and paragraphs."""

    def test_heading(self) -> None:
        assert _scan("### Third") == [Heading(level=3, text="Third")]

    def test_thematic_break(self) -> None:
        assert _scan("***") == [ThematicBreak()]

    def test_paragraph_joins_lines(self) -> None:
        assert _scan("one\ntwo") == [Paragraph(text="one\ntwo")]

    def test_paragraph_trimmed(self) -> None:
        assert _scan("  padded  ") == [Paragraph(text="padded")]

    def test_blank_lines_separate_paragraphs(self) -> None:
        assert _scan("one\n\n\ntwo") == [Paragraph(text="one"), Paragraph(text="two")]

    def test_empty_input(self) -> None:
        assert _scan("") == []
        assert scan([]) == []

    def test_whitespace_only_lines(self) -> None:
        assert _scan("   \n\t\n") == []


class TestPriority:
    """First matching rule wins and every rule interrupts a paragraph."""

    def test_dash_break_beats_list(self) -> None:
        assert _scan("---") == [ThematicBreak()]

    def test_star_break_beats_list(self) -> None:
        assert _scan("***") == [ThematicBreak()]

    def test_heading_interrupts_paragraph(self) -> None:
        assert _scan("text\n# H") == [Paragraph(text="text"), Heading(level=1, text="H")]

    def test_break_interrupts_paragraph(self) -> None:
        assert _scan("text\n---") == [Paragraph(text="text"), ThematicBreak()]

    def test_list_interrupts_paragraph(self) -> None:
        blocks = _scan("intro\n- item")
        assert blocks[0] == Paragraph(text="intro")
        assert isinstance(blocks[1], List)

    def test_table_interrupts_paragraph(self) -> None:
        blocks = _scan("intro\na|b\n-|-")
        assert blocks == [Paragraph(text="intro"), Table(header=("a", "b"), rows=())]

    def test_two_space_indent_continues_paragraph(self) -> None:
        assert _scan("one\n  two") == [Paragraph(text="one\n  two")]


class TestBlockQuote:
    """Block quotes are scanned recursively."""

    def test_heading_and_text(self) -> None:
        assert _scan("> # H\n> text") == [
            BlockQuote(children=(Heading(level=1, text="H"), Paragraph(text="text")))
        ]

    def test_marker_without_space(self) -> None:
        assert _scan(">a\n>b") == [BlockQuote(children=(Paragraph(text="a\nb"),))]

    def test_nested_quote(self) -> None:
        assert _scan("> > deep") == [
            BlockQuote(children=(BlockQuote(children=(Paragraph(text="deep"),)),))
        ]

    def test_quote_ends_at_unquoted_line(self) -> None:
        assert _scan("> q\nafter") == [
            BlockQuote(children=(Paragraph(text="q"),)),
            Paragraph(text="after"),
        ]

    def test_empty_quote(self) -> None:
        assert _scan(">") == [BlockQuote(children=())]

    def test_list_inside_quote(self) -> None:
        (quote,) = _scan("> - a\n> - b")
        assert isinstance(quote, BlockQuote)
        (lst,) = quote.children
        assert isinstance(lst, List)
        assert len(lst.items) == 2


class TestList:
    """List grouping, items and nesting."""

    def test_unordered_items(self) -> None:
        assert _scan("- a\n* b") == [
            List(
                items=(
                    ListItem(children=(Paragraph(text="a"),)),
                    ListItem(children=(Paragraph(text="b"),)),
                ),
                ordered=False,
            )
        ]

    def test_ordered_items(self) -> None:
        (lst,) = _scan("1. a\n2. b\n10. c")
        assert isinstance(lst, List)
        assert lst.ordered is True
        assert len(lst.items) == 3

    def test_kind_change_starts_new_list(self) -> None:
        blocks = _scan("- a\n1. b\n- c")
        assert [type(b) for b in blocks] == [List, List, List]
        assert [b.ordered for b in blocks] == [False, True, False]

    def test_blank_line_ends_list(self) -> None:
        blocks = _scan("- a\n\n- b")
        assert len(blocks) == 2
        assert all(isinstance(b, List) for b in blocks)

    def test_plain_line_ends_list(self) -> None:
        blocks = _scan("- a\nplain")
        assert isinstance(blocks[0], List)
        assert blocks[1] == Paragraph(text="plain")

    def test_checkboxes(self) -> None:
        (lst,) = _scan("- [ ] todo\n- [x] done\n- [X] also\n- plain")
        assert [item.checked for item in lst.items] == [False, True, True, None]
        assert lst.items[0].children == (Paragraph(text="todo"),)

    def test_checkbox_on_ordered_item(self) -> None:
        (lst,) = _scan("1. [x] first")
        assert lst.items[0].checked is True

    def test_continuation_line_merges_into_item(self) -> None:
        (lst,) = _scan("- item\n  continued")
        assert lst.items == (ListItem(children=(Paragraph(text="item\ncontinued"),)),)

    @pytest.mark.parametrize("indent", [4, 5, 6])
    def test_deep_continuation_stays_text(self, indent: int) -> None:
        (lst,) = _scan("- a\n" + " " * indent + "b")
        assert lst.items == (ListItem(children=(Paragraph(text="a\nb"),)),)

    def test_tab_continuation(self) -> None:
        (lst,) = _scan("- item\n\tcontinued")
        assert lst.items[0].children == (Paragraph(text="item\ncontinued"),)

    def test_nested_list(self) -> None:
        (lst,) = _scan("- outer\n  - inner\n  - inner two")
        (item,) = lst.items
        assert item.children[0] == Paragraph(text="outer")
        nested = item.children[1]
        assert isinstance(nested, List)
        assert len(nested.items) == 2

    def test_three_levels(self) -> None:
        (lst,) = _scan("- a\n  - b\n    - c")
        inner = lst.items[0].children[1].items[0].children[1]
        assert isinstance(inner, List)
        assert inner.items[0].children == (Paragraph(text="c"),)

    def test_code_inside_item(self) -> None:
        (lst,) = _scan("- run:\n  ```sh\n  ls\n  ```")
        assert lst.items[0].children == (
            Paragraph(text="run:"),
            CodeBlock(content="ls", language="sh"),
        )

    def test_empty_item(self) -> None:
        (lst,) = _scan("- ")
        assert lst.items == (ListItem(children=()),)

    def test_task_lists_disabled(self) -> None:
        with render_config_context(RenderConfig(task_lists_enabled=False)):
            (lst,) = _scan("- [ ] todo")
        assert lst.items[0].checked is None
        assert lst.items[0].children == (Paragraph(text="[ ] todo"),)


class TestFencedCode:
    """Fenced code blocks."""

    def test_with_language(self) -> None:
        assert _scan("```js\ncode\n```") == [CodeBlock(content="code", language="js")]

    def test_without_language(self) -> None:
        assert _scan("```\na\nb\n```") == [CodeBlock(content="a\nb")]

    def test_content_is_verbatim(self) -> None:
        (code,) = _scan("```\n# not heading\n\n- not list\n```")
        assert code.content == "# not heading\n\n- not list"

    def test_indentation_preserved(self) -> None:
        (code,) = _scan("```py\ndef f():\n    return 1\n```")
        assert code.content == "def f():\n    return 1"

    def test_unterminated_runs_to_end(self) -> None:
        assert _scan("```\nrest\nof file") == [CodeBlock(content="rest\nof file")]

    def test_text_after_closing_fence(self) -> None:
        assert _scan("```\nx\n```\nafter") == [CodeBlock(content="x"), Paragraph(text="after")]

    def test_empty_block(self) -> None:
        assert _scan("```\n```") == [CodeBlock(content="")]


class TestIndentedCode:
    """Indented code blocks."""

    def test_four_spaces(self) -> None:
        assert _scan("    a\n    b") == [CodeBlock(content="a\nb")]

    def test_tab(self) -> None:
        assert _scan("\ta\n\tb") == [CodeBlock(content="a\nb")]

    def test_one_level_stripped(self) -> None:
        assert _scan("        deep") == [CodeBlock(content="    deep")]

    def test_ends_at_unindented_line(self) -> None:
        assert _scan("    code\ntext") == [CodeBlock(content="code"), Paragraph(text="text")]

    def test_trailing_whitespace_lines_not_included(self) -> None:
        assert _scan("    code\n    \nafter") == [
            CodeBlock(content="code"),
            Paragraph(text="after"),
        ]

    def test_inner_whitespace_line_kept(self) -> None:
        assert _scan("    a\n    \n    b") == [CodeBlock(content="a\n\nb")]


class TestTable:
    """Pipe tables."""

    def test_basic(self) -> None:
        assert _scan("| a | b |\n|---|---|\n| 1 | 2 |") == [
            Table(header=("a", "b"), rows=(("1", "2"),))
        ]

    def test_ragged_rows(self) -> None:
        blocks = _scan("a|b\n-|-\n1|2|3\n4")
        assert blocks == [
            Table(header=("a", "b"), rows=(("1", "2", "3"),)),
            Paragraph(text="4"),
        ]

    def test_ends_at_blank_line(self) -> None:
        blocks = _scan("a|b\n-|-\n1|2\n\n3|4")
        assert blocks[0] == Table(header=("a", "b"), rows=(("1", "2"),))
        assert blocks[1] == Paragraph(text="3|4")

    def test_non_pipe_line_ends_table(self) -> None:
        blocks = _scan("a|b\n-|-\n1|2\ntext")
        assert blocks == [
            Table(header=("a", "b"), rows=(("1", "2"),)),
            Paragraph(text="text"),
        ]

    def test_alignment_colons(self) -> None:
        (table,) = _scan("a|b\n:--|--:\n1|2")
        assert table.header == ("a", "b")

    def test_inner_empty_cell_kept(self) -> None:
        (table,) = _scan("a|b|c\n-|-|-\n1||3")
        assert table.rows == (("1", "", "3"),)

    def test_separator_without_dashes(self) -> None:
        assert _scan("a|b\n|\n1|2") == [Table(header=("a", "b"), rows=(("1", "2"),))]

    def test_blank_line_is_not_separator(self) -> None:
        assert _scan("a|b\n   \n1|2") == [Paragraph(text="a|b"), Paragraph(text="1|2")]

    def test_pipe_without_separator_is_paragraph(self) -> None:
        assert _scan("a|b\n1|2") == [Paragraph(text="a|b\n1|2")]

    def test_tables_disabled(self) -> None:
        with render_config_context(RenderConfig(tables_enabled=False)):
            assert _scan("a|b\n-|-") == [Paragraph(text="a|b\n-|-")]


class TestScanner:
    """BlockScanner instance behavior."""

    def test_input_lines_not_mutated(self) -> None:
        lines = ["- a", "  b"]
        BlockScanner(lines).scan()
        assert lines == ["- a", "  b"]

    def test_accepts_tuple(self) -> None:
        assert scan(("# H",)) == [Heading(level=1, text="H")]
