"""Tests for the section text formatter."""

from intake.formatting.formatter import format_blocks, render_blocks
from intake.formatting.models import Heading, ListItem, Paragraph, Spacer, TextRun


class TestLineClassification:
    def test_mixed_section(self) -> None:
        blocks = format_blocks("## Goals\n- Ship v1\n1. Plan\nPlain line")
        assert blocks == [
            Heading(level=2, text="Goals"),
            ListItem(ordered=False, text="Ship v1"),
            ListItem(ordered=True, text="Plan"),
            Paragraph(text="Plain line"),
        ]

    def test_heading_levels(self) -> None:
        blocks = format_blocks("# One\n## Two\n### Three")
        assert [b.level for b in blocks if isinstance(b, Heading)] == [1, 2, 3]
        assert [b.text for b in blocks if isinstance(b, Heading)] == ["One", "Two", "Three"]

    def test_four_hashes_is_a_paragraph(self) -> None:
        assert format_blocks("#### Deep") == [Paragraph(text="#### Deep")]

    def test_hash_without_space_is_a_paragraph(self) -> None:
        assert format_blocks("#tag") == [Paragraph(text="#tag")]

    def test_star_bullet(self) -> None:
        assert format_blocks("* item") == [ListItem(ordered=False, text="item")]

    def test_numbered_item_drops_numeral(self) -> None:
        assert format_blocks("42. Answer") == [ListItem(ordered=True, text="Answer")]

    def test_number_without_space_is_a_paragraph(self) -> None:
        assert format_blocks("3.14 is pi") == [Paragraph(text="3.14 is pi")]

    def test_indented_bullet_is_a_paragraph(self) -> None:
        assert format_blocks("  - nested") == [Paragraph(text="  - nested")]

    def test_whitespace_line_is_spacer(self) -> None:
        assert format_blocks("a\n   \nb") == [Paragraph("a"), Spacer(), Paragraph("b")]


class TestTotality:
    def test_empty_string_yields_no_blocks(self) -> None:
        assert format_blocks("") == []

    def test_only_blank_lines_yield_spacers(self) -> None:
        assert format_blocks("\n\n") == [Spacer(), Spacer(), Spacer()]

    def test_arbitrary_text_does_not_fail(self) -> None:
        blocks = format_blocks("**\n1.\n- \n#\n\t\r\n***x**")
        assert len(blocks) == 6


class TestInlineEmphasis:
    def test_plain_text_is_single_run(self) -> None:
        assert Paragraph("no markers").runs == (TextRun("no markers"),)

    def test_bold_span_is_split_out(self) -> None:
        runs = Paragraph("Drop-off **43%** at step 3").runs
        assert runs == (
            TextRun("Drop-off "),
            TextRun("43%", emphasized=True),
            TextRun(" at step 3"),
        )

    def test_multiple_spans(self) -> None:
        runs = ListItem(False, "**a** and **b**").runs
        assert [r.emphasized for r in runs] == [True, False, True]

    def test_unmatched_marker_stays_plain(self) -> None:
        assert Paragraph("half **open").runs == (TextRun("half **open"),)

    def test_emphasis_is_not_nested(self) -> None:
        runs = Heading(2, "**outer *inner* outer**").runs
        assert runs == (TextRun("outer *inner* outer", emphasized=True),)


class TestIdempotence:
    def test_reformatting_rendered_blocks_is_stable(self) -> None:
        source = "# T\n\n## Goals\n- a **b**\n* c\n7. d\n  - e\nPlain\n\n"
        blocks = format_blocks(source)
        assert format_blocks(render_blocks(blocks)) == blocks

    def test_normalized_input_round_trips(self) -> None:
        source = "## Goals\n- Ship v1\n1. Plan\nPlain line"
        assert render_blocks(format_blocks(source)) == source
