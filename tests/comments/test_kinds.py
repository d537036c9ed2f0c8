"""
Tests for doc comment classification and marker stripping.
"""

import pytest

from rdoc.comments import CommentKind, classify, extract_content


class TestClassify:

    @pytest.mark.parametrize("text, expected", [
        ("/// outer", CommentKind.OUTER_LINE),
        ("///", CommentKind.OUTER_LINE),
        ("//! inner", CommentKind.INNER_LINE),
        ("/** outer block */", CommentKind.OUTER_BLOCK),
        ("/*! inner block */", CommentKind.INNER_BLOCK),
    ])
    def test_doc_comment_kinds(self, text, expected):
        assert classify(text) is expected

    @pytest.mark.parametrize("text", [
        "// regular comment",
        "/* regular block */",
        "/*** decorative block ***/",
        "",
        "   /// indented text is not a comment token",
    ])
    def test_regular_comments_are_not_classified(self, text):
        assert classify(text) is None

    def test_four_slashes_still_outer_line(self):
        # First matching rule wins
        assert classify("//// banner") is CommentKind.OUTER_LINE

    def test_block_kinds_report_is_block(self):
        assert CommentKind.OUTER_BLOCK.is_block
        assert CommentKind.INNER_BLOCK.is_block
        assert not CommentKind.OUTER_LINE.is_block
        assert not CommentKind.INNER_LINE.is_block


class TestExtractLineContent:

    def test_marker_and_single_space_removed(self):
        result = extract_content("/// Hello world.", CommentKind.OUTER_LINE)
        assert result.content == "Hello world."
        assert result.prefix_length == 4

    def test_marker_without_space(self):
        result = extract_content("//!Crate docs", CommentKind.INNER_LINE)
        assert result.content == "Crate docs"
        assert result.prefix_length == 3

    def test_only_one_whitespace_is_stripped(self):
        result = extract_content("///   indented", CommentKind.OUTER_LINE)
        assert result.content == "  indented"
        assert result.prefix_length == 4

    def test_tab_counts_as_whitespace(self):
        result = extract_content("//!\tTabbed", CommentKind.INNER_LINE)
        assert result.content == "Tabbed"
        assert result.prefix_length == 4

    def test_empty_doc_line(self):
        result = extract_content("///", CommentKind.OUTER_LINE)
        assert result.content == ""
        assert result.prefix_length == 3

    def test_missing_marker_falls_back_to_fixed_prefix(self):
        result = extract_content("// not a doc comment", CommentKind.OUTER_LINE)
        assert result.prefix_length == 3
        assert result.content == "not a doc comment"


class TestExtractBlockContent:

    def test_single_line_block(self):
        result = extract_content("/** Short doc. */", CommentKind.OUTER_BLOCK)
        assert result.content == "Short doc."
        assert result.prefix_length == 3

    def test_multi_line_block_strips_leading_stars(self):
        text = "/**\n * Block doc comment.\n * Multiple lines.\n */"
        result = extract_content(text, CommentKind.OUTER_BLOCK)
        assert result.content == "Block doc comment.\nMultiple lines."
        assert result.prefix_length == 3

    def test_inner_block(self):
        text = "/*!\n * Module docs.\n */"
        result = extract_content(text, CommentKind.INNER_BLOCK)
        assert result.content == "Module docs."

    def test_lines_without_star_keep_their_text(self):
        text = "/**\n   plain line\n * starred line\n */"
        result = extract_content(text, CommentKind.OUTER_BLOCK)
        assert result.content == "plain line\nstarred line"

    def test_extra_indent_after_star_is_kept(self):
        text = "/**\n * List:\n *   - item\n */"
        result = extract_content(text, CommentKind.OUTER_BLOCK)
        assert result.content == "List:\n  - item"

    @pytest.mark.parametrize("text, kind, marker", [
        ("/// doc", CommentKind.OUTER_LINE, "///"),
        ("//! doc", CommentKind.INNER_LINE, "//!"),
        ("/** doc */", CommentKind.OUTER_BLOCK, "/**"),
        ("/*! doc */", CommentKind.INNER_BLOCK, "/*!"),
    ])
    def test_markers_never_leak_into_content(self, text, kind, marker):
        content = extract_content(text, kind).content
        assert marker not in content
        assert "*/" not in content
        assert content == "doc"
