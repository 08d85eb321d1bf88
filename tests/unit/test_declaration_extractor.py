"""Tests for declaration HTML extraction."""

from __future__ import annotations

import pytest

from application_summary.declaration import Heading, ListItem, Paragraph, clean_text, extract
from application_summary.exceptions import MalformedDeclarationError
from tests.fakes.records import DECLARATION_HTML


def _wrap(body: str) -> str:
    return f'<div id="declaration">{body}</div>'


class TestExtractBlocks:
    def test_sample_declaration(self) -> None:
        assert extract(DECLARATION_HTML) == [
            Heading("Declaration"),
            Paragraph("By submitting this application you agree that:"),
            ListItem("the information you have given is true", depth=1),
            ListItem("including answers given on your behalf", depth=2),
            ListItem("we may share it with the police", depth=1),
            Paragraph("Read our privacy notice to see how we use your data."),
        ]

    def test_whitespace_is_normalised(self) -> None:
        blocks = extract(_wrap("<p>\n   lots\t of \n\n  space   </p>"))
        assert blocks == [Paragraph("lots of space")]

    @pytest.mark.parametrize("tag", ["h1", "h2", "h3", "h4", "h5", "h6"])
    def test_heading_levels(self, tag) -> None:
        assert extract(_wrap(f"<{tag}>Title</{tag}>")) == [Heading("Title")]

    def test_unrecognised_elements_are_ignored(self) -> None:
        blocks = extract(_wrap("<span>skip</span><hr/><p>keep</p><table><tr><th>x</th></tr></table>"))
        assert blocks == [Paragraph("keep")]

    def test_inline_markup_is_flattened(self) -> None:
        blocks = extract(_wrap("<p>Read the <a href='#'>privacy <strong>notice</strong></a>.</p>"))
        assert blocks == [Paragraph("Read the privacy notice.")]

    def test_content_outside_container_is_ignored(self) -> None:
        blocks = extract("<p>before</p>" + _wrap("<p>inside</p>") + "<p>after</p>")
        assert blocks == [Paragraph("inside")]


class TestListDepth:
    def test_item_without_list_ancestor_is_top_level(self) -> None:
        assert extract(_wrap("<li>loose</li>")) == [ListItem("loose", depth=0)]

    def test_two_ancestor_lists(self) -> None:
        blocks = extract(_wrap("<ul><li>outer<ol><li>inner</li></ol></li></ul>"))
        assert blocks == [ListItem("outer", depth=1), ListItem("inner", depth=2)]

    def test_three_levels(self) -> None:
        blocks = extract(_wrap("<ul><li>a<ul><li>b<ul><li>c</li></ul></li></ul></li></ul>"))
        assert [b.depth for b in blocks] == [1, 2, 3]

    def test_item_text_excludes_nested_list(self) -> None:
        blocks = extract(_wrap("<ul><li>parent <em>text</em><ul><li>child</li></ul> tail</li></ul>"))
        assert blocks[0] == ListItem("parent text tail", depth=1)

    def test_paragraph_inside_item_is_not_duplicated(self) -> None:
        blocks = extract(_wrap("<ul><li><p>only once</p></li></ul>"))
        assert blocks == [ListItem("only once", depth=1)]


class TestMalformedFragments:
    def test_empty_fragment(self) -> None:
        with pytest.raises(MalformedDeclarationError, match="empty"):
            extract("   ")

    def test_missing_container(self) -> None:
        with pytest.raises(MalformedDeclarationError, match="container") as excinfo:
            extract("<div id='other'><p>text</p></div>")
        assert "other" in excinfo.value.fragment

    def test_container_without_blocks(self) -> None:
        with pytest.raises(MalformedDeclarationError, match="no paragraphs"):
            extract(_wrap("<span>nothing renderable</span>"))

    def test_not_a_string(self) -> None:
        with pytest.raises(MalformedDeclarationError):
            extract(None)  # type: ignore[arg-type]


class TestCleanText:
    def test_collapses_and_trims(self) -> None:
        assert clean_text("  a \n\t b  ") == "a b"

    def test_empty(self) -> None:
        assert clean_text("") == ""
