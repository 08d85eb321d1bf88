"""Tests for PageComposer: measurement, automatic page flow and banners."""

from __future__ import annotations

import pytest

from application_summary.core.config import SummaryPDFConfig
from application_summary.layout.composer import PageComposer
from application_summary.layout.models import Gap, LayoutState, Line, PageGeometry, RectOp, TextOp
from application_summary.layout.styles import build_styles

LETTER = PageGeometry(612.0, 792.0, 72.0)


@pytest.fixture
def composer(pdf_config: SummaryPDFConfig) -> PageComposer:
    return PageComposer(LETTER, build_styles(pdf_config), pdf_config)


class TestGeometry:
    def test_letter_margins(self) -> None:
        assert LETTER.left == 72.0
        assert LETTER.bottom == 720.0
        assert LETTER.content_width == 468.0

    def test_start_at_top_margin(self, composer: PageComposer) -> None:
        assert composer.start() == LayoutState(y=72.0, page_index=0)
        assert composer.page_count == 1


class TestMeasure:
    def test_measure_matches_cursor_advance(self, composer: PageComposer) -> None:
        items = [
            Line("Label", "label"),
            Line("A long answer " * 40, "answer"),
            Line("one\ntwo\nthree", "answer", indent=30),
            Gap("answer"),
        ]
        start = composer.start()
        end = composer.place(start, items)
        assert end.page_index == 0
        assert end.y - start.y == pytest.approx(composer.measure(items))

    def test_wrap_respects_indent(self, composer: PageComposer) -> None:
        text = "word " * 100
        assert len(composer.wrap(Line(text, "answer", indent=200))) > len(
            composer.wrap(Line(text, "answer"))
        )

    def test_empty_text_occupies_one_line(self, composer: PageComposer) -> None:
        assert composer.wrap(Line("", "answer")) == [""]
        assert composer.measure([Line("", "answer")]) == pytest.approx(15.0)


class TestAutomaticPageFlow:
    def test_line_that_does_not_fit_moves_to_next_page(self, composer: PageComposer) -> None:
        state = LayoutState(y=LETTER.bottom - 10)
        state = composer.place(state, [Line("Overflow", "answer")])
        assert composer.page_count == 2
        assert state == LayoutState(y=LETTER.top + 15.0, page_index=1)
        pages = composer.pages()
        assert pages[0].ops == ()
        assert pages[1].text_lines() == ["Overflow"]

    def test_wrapped_answer_splits_across_pages(self, composer: PageComposer) -> None:
        state = LayoutState(y=LETTER.bottom - 40)
        composer.place(state, [Line("one\ntwo\nthree\nfour", "answer")])
        first, second = composer.pages()
        assert first.text_lines() == ["one", "two"]
        assert second.text_lines() == ["three", "four"]

    def test_no_text_below_bottom_margin(self, composer: PageComposer) -> None:
        state = composer.start()
        for i in range(200):
            state = composer.place(state, [Line(f"Line {i}", "answer")])
        for page in composer.pages():
            for op in page.ops:
                assert op.y + op.style.line_height <= LETTER.bottom

    def test_bullet_drawn_left_of_text(self, composer: PageComposer) -> None:
        composer.place(composer.start(), [Line("item", "declaration", indent=20, bullet="*")])
        bullet, text = composer.pages()[0].ops
        assert (bullet.text, bullet.x) == ("*", 82.0)
        assert (text.text, text.x) == ("item", 92.0)


class TestBanner:
    def test_banner_rect_and_title(self, composer: PageComposer) -> None:
        state = composer.banner(composer.start(), "Your details")
        rect, title = composer.pages()[0].ops
        assert isinstance(rect, RectOp)
        assert (rect.x, rect.y, rect.width) == (67.0, 66.0, 480)
        assert rect.height == pytest.approx(composer.banner_height())
        assert isinstance(title, TextOp)
        assert title.text == "Your details"
        assert title.style.color == "#FFFFFF"
        assert state.y == pytest.approx(72.0 + 2 * 17.4)

    def test_keep_with_next_threshold(self, composer: PageComposer) -> None:
        assert composer.banner_keep_with_next() == pytest.approx(27.4 + 15.0 + 25.0)

    def test_banner_stays_when_it_fits(self, composer: PageComposer) -> None:
        y = LETTER.bottom - composer.banner_keep_with_next() - 1
        state = composer.banner(LayoutState(y=y), "Fits")
        assert state.page_index == 0
        assert composer.page_count == 1

    def test_banner_breaks_when_short_of_space(self, composer: PageComposer) -> None:
        y = LETTER.bottom - composer.banner_keep_with_next() + 1
        state = composer.banner(LayoutState(y=y), "Moves")
        assert state.page_index == 1
        assert composer.pages()[0].ops == ()
        assert composer.pages()[1].text_lines() == ["Moves"]

    def test_banner_followed_by_line_on_same_page(self, composer: PageComposer) -> None:
        y = LETTER.bottom - composer.banner_keep_with_next() - 1
        state = composer.banner(LayoutState(y=y), "Section")
        composer.place(state, [Line("First question", "label")])
        assert composer.page_count == 1
        assert composer.pages()[0].text_lines() == ["Section", "First question"]

    def test_banner_rect_inside_page(self, composer: PageComposer) -> None:
        state = composer.start()
        for i in range(40):
            state = composer.banner(state, f"Section {i}")
            state = composer.place(state, [Line("Question", "label"), Line("Answer", "answer")])
        assert composer.page_count > 1
        for page in composer.pages():
            for op in page.ops:
                if isinstance(op, RectOp):
                    assert op.y + op.height <= LETTER.bottom


class TestImage:
    def test_image_keeps_aspect_and_cursor(self, composer: PageComposer, logo_png) -> None:
        start = composer.start()
        state = composer.image(start, logo_png, 450, 80, 80)
        assert state == start
        (image,) = composer.pages()[0].ops
        assert (image.x, image.y, image.width, image.height) == (450, 80, 80, 40)
