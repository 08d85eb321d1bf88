"""Page composition: cursor arithmetic, page breaks and section banners.

The composer owns the page buffer; the cursor is a ``LayoutState`` value
that every call takes and returns.  Nothing here touches a PDF canvas.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from reportlab.lib.utils import ImageReader, simpleSplit

from application_summary.core.config import SummaryPDFConfig
from application_summary.layout.formatting import sanitize_text
from application_summary.layout.models import (
    ComposedPage,
    DrawOp,
    Gap,
    ImageOp,
    LayoutItem,
    LayoutState,
    Line,
    PageGeometry,
    RectOp,
    TextOp,
)
from application_summary.layout.styles import (
    BANNER_BG_COLOR,
    BANNER_OFFSET_X,
    BANNER_OFFSET_Y,
    BULLET_GAP,
    TextStyle,
)

log = logging.getLogger(__name__)


class PageComposer:
    """Lays out text lines and banners across pages of fixed geometry."""

    def __init__(
        self,
        geometry: PageGeometry,
        styles: dict[str, TextStyle],
        config: SummaryPDFConfig,
    ) -> None:
        self._geometry = geometry
        self._styles = styles
        self._config = config
        self._pages: list[list[DrawOp]] = [[]]

    # ── Cursor / pages ───────────────────────────────────────────────

    @property
    def geometry(self) -> PageGeometry:
        return self._geometry

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def start(self) -> LayoutState:
        return LayoutState(y=self._geometry.top, page_index=0)

    def new_page(self, state: LayoutState) -> LayoutState:
        self._pages.append([])
        log.debug("Page break at y=%.1f on page %d", state.y, state.page_index + 1)
        return LayoutState(y=self._geometry.top, page_index=len(self._pages) - 1)

    def remaining(self, state: LayoutState) -> float:
        """Vertical space left between the cursor and the bottom margin."""
        return self._geometry.bottom - state.y

    def pages(self) -> tuple[ComposedPage, ...]:
        return tuple(ComposedPage(index=i, ops=tuple(ops)) for i, ops in enumerate(self._pages))

    # ── Measurement ──────────────────────────────────────────────────

    def wrap(self, line: Line) -> list[str]:
        """Split *line* into the physical lines it occupies at its indent."""
        style = self._styles[line.style]
        width = self._geometry.content_width - line.indent
        wrapped: list[str] = []
        for paragraph in sanitize_text(line.text).split("\n"):
            wrapped.extend(simpleSplit(paragraph, style.font, style.size, width) or [""])
        return wrapped

    def measure(self, items: Iterable[LayoutItem]) -> float:
        """Total height *items* take when laid out without a page break."""
        height = 0.0
        for item in items:
            line_height = self._styles[item.style].line_height
            if isinstance(item, Gap):
                height += line_height
            else:
                height += line_height * len(self.wrap(item))
        return height

    def banner_height(self) -> float:
        return self._styles["banner"].line_height + self._config.banner_padding

    def banner_keep_with_next(self) -> float:
        """Space a banner needs: itself, one body line and the safety buffer."""
        return self.banner_height() + self._styles["label"].line_height + self._config.page_break_buffer

    # ── Drawing ──────────────────────────────────────────────────────

    def place(self, state: LayoutState, items: Iterable[LayoutItem]) -> LayoutState:
        for item in items:
            if isinstance(item, Gap):
                state = state.advance(self._styles[item.style].line_height)
            else:
                state = self._write_line(state, item)
        return state

    def _write_line(self, state: LayoutState, line: Line) -> LayoutState:
        style = self._styles[line.style]
        x = self._geometry.left + line.indent
        width = self._geometry.content_width - line.indent
        for number, text in enumerate(self.wrap(line)):
            if state.y + style.line_height > self._geometry.bottom:
                state = self.new_page(state)
            page = self._pages[state.page_index]
            if line.bullet and number == 0:
                page.append(TextOp(x - BULLET_GAP, state.y, line.bullet, style))
            if text:
                page.append(TextOp(x, state.y, text, style, width=width, align=line.align))
            state = state.advance(style.line_height)
        return state

    def banner(self, state: LayoutState, title: str) -> LayoutState:
        """Draw a filled section banner, starting a new page if it would not fit."""
        if self.remaining(state) < self.banner_keep_with_next():
            state = self.new_page(state)

        style = self._styles["banner"]
        left = self._geometry.left
        page = self._pages[state.page_index]
        page.append(
            RectOp(
                left - BANNER_OFFSET_X,
                state.y - BANNER_OFFSET_Y,
                self._config.banner_width,
                self.banner_height(),
                BANNER_BG_COLOR,
            )
        )
        page.append(TextOp(left, state.y, sanitize_text(title), style))
        return state.advance(2 * style.line_height)

    def image(self, state: LayoutState, path: Path, x: float, y: float, width: float) -> LayoutState:
        """Place an image at a fixed position; the cursor does not move."""
        image_width, image_height = ImageReader(str(path)).getSize()
        height = width * image_height / image_width
        self._pages[state.page_index].append(ImageOp(path, x, y, width, height))
        return state
