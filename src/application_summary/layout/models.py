"""Layout data structures shared by the composer, footer stamper and writer.

Coordinates are in points measured from the top-left corner of the page;
the PDF writer flips them into reportlab's bottom-left space.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal, Optional, Union

from application_summary.layout.styles import TextStyle

# ── Layout items produced by renderers ───────────────────────────────


@dataclass(frozen=True)
class Line:
    """A run of text in one style; wraps to the available width."""

    text: str
    style: str
    indent: float = 0.0
    bullet: Optional[str] = None
    align: Literal["left", "center"] = "left"


@dataclass(frozen=True)
class Gap:
    """Vertical space of one line height in *style* (a ``moveDown``)."""

    style: str


LayoutItem = Union[Line, Gap]


# ── Draw operations stored on composed pages ─────────────────────────


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    style: TextStyle
    width: Optional[float] = None
    align: Literal["left", "center"] = "left"


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class ImageOp:
    path: Path
    x: float
    y: float
    width: float
    height: float


DrawOp = Union[TextOp, RectOp, ImageOp]


# ── Geometry and cursor state ────────────────────────────────────────


@dataclass(frozen=True)
class PageGeometry:
    width: float
    height: float
    margin: float

    @property
    def left(self) -> float:
        return self.margin

    @property
    def top(self) -> float:
        return self.margin

    @property
    def bottom(self) -> float:
        """Y of the bottom margin line; body text must stay above it."""
        return self.height - self.margin

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin


@dataclass(frozen=True)
class LayoutState:
    """Cursor position threaded through every drawing call."""

    y: float
    page_index: int = 0

    def advance(self, dy: float) -> LayoutState:
        return replace(self, y=self.y + dy)


# ── Composed output ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ComposedPage:
    index: int
    ops: tuple[DrawOp, ...] = ()

    def text_lines(self) -> list[str]:
        return [op.text for op in self.ops if isinstance(op, TextOp)]


@dataclass(frozen=True)
class ComposedDocument:
    """Every page of a summary with its final body content, before or after footers."""

    geometry: PageGeometry
    pages: tuple[ComposedPage, ...]
    case_reference: str = ""
    submitted_on: str = ""
    title: str = ""
    application_type: str = ""
    footers_applied: bool = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def text_lines(self) -> list[str]:
        return [line for page in self.pages for line in page.text_lines()]
