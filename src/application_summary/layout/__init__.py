"""Layout engine: page composition, question rendering and footers."""

from __future__ import annotations

from application_summary.layout.composer import PageComposer
from application_summary.layout.footer import FooterStamper
from application_summary.layout.models import (
    ComposedDocument,
    ComposedPage,
    Gap,
    ImageOp,
    LayoutState,
    Line,
    PageGeometry,
    RectOp,
    TextOp,
)
from application_summary.layout.questions import QuestionRenderer

__all__ = [
    "ComposedDocument",
    "ComposedPage",
    "FooterStamper",
    "Gap",
    "ImageOp",
    "LayoutState",
    "Line",
    "PageComposer",
    "PageGeometry",
    "QuestionRenderer",
    "RectOp",
    "TextOp",
]
