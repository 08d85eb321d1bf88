"""PDF output formatter using reportlab.

Renders an ``ApplicationRecord`` as the printable summary of a submitted
application.  Rendering is a three-step pipeline:

1. ``compose`` lays out the header, application type, every theme and the
   declaration into a ``ComposedDocument`` (pages of draw operations);
2. ``FooterStamper.stamp`` adds the case-reference footer to each page;
3. ``write`` draws every page onto a reportlab canvas and returns bytes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Any, Union

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.units import inch
from reportlab.pdfbase.pdfmetrics import getAscent
from reportlab.pdfgen.canvas import Canvas

from application_summary.classifier import ApplicationType, classify
from application_summary.core.config import SummaryPDFConfig
from application_summary.declaration import Block, Heading, ListItem, Paragraph, extract
from application_summary.exceptions import LayoutError
from application_summary.layout.composer import PageComposer
from application_summary.layout.footer import FooterStamper
from application_summary.layout.formatting import format_date, format_timestamp
from application_summary.layout.models import (
    ComposedDocument,
    Gap,
    ImageOp,
    LayoutItem,
    LayoutState,
    Line,
    PageGeometry,
    RectOp,
    TextOp,
)
from application_summary.layout.questions import QuestionRenderer
from application_summary.layout.styles import (
    APPLICATION_TYPE_LABEL,
    BULLET,
    DECLARATION_BANNER_TITLE,
    LOGO_WIDTH,
    LOGO_X,
    LOGO_Y,
    build_styles,
)
from application_summary.models import ApplicationRecord

log = logging.getLogger(__name__)

_PAGE_SIZES = {"letter": LETTER, "a4": A4}


class BuildPhase(str, Enum):
    HEADER = "header"
    BODY = "body"
    DECLARATION = "declaration"
    FINALIZING = "finalizing"


def _hex(color_str: str) -> HexColor:
    return HexColor(color_str)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def coerce_record(record: Union[ApplicationRecord, dict[str, Any]]) -> ApplicationRecord:
    if isinstance(record, ApplicationRecord):
        return record
    return ApplicationRecord.from_dict(record)


class PDFFormatter:
    """Renders an ``ApplicationRecord`` as a paginated summary PDF."""

    def __init__(
        self,
        config: SummaryPDFConfig | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config or SummaryPDFConfig()
        self._clock = clock
        width, height = _PAGE_SIZES.get(self._config.page_size, LETTER)
        self._geometry = PageGeometry(float(width), float(height), self._config.margin_inches * inch)
        self._styles = build_styles(self._config)
        self._questions = QuestionRenderer(self._config.display_timezone, self._config.indent)
        self._footers = FooterStamper(self._styles["footer"], self._config.footer_offset)

    # ── Public API ───────────────────────────────────────────────────

    def format(self, record: Union[ApplicationRecord, dict[str, Any]], **kwargs: Any) -> bytes:
        """Render *record* to PDF bytes."""
        return self.write(self.render_document(record))

    def format_to_file(
        self, record: Union[ApplicationRecord, dict[str, Any]], path: Path, **kwargs: Any
    ) -> Path:
        """Write PDF to *path* and return it."""
        path.write_bytes(self.format(record, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"

    @property
    def questions(self) -> QuestionRenderer:
        """Question renderer used by ``compose``; ``register`` adds per-id layouts."""
        return self._questions

    def render_document(self, record: Union[ApplicationRecord, dict[str, Any]]) -> ComposedDocument:
        """Compose every page, then stamp footers once the page count is known."""
        document = self.compose(record)
        log.debug("Phase %s: stamping %d footers", BuildPhase.FINALIZING.value, document.page_count)
        return self._footers.stamp(document)

    # ── Phase 1: composition ─────────────────────────────────────────

    def compose(self, record: Union[ApplicationRecord, dict[str, Any]]) -> ComposedDocument:
        """Lay out the whole summary body without footers."""
        record = coerce_record(record)
        application_type = classify(record)
        blocks = extract(record.declaration.label)
        submitted = record.meta.submitted_date or self._clock()

        composer = PageComposer(self._geometry, self._styles, self._config)
        state = composer.start()

        log.debug("Phase %s", BuildPhase.HEADER.value)
        state = self._write_header(composer, state)
        state = composer.place(state, self._application_type_items(application_type))

        log.debug("Phase %s: %d themes", BuildPhase.BODY.value, len(record.themes))
        for theme in record.themes:
            state = composer.banner(state, theme.title)
            for question in theme.values.values():
                if question.hidden:
                    continue
                state = composer.place(state, self._questions.render(question))

        log.debug("Phase %s: %d blocks", BuildPhase.DECLARATION.value, len(blocks))
        state = composer.banner(state, DECLARATION_BANNER_TITLE)
        composer.place(state, self._declaration_items(blocks, record, submitted))

        log.info(
            "Composed %d-page summary for case %s (%s)",
            composer.page_count,
            record.meta.case_reference or "<none>",
            application_type.value,
        )
        return ComposedDocument(
            geometry=self._geometry,
            pages=composer.pages(),
            case_reference=record.meta.case_reference,
            submitted_on=format_timestamp(submitted, self._config.display_timezone),
            title=self._config.title,
            application_type=application_type.value,
        )

    def _write_header(self, composer: PageComposer, state: LayoutState) -> LayoutState:
        state = composer.place(state, [Line(self._config.protective_marking, "marking", align="center")])
        if self._config.logo_path is not None:
            state = composer.image(state, self._config.logo_path, LOGO_X, LOGO_Y, LOGO_WIDTH)
        items: list[LayoutItem] = [Line(text, "contact") for text in self._config.header_lines]
        items += [
            Gap("contact"),
            Line(self._config.title, "title"),
            Gap("intro"),
            Line(self._config.intro_text, "intro"),
            Gap("intro"),
        ]
        return composer.place(state, items)

    @staticmethod
    def _application_type_items(application_type: ApplicationType) -> list[LayoutItem]:
        return [
            Line(APPLICATION_TYPE_LABEL, "label"),
            Line(application_type.value, "answer"),
            Gap("answer"),
        ]

    def _declaration_items(
        self, blocks: list[Block], record: ApplicationRecord, submitted: datetime
    ) -> list[LayoutItem]:
        items: list[LayoutItem] = []
        for block in blocks:
            if isinstance(block, Paragraph):
                items += [Gap("declaration"), Line(block.text, "declaration")]
            elif isinstance(block, Heading):
                items += [Gap("declaration_heading"), Line(block.text, "declaration_heading")]
            elif isinstance(block, ListItem):
                indent = self._config.bullet_indent + block.depth * self._config.list_indent
                items.append(Line(block.text, "declaration", indent=indent, bullet=BULLET))
            else:
                raise LayoutError(f"Unknown declaration block {type(block).__name__}")

        submitted_date = format_date(submitted, self._config.display_timezone)
        items += [
            Gap("declaration_strong"),
            Line(f"Date: {submitted_date}", "declaration_strong"),
            Gap("declaration_strong"),
            Line(record.declaration.value_label, "declaration_strong"),
        ]
        return items

    # ── Phase 3: PDF output ──────────────────────────────────────────

    def write(self, document: ComposedDocument) -> bytes:
        """Draw every composed page onto a reportlab canvas."""
        buffer = BytesIO()
        geometry = document.geometry
        canvas = Canvas(
            buffer,
            pagesize=(geometry.width, geometry.height),
            invariant=int(self._config.invariant),
        )
        canvas.setTitle(document.title)
        if document.case_reference:
            canvas.setSubject(f"Case reference {document.case_reference}")

        for page in document.pages:
            for op in page.ops:
                self._draw(canvas, op, geometry.height)
            canvas.showPage()
        canvas.save()
        return buffer.getvalue()

    @staticmethod
    def _draw(canvas: Canvas, op: Any, page_height: float) -> None:
        if isinstance(op, RectOp):
            canvas.setFillColor(_hex(op.color))
            canvas.rect(op.x, page_height - op.y - op.height, op.width, op.height, stroke=0, fill=1)
        elif isinstance(op, TextOp):
            style = op.style
            baseline = page_height - op.y - getAscent(style.font, style.size)
            canvas.setFont(style.font, style.size)
            canvas.setFillColor(_hex(style.color))
            if op.align == "center" and op.width is not None:
                canvas.drawCentredString(op.x + op.width / 2, baseline, op.text)
            else:
                canvas.drawString(op.x, baseline, op.text)
        elif isinstance(op, ImageOp):
            canvas.drawImage(
                str(op.path),
                op.x,
                page_height - op.y - op.height,
                width=op.width,
                height=op.height,
                mask="auto",
            )
        else:
            raise LayoutError(f"Cannot draw {type(op).__name__}")
