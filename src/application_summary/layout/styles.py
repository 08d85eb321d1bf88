"""Centralized style constants for the summary PDF."""

from __future__ import annotations

from dataclasses import dataclass

from application_summary.core.config import SummaryPDFConfig

# ── Colour palette (hex strings) ─────────────────────────────────────
# Kept as plain hex so the writer can convert to whatever color object
# the rendering library requires (e.g. reportlab HexColor).

TEXT_COLOR = "#444444"
MUTED_TEXT_COLOR = "#808080"
BANNER_BG_COLOR = "#000000"
BANNER_TEXT_COLOR = "#FFFFFF"

# ── Fixed copy ───────────────────────────────────────────────────────

APPLICATION_TYPE_LABEL = "Application Type"
DECLARATION_BANNER_TITLE = "Consent & Declaration"
PHYSICAL_INJURIES_LABEL = "Physical injuries"
BULLET = "\u2022"

# ── Geometry ─────────────────────────────────────────────────────────

LOGO_X = 450
LOGO_Y = 80
LOGO_WIDTH = 80
# Banner rectangle sits this far left of / above the text origin.
BANNER_OFFSET_X = 5
BANNER_OFFSET_Y = 6
# Gap between a list bullet and its text.
BULLET_GAP = 10


@dataclass(frozen=True)
class TextStyle:
    """Font, size and colour for one kind of text line."""

    name: str
    font: str
    size: float
    color: str
    line_spacing: float = 1.2

    @property
    def line_height(self) -> float:
        return self.size * self.line_spacing


def build_styles(config: SummaryPDFConfig) -> dict[str, TextStyle]:
    font = config.font_family
    bold = f"{font}-Bold"
    spacing = config.line_spacing

    def style(name: str, font_name: str, size: float, color: str) -> TextStyle:
        return TextStyle(name, font_name, size, color, spacing)

    return {
        "marking": style("marking", font, config.small_font_size, MUTED_TEXT_COLOR),
        "contact": style("contact", font, config.small_font_size, MUTED_TEXT_COLOR),
        "title": style("title", bold, config.title_font_size, TEXT_COLOR),
        "intro": style("intro", font, config.small_font_size, MUTED_TEXT_COLOR),
        "label": style("label", bold, config.body_font_size, TEXT_COLOR),
        "answer": style("answer", font, config.body_font_size, TEXT_COLOR),
        "banner": style("banner", bold, config.banner_font_size, BANNER_TEXT_COLOR),
        "declaration": style("declaration", font, config.declaration_font_size, TEXT_COLOR),
        "declaration_heading": style(
            "declaration_heading", bold, config.declaration_heading_font_size, TEXT_COLOR
        ),
        "declaration_strong": style("declaration_strong", bold, config.declaration_font_size, TEXT_COLOR),
        "footer": style("footer", font, config.small_font_size, MUTED_TEXT_COLOR),
    }
