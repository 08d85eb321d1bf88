"""Second pass: stamp a footer onto every composed page.

Runs only once all body content is final, because the page count is not
known until composition ends.  Footer geometry comes from the page height
and a fixed offset, so body margins are never touched.
"""

from __future__ import annotations

from dataclasses import replace

from application_summary.exceptions import LayoutError
from application_summary.layout.models import ComposedDocument, TextOp
from application_summary.layout.styles import TextStyle


class FooterStamper:
    def __init__(self, style: TextStyle, offset: float) -> None:
        self._style = style
        self._offset = offset

    @staticmethod
    def footer_text(case_reference: str, submitted_on: str) -> str:
        return f"Case reference no.: {case_reference}        Submitted on: {submitted_on}"

    def stamp(self, document: ComposedDocument) -> ComposedDocument:
        """Return a copy of *document* with one centred footer line per page."""
        if document.footers_applied:
            raise LayoutError("Footers have already been applied to this document")
        geometry = document.geometry
        footer = TextOp(
            x=0.0,
            y=geometry.height - self._offset,
            text=self.footer_text(document.case_reference, document.submitted_on),
            style=self._style,
            width=geometry.width,
            align="center",
        )
        pages = tuple(replace(page, ops=page.ops + (footer,)) for page in document.pages)
        return replace(document, pages=pages, footers_applied=True)
