"""Output formatters for rendering an ApplicationRecord.

Usage::

    from application_summary.formatters import PDFFormatter

    pdf_bytes = PDFFormatter().format(record)
"""

from __future__ import annotations

from application_summary.formatters.pdf_formatter import PDFFormatter

__all__ = ["PDFFormatter"]
