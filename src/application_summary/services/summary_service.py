"""Summary build service: render once, write to a sink, report the outcome.

``build`` always resolves to a ``BuildResult``; render and sink faults come
back as ``ok=False`` with a typed error instead of propagating, so callers
get a definite answer for every submission.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

from application_summary.classifier import ApplicationType
from application_summary.exceptions import LayoutError, SinkWriteError, SummaryError
from application_summary.formatters.pdf_formatter import PDFFormatter, coerce_record
from application_summary.models import ApplicationRecord

log = logging.getLogger(__name__)

Sink = Union[str, "os.PathLike[str]", BinaryIO]


@dataclass(frozen=True)
class BuildResult:
    """Outcome of one summary build."""

    ok: bool
    page_count: int = 0
    bytes_written: int = 0
    application_type: Optional[ApplicationType] = None
    error: Optional[SummaryError] = None

    @classmethod
    def failure(cls, error: SummaryError) -> BuildResult:
        return cls(ok=False, error=error)


def _describe(sink: Any) -> str:
    if isinstance(sink, (str, os.PathLike)):
        return str(sink)
    return getattr(sink, "name", None) or type(sink).__name__


def _write_to_sink(payload: bytes, sink: Sink) -> int:
    """Blocking write; returns once the sink has accepted and flushed the data."""
    if isinstance(sink, (str, os.PathLike)):
        Path(sink).write_bytes(payload)
        return len(payload)
    sink.write(payload)
    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()
    return len(payload)


class SummaryService:
    """Builds summary PDFs; instances share no mutable state between builds."""

    def __init__(self, formatter: PDFFormatter | None = None) -> None:
        self._formatter = formatter or PDFFormatter()

    async def build(
        self,
        record: Union[ApplicationRecord, dict[str, Any]],
        sink: Sink,
    ) -> BuildResult:
        """Render *record* and write it to *sink*; resolves after the sink confirms."""
        try:
            parsed = coerce_record(record)
            document = await asyncio.to_thread(self._formatter.render_document, parsed)
            payload = await asyncio.to_thread(self._formatter.write, document)
        except SummaryError as exc:
            log.error("Summary render failed: %s", exc)
            return BuildResult.failure(exc)
        except Exception as exc:
            log.exception("Unexpected error while rendering summary")
            error = LayoutError(f"Unexpected error while rendering summary: {exc}")
            error.__cause__ = exc
            return BuildResult.failure(error)

        target = _describe(sink)
        try:
            written = await asyncio.to_thread(_write_to_sink, payload, sink)
        except Exception as exc:
            log.error(
                "Could not write summary for case %s to %s: %s",
                parsed.meta.case_reference,
                target,
                exc,
                exc_info=not isinstance(exc, OSError),
            )
            error = SinkWriteError(f"Could not write summary to {target}: {exc}")
            error.__cause__ = exc
            return BuildResult.failure(error)

        log.info(
            "Wrote %d-page summary for case %s to %s (%d bytes)",
            document.page_count,
            parsed.meta.case_reference,
            target,
            written,
        )
        return BuildResult(
            ok=True,
            page_count=document.page_count,
            bytes_written=written,
            application_type=ApplicationType(document.application_type),
        )


async def build(
    record: Union[ApplicationRecord, dict[str, Any]],
    sink: Sink,
    formatter: PDFFormatter | None = None,
) -> BuildResult:
    """Convenience wrapper: ``await build(record, "summary.pdf")``."""
    return await SummaryService(formatter).build(record, sink)
