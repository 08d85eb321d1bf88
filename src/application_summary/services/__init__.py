"""Build service: render a record and deliver it to a sink."""

from __future__ import annotations

from application_summary.services.summary_service import BuildResult, Sink, SummaryService, build

__all__ = ["BuildResult", "Sink", "SummaryService", "build"]
